"""
Losses, SGD and the end-to-end training loop.
"""

import logging

import pytest

from scalar_autograd import (
    ConfigurationError, MLP, SGD, ShapeMismatchError, Trainer, TrainingConfig,
    Value, mse_loss, sse_loss,
)
from scalar_autograd.__main__ import XS, YS, main

XS_TRAIN = [
    [2.0, 3.0, -1.0],
    [3.0, -1.0, 0.5],
    [0.5, 1.0, 1.0],
    [1.0, 1.0, -1.0],
]
YS_TRAIN = [1.0, -1.0, -1.0, 1.0]


def test_sse_and_mse():
    preds = [Value(0.5), Value(-0.5)]
    sse = sse_loss(preds, [1.0, -1.0])
    assert sse.data == pytest.approx(0.5)
    assert mse_loss(preds, [1.0, -1.0]).data == pytest.approx(0.25)
    sse.backward()
    assert preds[0].grad == pytest.approx(-1.0)
    assert preds[1].grad == pytest.approx(1.0)


def test_loss_length_mismatch():
    with pytest.raises(ShapeMismatchError):
        mse_loss([Value(1.0)], [1.0, 2.0])
    with pytest.raises(ShapeMismatchError):
        sse_loss([], [])


def test_sgd_step():
    p = Value(1.0)
    p.grad = 2.0
    opt = SGD([p], lr=0.1)
    opt.step()
    assert p.data == pytest.approx(0.8)
    opt.zero_grad()
    assert p.grad == 0.0
    with pytest.raises(ConfigurationError):
        SGD([p], lr=0.0)


def test_sgd_fits_a_line():
    xs, ys = [1.0, 3.0], [3.0, 7.0]
    a, b = Value(1.0), Value(1.0)
    opt = SGD([a, b], lr=0.05)
    for _ in range(500):
        loss = sse_loss([a * x + b for x in xs], ys)
        opt.zero_grad()
        loss.backward()
        opt.step()
    assert float(a.data) == pytest.approx(2.0, abs=1e-2)
    assert float(b.data) == pytest.approx(1.0, abs=1e-2)


@pytest.mark.parametrize("kwargs", [
    {"learning_rate": 0.0},
    {"steps": 0},
    {"log_every": 0},
    {"loss": "hinge"},
])
def test_training_config_validation(kwargs):
    with pytest.raises(ConfigurationError):
        TrainingConfig(**kwargs)


def test_end_to_end_loss_decreases():
    model = MLP(3, [4, 1], seed=0)
    config = TrainingConfig(learning_rate=0.05, steps=100, loss="mse", verbose=False)
    result = Trainer(model, config).fit(XS_TRAIN, YS_TRAIN)
    losses = result['losses']
    assert len(losses) == 100
    assert losses[90] < losses[0]
    assert result['final_loss'] == losses[-1]
    assert result['initial_loss'] == losses[0]
    assert len(result['predictions']) == 4


def test_trainer_rejects_multi_output_model():
    model = MLP(3, [2], seed=0)
    with pytest.raises(ShapeMismatchError):
        Trainer(model, TrainingConfig(steps=1, verbose=False)).fit(XS_TRAIN, YS_TRAIN)


def test_trainer_rejects_mismatched_targets():
    model = MLP(3, [1], seed=0)
    with pytest.raises(ShapeMismatchError):
        Trainer(model, TrainingConfig(steps=1, verbose=False)).fit(XS_TRAIN, YS_TRAIN[:2])


def test_trainer_logs_progress(caplog):
    model = MLP(3, [4, 1], seed=0)
    config = TrainingConfig(steps=5, log_every=2)
    with caplog.at_level(logging.INFO, logger="scalar_autograd"):
        Trainer(model, config).fit(XS_TRAIN, YS_TRAIN)
    step_lines = [r.getMessage() for r in caplog.records if r.getMessage().startswith("step ")]
    assert [line.split(":")[0] for line in step_lines] == ["step 0", "step 2", "step 4"]


@pytest.fixture
def restore_package_logger():
    logger = logging.getLogger("scalar_autograd")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


def test_demo_main_runs(restore_package_logger):
    result = main(["--steps", "20", "--seed", "0", "--quiet"])
    assert result['steps'] == 20
    assert len(result['predictions']) == len(XS) == len(YS)
    # --quiet raises the package logger to WARNING; the fixture undoes it
    assert restore_package_logger.level == logging.WARNING
