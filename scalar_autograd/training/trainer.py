"""
Training loop for single-output networks.

Each step is one full-batch gradient-descent update:

    loss = L(model(x_1), ..., model(x_n); y_1, ..., y_n)
    zero grads -> loss.backward() -> p -= lr * dL/dp

Parameters are the only values reused across steps; inputs and targets are
promoted to fresh leaves every step, so zeroing the parameters is enough.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

from ..exceptions import ConfigurationError, ShapeMismatchError
from ..nn.module import Module
from .losses import LOSSES
from .sgd import SGD

logger = logging.getLogger(__name__)


@dataclass
class TrainingConfig:
    """Configuration for Trainer.fit."""
    # Optimization
    learning_rate: float = 0.05
    steps: int = 100
    loss: str = 'mse'  # 'mse', 'sse'

    # Logging
    log_every: int = 10
    verbose: bool = True

    def __post_init__(self):
        if self.learning_rate <= 0:
            raise ConfigurationError(f"learning_rate must be positive, got {self.learning_rate}")
        if self.steps <= 0:
            raise ConfigurationError(f"steps must be positive, got {self.steps}")
        if self.log_every <= 0:
            raise ConfigurationError(f"log_every must be positive, got {self.log_every}")
        if self.loss not in LOSSES:
            raise ConfigurationError(
                f"Unknown loss {self.loss!r}; expected one of: {', '.join(LOSSES)}"
            )


class Trainer:
    """
    Fit a single-output model to scalar targets with full-batch SGD.

    Usage:
        >>> model = MLP(3, [4, 4, 1], seed=0)
        >>> result = Trainer(model, TrainingConfig(steps=50)).fit(xs, ys)
        >>> result['final_loss']
    """

    def __init__(self, model: Module, config: TrainingConfig = None):
        self.model = model
        self.config = config if config is not None else TrainingConfig()
        self.loss_fn = LOSSES[self.config.loss]
        self.optimizer = SGD(model.parameters(), lr=self.config.learning_rate)

    def _predict(self, x: Sequence):
        out = self.model(x)
        if len(out) != 1:
            raise ShapeMismatchError("Trainer (model outputs)", 1, len(out))
        return out[0]

    def fit(self, xs: Sequence[Sequence[float]], ys: Sequence[float]) -> Dict:
        """
        Run `config.steps` updates.

        Returns:
            {
                'losses': [float, ...],        # loss before each update
                'initial_loss': float,
                'final_loss': float,           # loss at the last step
                'steps': int,
                'predictions': [float, ...],   # model outputs at the last step
            }
        """
        if len(xs) != len(ys):
            raise ShapeMismatchError("Trainer.fit (targets)", len(xs), len(ys))
        cfg = self.config

        if cfg.verbose:
            logger.info("Training %r: %d parameters, %d samples, %d steps, lr=%g, loss=%s",
                        self.model, len(self.optimizer.params), len(xs),
                        cfg.steps, cfg.learning_rate, cfg.loss)

        losses: List[float] = []
        predictions: List[float] = []
        for step in range(cfg.steps):
            preds = [self._predict(x) for x in xs]
            loss = self.loss_fn(preds, ys)

            self.optimizer.zero_grad()
            loss.backward()
            self.optimizer.step()

            losses.append(float(loss.data))
            predictions = [float(p.data) for p in preds]
            if cfg.verbose and step % cfg.log_every == 0:
                logger.info("step %d: loss=%.6f", step, losses[-1])

        if cfg.verbose:
            logger.info("Training complete: loss %.6f -> %.6f", losses[0], losses[-1])

        return {
            'losses': losses,
            'initial_loss': losses[0],
            'final_loss': losses[-1],
            'steps': cfg.steps,
            'predictions': predictions,
        }
