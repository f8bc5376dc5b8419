"""
Demo: train a 3 -> [4, 4, 1] tanh network on four labelled points.

    python -m scalar_autograd --steps 100 --lr 0.05 --seed 0
"""

import argparse
import logging

from .core.graph_utils import log_graph_summary
from .logger import setup_logger
from .nn import MLP
from .training import Trainer, TrainingConfig

XS = [
    [2.0, 3.0, -1.0],
    [3.0, -1.0, 0.5],
    [0.5, 1.0, 1.0],
    [1.0, 1.0, -1.0],
]
YS = [1.0, -1.0, -1.0, 1.0]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="scalar_autograd", description=__doc__.strip().splitlines()[0])
    parser.add_argument("--steps", type=int, default=100)
    parser.add_argument("--lr", type=float, default=0.05)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--loss", choices=["mse", "sse"], default="mse")
    parser.add_argument("--log-every", type=int, default=10)
    parser.add_argument("--json-logs", action="store_true")
    parser.add_argument("--quiet", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logger = setup_logger(level=logging.WARNING if args.quiet else logging.INFO,
                          json_format=args.json_logs)

    model = MLP(3, [4, 4, 1], seed=args.seed)
    logger.info("%r with %d parameters", model, model.num_parameters())
    log_graph_summary(model(XS[0])[0])

    config = TrainingConfig(
        learning_rate=args.lr,
        steps=args.steps,
        loss=args.loss,
        log_every=args.log_every,
        verbose=not args.quiet,
    )
    result = Trainer(model, config).fit(XS, YS)
    for x, y, p in zip(XS, YS, result['predictions']):
        logger.info("x=%s target=%+.1f prediction=%+.4f", x, y, p)
    return result


if __name__ == "__main__":
    main()
