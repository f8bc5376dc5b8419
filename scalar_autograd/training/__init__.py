"""
Training utilities: losses, gradient descent and a full-batch training loop.
"""

from .losses import mse_loss, sse_loss
from .sgd import SGD
from .trainer import Trainer, TrainingConfig

__all__ = [
    'mse_loss',
    'sse_loss',
    'SGD',
    'Trainer',
    'TrainingConfig',
]
