"""
Parameter initialization policies.

Any zero-mean, bounded, symmetric distribution is acceptable; the default
draws weights and bias alike from U(-1, 1).
"""

import numpy as np
from typing import Optional


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def uniform_init(rng: np.random.Generator, low: float = -1.0, high: float = 1.0) -> float:
    """Draw one parameter from U(low, high)."""
    return float(rng.uniform(low, high))
