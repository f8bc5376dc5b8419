"""
Finite-difference gradient checking.

Central differences:
    df/dx ~ [f(x + eps) - f(x - eps)] / (2 eps)

Used to validate the engine's local derivative rules against the function values alone.
"""

import numpy as np
from typing import Callable, List, Sequence, Tuple

from .core.value import Value


def numerical_gradient(f: Callable[[float], float], x: float, eps: float = 1e-6) -> float:
    """Central-difference derivative of a scalar function at x."""
    return (f(x + eps) - f(x - eps)) / (2.0 * eps)


def check_gradient(fn: Callable[[List[Value]], Value], inputs: Sequence[float],
                   eps: float = 1e-6, tol: float = 1e-4) -> Tuple[List[float], List[float], bool]:
    """
    Compare engine gradients of fn at `inputs` with central differences.

    Args:
        fn: Maps a list of Values to a scalar Value
        inputs: Point at which to differentiate
        eps: Bump size
        tol: Absolute and relative tolerance

    Returns:
        (analytic, numeric, ok)
    """
    point = [float(x) for x in inputs]
    values = [Value(x) for x in point]
    out = fn(values)
    if not isinstance(out, Value):
        raise TypeError(f"check_gradient expects fn to return a Value, got {type(out)}")
    out.backward()
    analytic = [float(v.grad) for v in values]

    numeric = []
    for i in range(len(point)):
        def f(xi, i=i):
            bumped = list(point)
            bumped[i] = xi
            return float(fn([Value(x) for x in bumped]).data)
        numeric.append(numerical_gradient(f, point[i], eps))

    ok = bool(np.allclose(analytic, numeric, rtol=tol, atol=tol))
    return analytic, numeric, ok
