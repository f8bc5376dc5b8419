# scalar_autograd/ops/arithmetic.py
import logging
import numpy as np
from numbers import Real

from ..core.node import Node, Op
from ..core.value import Value

logger = logging.getLogger(__name__)


def _as_value(x):
    """Ensure x is a Value; otherwise promote it to a fresh leaf (never cached)."""
    return x if isinstance(x, Value) else Value(x)


def add(a, b):
    """a + b. Local partials: 1, 1."""
    a, b = _as_value(a), _as_value(b)
    return Value.from_node(a.data + b.data, Node(Op.ADD, (a, b)))


def mul(a, b):
    """a * b. Local partials: b, a."""
    a, b = _as_value(a), _as_value(b)
    return Value.from_node(a.data * b.data, Node(Op.MUL, (a, b)))


def pow(a, exponent):
    """
    a ** exponent for a constant real exponent.

    Local partial: exponent * a^(exponent-1). No derivative with respect to the
    exponent, so it cannot be a Value. A negative base with a non-integral
    exponent (or 0 to a negative power) yields nan/inf, never a finite stand-in.
    """
    if isinstance(exponent, Value):
        raise TypeError("pow() exponent must be an int/float constant, not a Value")
    if isinstance(exponent, bool) or not isinstance(exponent, (Real, np.integer, np.floating)):
        raise TypeError(f"pow() exponent must be an int/float constant, got {type(exponent)}")
    a = _as_value(a)
    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        data = np.power(a.data, np.float64(exponent))
    if not np.isfinite(data):
        logger.warning("pow(%s, %s) is outside the real domain: %s", a.data, exponent, data)
    return Value.from_node(data, Node(Op.POW, (a,), exponent=exponent))


def neg(a):
    """-a, defined as a * (-1)."""
    return mul(a, -1.0)


def sub(a, b):
    """a - b, defined as a + (-b)."""
    return add(a, neg(b))


def div(a, b):
    """a / b, defined as a * b^-1."""
    return mul(a, pow(b, -1))


# Bind Python operators to Value
Value.__add__      = lambda self, other: add(self, other)
Value.__radd__     = lambda self, other: add(other, self)
Value.__sub__      = lambda self, other: sub(self, other)
Value.__rsub__     = lambda self, other: sub(other, self)
Value.__mul__      = lambda self, other: mul(self, other)
Value.__rmul__     = lambda self, other: mul(other, self)
Value.__truediv__  = lambda self, other: div(self, other)
Value.__rtruediv__ = lambda self, other: div(other, self)
Value.__neg__      = lambda self: neg(self)
Value.__pow__      = lambda self, other: pow(self, other)
