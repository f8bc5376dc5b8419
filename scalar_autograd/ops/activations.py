# scalar_autograd/ops/activations.py
import numpy as np

from ..core.node import Node, Op
from ..core.value import Value
from .arithmetic import _as_value


def tanh(x):
    """
    Hyperbolic tangent, (e^{2x} - 1) / (e^{2x} + 1).

    np.tanh gives the same value without overflowing for large |x|.
    Local partial: 1 - tanh(x)^2, read back from the output.
    """
    x = _as_value(x)
    return Value.from_node(np.tanh(x.data), Node(Op.TANH, (x,)))


def relu(x):
    """max(0, x); nan propagates. Local partial: 1 if output > 0 else 0."""
    x = _as_value(x)
    return Value.from_node(np.maximum(x.data, 0.0), Node(Op.RELU, (x,)))


Value.tanh = tanh
Value.relu = relu
