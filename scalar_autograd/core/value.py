# scalar_autograd/core/value.py
from __future__ import annotations
import numpy as np
from numbers import Real
from typing import Any, Tuple

from .node import LEAF_NODE, Node, Op


def _check_numeric(x: Any) -> None:
    # bool is an int subclass but never a meaningful scalar here
    if isinstance(x, bool) or not isinstance(x, (Real, np.integer, np.floating)):
        raise TypeError(
            f"Value only accepts real numeric scalars (int, float, numpy scalar), "
            f"but got {type(x)}"
        )


class Value:
    """
    One scalar in a computation graph.

    Attributes
    ----------
    data  : np.float64
        Primal value. Mutable (optimizers update parameters in place).
    grad  : float
        Accumulated d(root)/d(self) of the latest backward pass.
    label : str
        Optional debug name.

    The graph topology (op, operands, exponent) lives in an immutable Node and
    is fixed at construction. Arithmetic operators are bound in ops.arithmetic,
    tanh/relu in ops.activations.
    """

    def __init__(self, data: Any, label: str = ""):
        _check_numeric(data)
        self._data = np.float64(data)
        self.grad = 0.0
        self.label = label
        self._node = LEAF_NODE

    @classmethod
    def from_node(cls, data: Any, node: Node) -> "Value":
        """Create a derived value recording the primitive that produced it."""
        out = cls(data)
        out._node = node
        return out

    @property
    def data(self) -> np.float64:
        return self._data

    @data.setter
    def data(self, new_data: Any) -> None:
        _check_numeric(new_data)
        self._data = np.float64(new_data)

    @property
    def node(self) -> Node:
        return self._node

    @property
    def op(self) -> Op:
        return self._node.op

    @property
    def operands(self) -> Tuple[Value, ...]:
        return self._node.operands

    @property
    def op_label(self) -> str:
        return self._node.label

    @property
    def exponent(self):
        return self._node.exponent

    @property
    def is_leaf(self) -> bool:
        return self._node.op is Op.LEAF

    def backward(self, seed: float = 1.0) -> None:
        """Treat self as the root and accumulate gradients into every reachable value."""
        from .engine import backward
        backward(self, seed=seed)

    def zero_grad(self) -> None:
        self.grad = 0.0

    def __float__(self):
        return float(self._data)

    def __repr__(self):
        return f"Value(data={self._data}, grad={self.grad}, label={self.label})"
