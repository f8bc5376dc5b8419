# scalar_autograd/core/node.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple


class Op(Enum):
    """Primitive that produced a Value. The engine dispatches local derivatives on this tag."""
    LEAF = "leaf"
    ADD = "add"
    MUL = "mul"
    POW = "pow"
    TANH = "tanh"
    RELU = "relu"


_SYMBOLS = {Op.LEAF: "", Op.ADD: "+", Op.MUL: "*", Op.TANH: "tanh", Op.RELU: "relu"}


@dataclass(frozen=True, eq=False)
class Node:
    """
    Provenance of one Value in the computation graph.

    Attributes
    ----------
    op       : Op
        Which primitive produced the value.
    operands : Tuple[Value, ...]
        Inputs of the primitive, in order. Empty for leaves; the same Value
        may appear twice (e.g. x * x).
    exponent : Optional[float]
        Constant exponent, only set for Op.POW.
    """
    op: Op
    operands: Tuple[Any, ...] = ()
    exponent: Optional[float] = None

    @property
    def label(self) -> str:
        if self.op is Op.POW:
            return f"**{self.exponent}"
        return _SYMBOLS[self.op]


LEAF_NODE = Node(Op.LEAF)
