# scalar_autograd/core/__init__.py

"""
Core public API: the graph node, the Value wrapper and the reverse-mode engine.

Exports:
    Value             : Differentiable scalar recorded in the computation graph.
    Node, Op          : Provenance record and primitive tag of a Value.
    backward          : Run one reverse pass from a root value.
    topological_order : Operands-before-consumers ordering of a graph.
    zero_grad         : Reset grads on a collection of values.
    zero_graph        : Reset grads on everything reachable from a root.
"""

from .node import Node, Op
from .value import Value
from .engine import backward, topological_order, zero_grad, zero_graph

__all__ = [
    "Node", "Op",
    "Value",
    "backward", "topological_order",
    "zero_grad", "zero_graph",
]
