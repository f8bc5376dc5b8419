# scalar_autograd/core/engine.py
from __future__ import annotations
import logging
import numpy as np
from typing import Iterable, List

from .node import Op
from .value import Value

logger = logging.getLogger(__name__)


def topological_order(root: Value) -> List[Value]:
    """
    Post-order DFS over operand edges: every value appears once, after all of
    its operands. Iterative so long chains do not hit the recursion limit.

    The visited set is local to the call, so repeated or overlapping passes
    never see stale markers.
    """
    order: List[Value] = []
    visited = set()
    stack = [(root, False)]
    while stack:
        v, expanded = stack.pop()
        if expanded:
            order.append(v)
            continue
        if id(v) in visited:
            continue
        visited.add(id(v))
        stack.append((v, True))
        # reversed so operands are visited left to right
        for operand in reversed(v.operands):
            if id(operand) not in visited:
                stack.append((operand, False))
    return order


# ---------------- local partials d(out)/d(operand_i), per primitive ---------------- #
# Evaluated at backward time from the current operand/output data.

def _add_partials(out: Value):
    return (1.0, 1.0)

def _mul_partials(out: Value):
    a, b = out.operands
    return (b.data, a.data)

def _pow_partials(out: Value):
    (a,) = out.operands
    n = out.exponent
    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        return (n * np.power(a.data, n - 1),)

def _tanh_partials(out: Value):
    # d tanh(x)/dx = 1 - tanh(x)^2, taken from the output
    return (1.0 - out.data * out.data,)

def _relu_partials(out: Value):
    # slope 0 at exactly x == 0
    return (1.0 if out.data > 0 else 0.0,)


_LOCAL_PARTIALS = {
    Op.ADD: _add_partials,
    Op.MUL: _mul_partials,
    Op.POW: _pow_partials,
    Op.TANH: _tanh_partials,
    Op.RELU: _relu_partials,
}


def _propagate(v: Value) -> None:
    if v.op is Op.LEAF:
        return
    partials = _LOCAL_PARTIALS[v.op](v)
    for operand, partial in zip(v.operands, partials):
        # accumulate: an operand may feed several consumers (or the same one twice)
        operand.grad = operand.grad + partial * v.grad


def backward(root: Value, seed: float = 1.0) -> None:
    """
    Run one reverse pass from `root`.

    Sets root.grad = seed (dy/dy), then visits the reachable graph in reverse
    topological order so each value's grad is complete before it propagates.
    Gradients are added onto whatever is already stored; callers zero them
    between passes (see zero_grad / zero_graph).
    """
    order = topological_order(root)
    root.grad = seed
    for v in reversed(order):
        _propagate(v)
    logger.debug("backward pass over %d values", len(order))


def zero_grad(values: Iterable[Value]) -> None:
    """Reset grad on the given values (typically model parameters)."""
    for v in values:
        v.grad = 0.0


def zero_graph(root: Value) -> None:
    """Reset grad on every value reachable from `root`."""
    zero_grad(topological_order(root))
