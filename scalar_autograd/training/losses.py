"""
Scalar losses built as computation graphs.
"""

from typing import Sequence

from ..core.value import Value
from ..exceptions import ShapeMismatchError


def sse_loss(predictions: Sequence, targets: Sequence) -> Value:
    """Sum of squared errors: sum_i (p_i - t_i)^2."""
    if len(predictions) != len(targets):
        raise ShapeMismatchError("sse_loss", len(predictions), len(targets))
    if len(predictions) == 0:
        raise ShapeMismatchError("sse_loss", 1, 0)
    loss = Value(0.0)
    for p, t in zip(predictions, targets):
        diff = p - t if isinstance(p, Value) else Value(p) - t
        loss = loss + diff * diff
    return loss


def mse_loss(predictions: Sequence, targets: Sequence) -> Value:
    """Mean squared error: sse / n."""
    return sse_loss(predictions, targets) / len(predictions)


LOSSES = {
    'sse': sse_loss,
    'mse': mse_loss,
}
