"""
Base class shared by Neuron, Layer and MLP.
"""

from typing import List, Sequence

from ..core.engine import zero_grad
from ..core.value import Value
from ..exceptions import ConfigurationError, ShapeMismatchError


class Module:
    """Something that owns trainable leaf Values."""

    def parameters(self) -> List[Value]:
        return []

    def num_parameters(self) -> int:
        return len(self.parameters())

    def zero_grad(self) -> None:
        """Reset every parameter's grad. Required before each new backward pass."""
        zero_grad(self.parameters())

    def forward(self, inputs):
        raise NotImplementedError

    def __call__(self, inputs):
        return self.forward(inputs)


def check_width(width, what: str) -> int:
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
        raise ConfigurationError(f"{what} must be a positive integer, got {width!r}")
    return width


def as_inputs(inputs: Sequence, expected: int, owner: str) -> List[Value]:
    """Validate the input width and promote raw numbers to leaf Values."""
    if len(inputs) != expected:
        raise ShapeMismatchError(owner, expected, len(inputs))
    return [x if isinstance(x, Value) else Value(x) for x in inputs]
