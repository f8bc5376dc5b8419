"""
Plain gradient descent over a list of leaf Values.
"""

from typing import Iterable, List

from ..core.engine import zero_grad
from ..core.value import Value
from ..exceptions import ConfigurationError


class SGD:
    """
    p.data <- p.data - lr * p.grad for every parameter.

    Usage:
        >>> optimizer = SGD(model.parameters(), lr=0.05)
        >>> optimizer.zero_grad()
        >>> loss.backward()
        >>> optimizer.step()
    """

    def __init__(self, params: Iterable[Value], lr: float = 0.05):
        if lr <= 0:
            raise ConfigurationError(f"lr must be positive, got {lr}")
        self.params: List[Value] = list(params)
        self.lr = lr

    def zero_grad(self) -> None:
        zero_grad(self.params)

    def step(self) -> None:
        for p in self.params:
            p.data = p.data - self.lr * p.grad
