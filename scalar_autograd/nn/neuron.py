"""
Single neuron: activation(bias + sum_i w_i * x_i).
"""

import numpy as np
from typing import List, Optional, Sequence, Union

from ..core.value import Value
from .config import Activation
from .init import make_rng, uniform_init
from .module import Module, as_inputs, check_width


class Neuron(Module):
    """
    Weighted sum of its inputs plus a bias, followed by a nonlinearity.

    Args:
        nin: Number of inputs (one weight per input)
        activation: "tanh" or "relu"; anything else fails here, not at call time
        rng: numpy Generator used for initialization (fresh one if omitted)
    """

    def __init__(self, nin: int, activation: Union[str, Activation] = "tanh",
                 rng: Optional[np.random.Generator] = None):
        check_width(nin, "nin")
        self.activation = Activation.parse(activation)
        rng = rng if rng is not None else make_rng()
        self.bias = Value(uniform_init(rng), label="b")
        self.weights = [Value(uniform_init(rng), label=f"w{i}") for i in range(nin)]

    @property
    def nin(self) -> int:
        return len(self.weights)

    def forward(self, inputs: Sequence) -> Value:
        xs = as_inputs(inputs, self.nin, repr(self))
        act = self.bias
        for w, x in zip(self.weights, xs):
            act = act + w * x
        return self.activation.fn(act)

    def parameters(self) -> List[Value]:
        return self.weights + [self.bias]

    def __repr__(self):
        return f"Neuron({self.nin}, {self.activation.value})"
