"""
Layer: a row of neurons sharing the same inputs.
"""

import numpy as np
from typing import List, Optional, Sequence, Union

from ..core.value import Value
from .config import Activation
from .init import make_rng
from .module import Module, as_inputs, check_width
from .neuron import Neuron


class Layer(Module):

    def __init__(self, nin: int, nout: int, activation: Union[str, Activation] = "tanh",
                 rng: Optional[np.random.Generator] = None):
        check_width(nin, "nin")
        check_width(nout, "nout")
        rng = rng if rng is not None else make_rng()
        self.nin = nin
        self.nout = nout
        self.neurons = [Neuron(nin, activation, rng=rng) for _ in range(nout)]

    def forward(self, inputs: Sequence) -> List[Value]:
        """One output per neuron, in neuron order. Always a list, even for nout == 1."""
        xs = as_inputs(inputs, self.nin, repr(self))
        return [neuron(xs) for neuron in self.neurons]

    def parameters(self) -> List[Value]:
        return [p for neuron in self.neurons for p in neuron.parameters()]

    def __repr__(self):
        return f"Layer({self.nin}, {self.nout})"
