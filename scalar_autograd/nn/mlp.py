"""
Multi-layer perceptron: layers chained so layer i's width is layer i+1's input width.
"""

import numpy as np
from typing import List, Optional, Sequence, Union

from ..core.value import Value
from ..exceptions import ConfigurationError
from .config import Activation
from .init import make_rng
from .layer import Layer
from .module import Module, as_inputs, check_width


class MLP(Module):
    """
    Feed-forward network.

    Args:
        nin: Input width
        nouts: Output width of each layer, in order
        activations: Per-layer nonlinearity names; defaults to tanh everywhere.
            Must have exactly one entry per layer.
        seed: Seed for the initialization RNG (ignored when `rng` is given)
        rng: numpy Generator shared by every layer

    Example:
        >>> model = MLP(3, [4, 4, 1], seed=0)
        >>> model([2.0, 3.0, -1.0])
        [Value(data=..., grad=0.0, label=)]
    """

    def __init__(self, nin: int, nouts: Sequence[int],
                 activations: Optional[Sequence[Union[str, Activation]]] = None,
                 seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        check_width(nin, "nin")
        nouts = list(nouts)
        if not nouts:
            raise ConfigurationError("MLP needs at least one layer")
        if activations is None:
            activations = [Activation.TANH] * len(nouts)
        elif len(activations) != len(nouts):
            raise ConfigurationError(
                f"Got {len(activations)} activations for {len(nouts)} layers"
            )
        activations = [Activation.parse(a) for a in activations]
        rng = rng if rng is not None else make_rng(seed)

        self.nin = nin
        self.nouts = nouts
        sizes = [nin] + nouts
        self.layers = [
            Layer(sizes[i], sizes[i + 1], activations[i], rng=rng)
            for i in range(len(nouts))
        ]

    @property
    def nout(self) -> int:
        return self.nouts[-1]

    def forward(self, inputs: Sequence) -> List[Value]:
        out = as_inputs(inputs, self.nin, repr(self))
        for layer in self.layers:
            out = layer(out)
        return out

    def parameters(self) -> List[Value]:
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        return f"MLP({self.nin}, [{', '.join(str(n) for n in self.nouts)}])"
