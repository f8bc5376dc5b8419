"""
Neural-network building blocks composed from scalar Values.

- Neuron: activation(bias + w . x)
- Layer: neurons sharing one input vector
- MLP: chained layers
"""

from .config import Activation
from .init import make_rng, uniform_init
from .module import Module
from .neuron import Neuron
from .layer import Layer
from .mlp import MLP

__all__ = ['Activation', 'make_rng', 'uniform_init',
           'Module', 'Neuron', 'Layer', 'MLP']
