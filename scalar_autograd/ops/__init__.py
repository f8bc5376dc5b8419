# scalar_autograd/ops/__init__.py

# Ensure operator overloading is registered
from . import arithmetic
from . import activations

# Convenience re-exports so users can do: from scalar_autograd.ops import mul, tanh, ...
from .arithmetic import add, sub, mul, div, neg, pow
from .activations import tanh, relu

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "tanh", "relu",
]
