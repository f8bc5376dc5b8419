# scalar_autograd/__init__.py
# Scalar-valued reverse-mode automatic differentiation

from .core.value import Value
from .core.node import Node, Op
from .core.engine import backward, topological_order, zero_grad, zero_graph
from .core.graph_utils import get_graph_stats, format_graph, log_graph_summary

# Registers operator overloading on Value
from . import ops
from .ops import add, sub, mul, div, neg, pow, tanh, relu

from .exceptions import AutogradError, ConfigurationError, ShapeMismatchError
from .gradcheck import numerical_gradient, check_gradient
from .nn import Activation, Module, Neuron, Layer, MLP
from .training import SGD, Trainer, TrainingConfig, mse_loss, sse_loss

__version__ = "0.1.0"

__all__ = [
    # Core
    'Value',
    'Node',
    'Op',
    # Engine
    'backward',
    'topological_order',
    'zero_grad',
    'zero_graph',
    # Diagnostics
    'get_graph_stats',
    'format_graph',
    'log_graph_summary',
    # Ops
    'add', 'sub', 'mul', 'div', 'neg', 'pow',
    'tanh', 'relu',
    # Errors
    'AutogradError',
    'ConfigurationError',
    'ShapeMismatchError',
    # Gradient checking
    'numerical_gradient',
    'check_gradient',
    # Models
    'Activation',
    'Module',
    'Neuron',
    'Layer',
    'MLP',
    # Training
    'SGD',
    'Trainer',
    'TrainingConfig',
    'mse_loss',
    'sse_loss',
]
