"""
Model configuration: the supported nonlinearities.
"""

from enum import Enum
from typing import Union

from ..exceptions import ConfigurationError
from ..ops.activations import relu, tanh


class Activation(str, Enum):
    """Nonlinearity applied by a neuron after its weighted sum."""
    TANH = "tanh"
    RELU = "relu"

    @classmethod
    def parse(cls, name: Union[str, "Activation"]) -> "Activation":
        """Resolve an activation name; anything outside {tanh, relu} is a configuration error."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            choices = ", ".join(a.value for a in cls)
            raise ConfigurationError(
                f"Unsupported activation {name!r}; expected one of: {choices}"
            ) from None

    @property
    def fn(self):
        return _ACTIVATION_FNS[self]


_ACTIVATION_FNS = {
    Activation.TANH: tanh,
    Activation.RELU: relu,
}
