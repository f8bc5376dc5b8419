# scalar_autograd/exceptions.py

"""
Error taxonomy for the autograd engine and the model layer built on it.

All errors are raised eagerly: configuration problems at construction time,
shape problems at the call that received the wrong input. Both derive from
ValueError so callers that only care about "bad argument" can catch that.
"""


class AutogradError(Exception):
    """Root of all errors raised by scalar_autograd."""


class ConfigurationError(AutogradError, ValueError):
    """Invalid model/training configuration (unknown activation, bad widths, ...)."""


class ShapeMismatchError(AutogradError, ValueError):
    """An input sequence does not have the width the receiver expects."""

    def __init__(self, owner: str, expected: int, actual: int):
        self.owner = owner
        self.expected = expected
        self.actual = actual
        super().__init__(f"{owner} expects {expected} inputs, got {actual}")
