# errors.py
"""
Custom exceptions used across datespan modules.
"""


class InvalidArgumentError(ValueError):
    """
    Raised when one or more required method arguments are None.
    The message lists every offending argument, one per line.
    """

    def __init__(self, messages):
        self.messages = tuple(messages)
        super().__init__("".join(f"{m}\n" for m in self.messages))


class CodingError(RuntimeError):
    """Raised when library code calls its own helpers incorrectly."""
    pass


class DateComputationError(RuntimeError):
    """Raised when the span between two time points cannot be computed."""
    pass
