"""Error types raised by builtinkit beyond the standard ones."""


class ArgumentError(TypeError):
    """Raised when a call has the wrong number or shape of arguments."""
