class TriedexError(Exception):
    """Base class for errors raised by triedex."""


class InvalidArgument(TriedexError, ValueError):
    pass


class DeserializationError(TriedexError, ValueError):
    """Raised when interchange data does not match the expected schema."""
