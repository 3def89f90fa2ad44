"""Exceptions raised by urinorm.

Errors raised by the URI parser (for example a ``ValueError`` for an invalid
authority or a ``UnicodeError`` for a host that cannot be IDNA-encoded) are
not wrapped and reach the caller unchanged.
"""


class URINormError(Exception):
    """Base class for all errors that are raised by urinorm itself."""
    pass


class MissingArgumentError(URINormError, TypeError):
    """Raised when a normalization function is called without a URI.

    Subclasses :class:`TypeError`, the exception Python itself raises for a
    missing required argument.
    """
    def __init__(self, caller: str):
        super().__init__(f"uri is a required parameter to {caller}")
        self.caller = caller
