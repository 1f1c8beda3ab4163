"""Completion core exception hierarchy.

Every error carries an optional cause that is chained as ``__cause__``.
Each class also derives from the matching builtin so callers that only
know about ``FileNotFoundError``/``ValueError``/``IndexError`` still
catch them.
"""


class CompletionError(Exception):
    """Base exception for all completion core errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause


class ResourceNotFoundError(CompletionError, FileNotFoundError):
    """Raised when a catalog source is neither a file nor a bundled resource."""


class DataFormatError(CompletionError, ValueError):
    """Raised when a catalog source does not match the keywords schema.

    Examples: XML that is not well-formed, a keyword without a name,
    a keyword whose type is not a known record kind.
    """


class InvalidOffsetError(CompletionError, IndexError):
    """Raised when a caret offset does not address a position in the buffer."""
