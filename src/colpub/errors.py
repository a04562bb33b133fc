"""Exception types raised by colpub"""


class ColpubError(Exception):
    """Base exception for all colpub errors."""


class InvalidInput(ColpubError):
    """Raised when parse() is given something other than a non-empty string."""


class ParseFailure(ColpubError):
    """Raised when any pipeline stage fails; wraps the originating message."""


class SourceError(ColpubError):
    """Raised when a source document cannot be located or read."""
