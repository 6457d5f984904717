"""Exception types raised by the EAN-13 encoder and renderer.

Validation failures subclass the matching builtin so callers (and the
HTTP layer) can catch ``ValueError`` or ``FileNotFoundError`` without
knowing about this module.
"""

from __future__ import annotations


class BarcodeError(Exception):
    """Base class for all errors raised by this package."""


class InvalidDigits(BarcodeError, ValueError):
    """The number is not a string of at most 13 decimal digits."""


class EncodingError(BarcodeError, ValueError):
    """The encoder was handed something other than 12 or 13 digits."""


class FontNotFound(BarcodeError, FileNotFoundError):
    """The configured font resource does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Font file not found: {path}")
        self.path = path


class DirectoryNotFound(BarcodeError, FileNotFoundError):
    """The target directory for a saved image does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"No such directory: {path}")
        self.path = path
