"""Exceptions raised by the textdb core."""
from typing import Optional


class TextDBError(Exception):
    """Base class for all textdb errors."""
    pass


class KeyValidationError(TextDBError, ValueError):
    """Raised when a key is rejected before any row is written."""
    pass


class LogFormatError(TextDBError):
    """Raised when the log file cannot be decoded."""

    def __init__(self, message: str, row: Optional[int] = None, offset: Optional[int] = None):
        self.row = row
        self.offset = offset
        if row is not None:
            message = f"{message} (row {row})"
        super().__init__(message)


class UnknownOpError(LogFormatError):
    """Leading byte of a row is not a known op code."""
    pass


class LengthParseError(LogFormatError):
    """A length field is not a terminated run of decimal digits."""
    pass


class TruncatedRowError(LogFormatError):
    """The log ended in the middle of a row."""
    pass


class KeyNotFoundError(TextDBError, KeyError):
    """Raised by find() when the key is not in the index."""

    def __str__(self):
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ''


class KeyHasNoValueError(TextDBError):
    """Raised when reading a key that was set without a value."""
    pass


class ValueReadError(TextDBError, OSError):
    """Raised when a value cannot be read back from the log file."""
    pass
