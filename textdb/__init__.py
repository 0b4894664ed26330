"""TextDB - Embedded Key/Value store over a single append-only log file."""
__version__ = '1.0.0'

from .core.store import TextDB
from .core.index import Locator
from .core.errors import (
    TextDBError,
    KeyValidationError,
    LogFormatError,
    UnknownOpError,
    LengthParseError,
    TruncatedRowError,
    KeyNotFoundError,
    KeyHasNoValueError,
    ValueReadError,
)

__all__ = [
    'TextDB', 'Locator',
    'TextDBError', 'KeyValidationError', 'LogFormatError', 'UnknownOpError',
    'LengthParseError', 'TruncatedRowError', 'KeyNotFoundError',
    'KeyHasNoValueError', 'ValueReadError',
]
