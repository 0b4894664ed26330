"""Main TextDB implementation."""
from typing import Optional, Union

from . import codec
from .errors import KeyHasNoValueError, KeyNotFoundError, KeyValidationError
from .index import EntryState, Index
from .logfile import LogFile
from .replay import replay
from ..utils.config import Config


def validate_key(key: str):
    """Reject keys that cannot be written to the log."""
    if not isinstance(key, str):
        raise TypeError(f"key must be str, not {type(key).__name__}")
    if len(key) == 0:
        raise KeyValidationError("key is empty")
    # Bounded by the byte length written to the row
    key_len = len(codec.encode_key(key))
    if key_len > Config.MAX_KEY_LENGTH:
        raise KeyValidationError(f"key is too large: {key_len} bytes (max {Config.MAX_KEY_LENGTH})")


class TextDB:
    """Key/Value store over a single append-only log file."""

    def __init__(self, path: str = None):
        self.path = path or Config.DB_PATH
        self.log = LogFile(self.path)

        # Rebuild the index; a bad log means the store never comes up
        try:
            result = replay(self.log.reader)
        except Exception:
            self.log.close()
            raise
        self.index: Index = result.index
        self.log.size = result.write_offset

    @property
    def size(self) -> int:
        """Offset at which the next row will be appended."""
        return self.log.size

    def set(self, key: str):
        """Record key as present without a value."""
        validate_key(key)
        self.log.append(codec.encode_set(key))
        self.index.set_present(key)

    def delete(self, key: str):
        """Remove key. A delete row is written even if key is absent."""
        validate_key(key)
        self.log.append(codec.encode_delete(key))
        self.index.delete(key)

    def put(self, key: str, value: Union[bytes, bytearray, memoryview]):
        """Store value under key."""
        validate_key(key)
        value = bytes(value)
        row, value_pos = codec.encode_put(key, value)
        offset = self.log.append(row)
        self.index.put(key, offset + value_pos, len(value))

    def get(self, key: str) -> Optional[bytes]:
        """
        Read the value for key.

        Returns None if key is absent. Raises KeyHasNoValueError if key
        was set without a value, and ValueReadError if the value bytes
        are no longer in the file.
        """
        state = self.index.state(key)
        if state is EntryState.ABSENT:
            return None
        if state is EntryState.PRESENT:
            raise KeyHasNoValueError(f"key has no value: {key!r}")
        offset, length = self.index.get(key)
        return self.log.read_at(offset, length)

    def find(self, key: str) -> bytes:
        """Like get(), but a missing key raises KeyNotFoundError."""
        value = self.get(key)
        if value is None:
            raise KeyNotFoundError(f"key not found: {key!r}")
        return value

    def exists(self, key: str) -> bool:
        """Check whether key is in the index. No I/O."""
        return key in self.index

    def __contains__(self, key) -> bool:
        return self.exists(key)

    def __len__(self) -> int:
        return len(self.index)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        """Close the log file handles."""
        self.log.close()
