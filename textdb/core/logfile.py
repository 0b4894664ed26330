"""Append-only log file with separate read and append handles."""
import os

from .errors import ValueReadError
from ..utils.config import Config


class LogFile:
    """Append-only log file with separate read and append handles."""

    def __init__(self, path: str):
        self.path = path
        # Append handle first so a missing file gets created
        self.writer = open(path, 'ab', buffering=0)
        try:
            self.reader = open(path, 'rb', buffering=Config.READ_BUFFER_SIZE)
        except OSError:
            self.writer.close()
            raise
        self.size = 0  # Write cursor, set by the store after replay
        self.closed = False

    def append(self, data: bytes) -> int:
        """
        Append data at the end of the log.
        Returns the offset at which data starts.
        """
        offset = self.size
        view = memoryview(data)
        written = 0
        try:
            while written < len(view):
                n = self.writer.write(view[written:])
                if n is None:
                    # Non-blocking handles only; the log is never opened that way
                    raise BlockingIOError(f"write to {self.path} would block")
                written += n
            if Config.FSYNC_WRITES:
                os.fsync(self.writer.fileno())
        except OSError:
            # Keep the cursor on the real end of file before re-raising
            self.size = os.fstat(self.writer.fileno()).st_size
            raise
        self.size += written
        return offset

    def read_at(self, offset: int, length: int) -> bytes:
        """Read exactly length bytes starting at offset."""
        self.reader.seek(offset)
        data = self.reader.read(length)
        if len(data) < length:
            raise ValueReadError(
                f"short read at offset {offset}: expected {length} bytes, got {len(data)}")
        return data

    def close(self):
        """Close both handles."""
        if self.closed:
            return
        self.closed = True
        try:
            self.reader.close()
        finally:
            self.writer.close()
