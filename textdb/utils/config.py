"""Configuration management."""
import sys


class Config:
    """Configuration management."""

    # Storage settings
    DB_PATH = 'test.txt.db'  # Log file used when no path is given
    READ_BUFFER_SIZE = 64 * 1024  # Buffer size for the read handle
    FSYNC_WRITES = False  # Force every appended row to disk

    # Key settings
    KEY_ENCODING = 'utf-8'
    KEY_ERRORS = 'surrogateescape'  # Lets any on-disk key bytes round-trip
    MAX_KEY_LENGTH = sys.maxsize
