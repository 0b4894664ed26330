"""Row encoding and decoding for the log file.

Row layouts:
    S<key_len> <key>\\n
    D<key_len> <key>\\n
    P<key_len> <value_len> <key> <value>\\n

Lengths are ASCII decimal. Payloads are read by length and never scanned
for separators, so keys and values may contain spaces or newlines.
"""
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional, Tuple

from .errors import LengthParseError, TruncatedRowError, UnknownOpError
from ..utils.config import Config

OP_SET = b'S'
OP_DELETE = b'D'
OP_PUT = b'P'
OPS = (OP_SET, OP_DELETE, OP_PUT)

FIELD_SEP = b' '
ROW_END = b'\n'

_DIGITS = frozenset(b'0123456789')


@dataclass
class Row:
    """A decoded row. value and value_offset are only set for put rows."""
    op: bytes
    key: str
    value: Optional[bytes] = None
    value_offset: Optional[int] = None


def encode_key(key: str) -> bytes:
    return key.encode(Config.KEY_ENCODING, Config.KEY_ERRORS)


def decode_key(data: bytes) -> str:
    return data.decode(Config.KEY_ENCODING, Config.KEY_ERRORS)


def _encode_key_only(op: bytes, key: str) -> bytes:
    k = encode_key(key)
    return op + str(len(k)).encode('ascii') + FIELD_SEP + k + ROW_END


def encode_set(key: str) -> bytes:
    """Encode a presence row."""
    return _encode_key_only(OP_SET, key)


def encode_delete(key: str) -> bytes:
    """Encode a delete row."""
    return _encode_key_only(OP_DELETE, key)


def encode_put(key: str, value: bytes) -> Tuple[bytes, int]:
    """
    Encode a put row.
    Returns (row, value_pos) where value_pos is the index of the value's
    first byte within the row.
    """
    k = encode_key(key)
    head = (OP_PUT + str(len(k)).encode('ascii') + FIELD_SEP
            + str(len(value)).encode('ascii') + FIELD_SEP + k + FIELD_SEP)
    return head + value + ROW_END, len(head)


class RowReader:
    """Sequential row decoder over a binary stream."""

    def __init__(self, stream: BinaryIO, start_offset: int = 0):
        self.stream = stream
        self.offset = start_offset  # Absolute offset of the next unread byte
        self.rows = 0

    def __iter__(self) -> Iterator[Row]:
        while True:
            row = self.read_row()
            if row is None:
                return
            yield row

    def read_row(self) -> Optional[Row]:
        """Decode the next row, or return None at a clean end of input."""
        op = self.stream.read(1)
        if not op:
            return None
        row_start = self.offset
        self.offset += 1
        self.rows += 1

        if op not in OPS:
            raise UnknownOpError(f"unknown op: {op!r}", row=self.rows, offset=row_start)

        if op == OP_PUT:
            key_len = self._read_length('key-length')
            value_len = self._read_length('value-length')
            key = decode_key(self._read_framed(key_len, 'key'))
            value_offset = self.offset
            value = self._read_framed(value_len, 'value')
            return Row(op, key, value, value_offset)

        key_len = self._read_length('key-length')
        key = decode_key(self._read_framed(key_len, 'key'))
        return Row(op, key)

    def _read_length(self, field: str) -> int:
        digits = bytearray()
        while True:
            b = self.stream.read(1)
            if not b:
                raise LengthParseError(f"read {field}: unexpected end of file",
                                       row=self.rows, offset=self.offset)
            self.offset += 1
            if b == FIELD_SEP:
                break
            if b[0] not in _DIGITS:
                raise LengthParseError(f"read {field}: invalid digit {b!r}",
                                       row=self.rows, offset=self.offset - 1)
            digits += b
        if not digits:
            raise LengthParseError(f"read {field}: empty length",
                                   row=self.rows, offset=self.offset - 1)
        return int(digits)

    def _read_framed(self, length: int, field: str) -> bytes:
        """Read length payload bytes plus the framing byte that follows them."""
        want = length + 1
        if want <= Config.READ_BUFFER_SIZE:
            data = self.stream.read(want)
        else:
            # A corrupt length must not turn into one huge allocation
            chunks = []
            got = 0
            while got < want:
                chunk = self.stream.read(min(want - got, Config.READ_BUFFER_SIZE))
                if not chunk:
                    break
                chunks.append(chunk)
                got += len(chunk)
            data = b''.join(chunks)
        self.offset += len(data)
        if len(data) < want:
            raise TruncatedRowError(
                f"read {field}: expected {want} bytes, got {len(data)}",
                row=self.rows, offset=self.offset)
        return data[:length]
