"""Rebuilds the index by replaying the log from its first byte."""
from typing import BinaryIO, NamedTuple

from .codec import OP_DELETE, OP_PUT, OP_SET, RowReader
from .index import Index


class ReplayResult(NamedTuple):
    index: Index
    write_offset: int  # Bytes consumed, where the next append must land
    rows: int


def replay(stream: BinaryIO) -> ReplayResult:
    """
    Decode every row of the log in order and apply it to a fresh index.
    Later rows override earlier ones for the same key. Decode errors
    propagate and abort the replay.
    """
    index = Index()
    reader = RowReader(stream)
    for row in reader:
        if row.op == OP_SET:
            index.set_present(row.key)
        elif row.op == OP_DELETE:
            index.delete(row.key)
        elif row.op == OP_PUT:
            index.put(row.key, row.value_offset, len(row.value))
    return ReplayResult(index, reader.offset, reader.rows)
