"""In-memory hash index mapping keys to value locations in the log."""
from enum import Enum
from typing import Dict, NamedTuple, Optional


class Locator(NamedTuple):
    """Position of a value's bytes within the log file."""
    offset: int
    length: int


class EntryState(Enum):
    ABSENT = 'absent'
    PRESENT = 'present'  # Set without a value
    VALUE = 'value'


class Index:
    """In-memory hash index mapping keys to optional locators."""

    def __init__(self):
        # None marks a key that is present without a value
        self.index: Dict[str, Optional[Locator]] = {}

    def set_present(self, key: str):
        """Mark key as present with no value."""
        self.index[key] = None

    def put(self, key: str, offset: int, length: int):
        """Add or update key in index."""
        self.index[key] = Locator(offset, length)

    def get(self, key: str) -> Optional[Locator]:
        """Get the locator for key, None if absent or valueless."""
        return self.index.get(key)

    def state(self, key: str) -> EntryState:
        if key not in self.index:
            return EntryState.ABSENT
        if self.index[key] is None:
            return EntryState.PRESENT
        return EntryState.VALUE

    def delete(self, key: str):
        """Remove key from index."""
        self.index.pop(key, None)

    def __contains__(self, key) -> bool:
        return key in self.index

    def __len__(self) -> int:
        return len(self.index)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Index):
            return NotImplemented
        return self.index == other.index
