"""Fixed-capacity circular buffer.

Slots live in a NumPy object array paired with a boolean occupancy array.
There is no element counter: when the read and write cursors meet, the
occupancy of the slot under them tells an empty buffer from a full one.

Operations:
- write: append, failing with FullBufferError when every slot is taken
- read: remove the oldest item, failing with EmptyBufferError when empty
- overwrite: append, discarding the oldest item if the buffer is full
- clear: drop everything and reset the cursors
"""

import logging
from typing import Generic, TypeVar

import numpy as np

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RingBufferError(Exception):
    """Base class for recoverable ring buffer errors."""

    pass


class EmptyBufferError(RingBufferError):
    """Raised when reading from a buffer with no unread items."""

    pass


class FullBufferError(RingBufferError):
    """Raised when writing to a buffer whose slots are all occupied."""

    pass


class RingBuffer(Generic[T]):
    """Circular buffer of a fixed capacity.

    Attributes:
        capacity: Number of slots, fixed at construction
    """

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError(f"capacity must be > 0, got {capacity}")
        self._slots = np.empty(capacity, dtype=object)
        self._occupied = np.zeros(capacity, dtype=bool)
        self._read_cursor = 0
        self._write_cursor = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return int(self._occupied.sum())

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self.capacity}, size={len(self)})"

    def is_empty(self) -> bool:
        return not self._occupied[self._read_cursor]

    def is_full(self) -> bool:
        return self._read_cursor == self._write_cursor and bool(
            self._occupied[self._write_cursor]
        )

    def _advance(self, cursor: int) -> int:
        return (cursor + 1) % self.capacity

    def _store(self, item: T) -> None:
        self._slots[self._write_cursor] = item
        self._occupied[self._write_cursor] = True
        self._write_cursor = self._advance(self._write_cursor)

    def write(self, item: T) -> None:
        """Append an item.

        Raises:
            FullBufferError: If every slot is occupied
        """
        if self.is_full():
            raise FullBufferError(f"buffer is full ({self.capacity} items)")
        self._store(item)

    def read(self) -> T:
        """Remove and return the oldest item.

        Raises:
            EmptyBufferError: If there is nothing to read
        """
        if self.is_empty():
            raise EmptyBufferError("buffer is empty")
        item = self._slots[self._read_cursor]
        self._slots[self._read_cursor] = None
        self._occupied[self._read_cursor] = False
        self._read_cursor = self._advance(self._read_cursor)
        return item

    def peek(self) -> T:
        """Return the oldest item without removing it.

        Raises:
            EmptyBufferError: If there is nothing to read
        """
        if self.is_empty():
            raise EmptyBufferError("buffer is empty")
        return self._slots[self._read_cursor]

    def clear(self) -> None:
        """Empty every slot and reset both cursors."""
        self._slots[:] = None
        self._occupied[:] = False
        self._read_cursor = 0
        self._write_cursor = 0

    def overwrite(self, item: T) -> None:
        """Append an item, discarding the oldest one if the buffer is full.

        Never fails.
        """
        if self.is_full():
            logger.debug(
                "Overwriting oldest item at slot %d of full buffer", self._read_cursor
            )
            self._read_cursor = self._advance(self._read_cursor)
        self._store(item)
