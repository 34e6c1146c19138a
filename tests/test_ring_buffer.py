"""Tests for the ring buffer.

Test coverage:
- Construction and capacity validation
- FIFO reads and writes, cursor wrap-around
- FullBufferError / EmptyBufferError as recoverable errors
- clear() resets the buffer
- overwrite() discards the oldest item only when full
"""

import pytest

from drills.buffers import (
    EmptyBufferError,
    FullBufferError,
    RingBuffer,
    RingBufferError,
)


class TestConstruction:
    """Tests for buffer construction."""

    def test_capacity_is_fixed(self):
        buffer = RingBuffer(3)
        assert buffer.capacity == 3
        assert len(buffer) == 0
        assert buffer.is_empty()
        assert not buffer.is_full()

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_non_positive_capacity_rejected(self, capacity):
        with pytest.raises(ValueError):
            RingBuffer(capacity)

    def test_errors_share_a_base_class(self):
        assert issubclass(EmptyBufferError, RingBufferError)
        assert issubclass(FullBufferError, RingBufferError)


class TestReadWrite:
    """Tests for write() and read()."""

    def test_reading_empty_buffer_fails(self):
        buffer = RingBuffer(1)
        with pytest.raises(EmptyBufferError):
            buffer.read()

    def test_write_then_read(self):
        buffer = RingBuffer(1)
        buffer.write("1")
        assert buffer.read() == "1"

    def test_each_item_read_once(self):
        buffer = RingBuffer(1)
        buffer.write(1)
        assert buffer.read() == 1
        with pytest.raises(EmptyBufferError):
            buffer.read()

    def test_items_read_in_insertion_order(self):
        buffer = RingBuffer(2)
        buffer.write(1)
        buffer.write(2)
        assert buffer.read() == 1
        assert buffer.read() == 2

    def test_write_to_full_buffer_fails(self):
        buffer = RingBuffer(2)
        buffer.write(1)
        buffer.write(2)
        assert buffer.is_full()
        with pytest.raises(FullBufferError):
            buffer.write(3)

    def test_full_buffer_keeps_contents_after_failed_write(self):
        buffer = RingBuffer(2)
        buffer.write(1)
        buffer.write(2)
        with pytest.raises(FullBufferError):
            buffer.write(3)
        assert buffer.read() == 1
        assert buffer.read() == 2

    def test_alternate_write_and_read(self):
        buffer = RingBuffer(2)
        buffer.write(1)
        assert buffer.read() == 1
        buffer.write(2)
        assert buffer.read() == 2

    def test_read_frees_slot_for_write(self):
        buffer = RingBuffer(3)
        for item in (1, 2, 3):
            buffer.write(item)
        assert buffer.read() == 1
        buffer.write(4)
        assert [buffer.read() for _ in range(3)] == [2, 3, 4]

    def test_cursors_wrap_many_times(self):
        buffer = RingBuffer(3)
        for item in range(20):
            buffer.write(item)
            assert buffer.read() == item
        assert buffer.is_empty()

    def test_len_tracks_occupied_slots(self):
        buffer = RingBuffer(3)
        buffer.write("a")
        buffer.write("b")
        assert len(buffer) == 2
        buffer.read()
        assert len(buffer) == 1

    def test_peek_does_not_consume(self):
        buffer = RingBuffer(2)
        buffer.write("a")
        assert buffer.peek() == "a"
        assert buffer.read() == "a"
        with pytest.raises(EmptyBufferError):
            buffer.peek()

    def test_stores_arbitrary_objects(self):
        buffer = RingBuffer(2)
        buffer.write([1, 2])
        buffer.write(None)
        assert buffer.read() == [1, 2]
        assert buffer.read() is None


class TestClear:
    """Tests for clear()."""

    def test_clear_empties_buffer(self):
        buffer = RingBuffer(1)
        buffer.write(1)
        buffer.clear()
        with pytest.raises(EmptyBufferError):
            buffer.read()

    def test_clear_frees_every_slot(self):
        buffer = RingBuffer(3)
        for item in (1, 2, 3):
            buffer.write(item)
        buffer.clear()
        assert len(buffer) == 0
        for item in (4, 5, 6):
            buffer.write(item)
        assert [buffer.read() for _ in range(3)] == [4, 5, 6]

    def test_clear_on_empty_buffer(self):
        buffer = RingBuffer(1)
        buffer.clear()
        buffer.write(1)
        assert buffer.read() == 1


class TestOverwrite:
    """Tests for overwrite()."""

    def test_overwrite_acts_like_write_when_not_full(self):
        buffer = RingBuffer(2)
        buffer.write(1)
        buffer.overwrite(2)
        assert buffer.read() == 1
        assert buffer.read() == 2

    def test_overwrite_replaces_oldest_when_full(self):
        buffer = RingBuffer(2)
        buffer.write(1)
        buffer.write(2)
        buffer.overwrite(3)
        assert buffer.read() == 2
        assert buffer.read() == 3
        with pytest.raises(EmptyBufferError):
            buffer.read()

    def test_overwrite_never_fails(self):
        buffer = RingBuffer(3)
        for item in range(10):
            buffer.overwrite(item)
        assert buffer.is_full()
        assert [buffer.read() for _ in range(3)] == [7, 8, 9]

    def test_write_after_overwrite_on_full_buffer_fails(self):
        buffer = RingBuffer(2)
        buffer.write(1)
        buffer.write(2)
        buffer.overwrite(3)
        with pytest.raises(FullBufferError):
            buffer.write(4)

    def test_mixed_operations(self):
        buffer = RingBuffer(3)
        buffer.write(1)
        buffer.write(2)
        buffer.write(3)
        assert buffer.read() == 1
        buffer.write(4)
        buffer.overwrite(5)
        assert [buffer.read() for _ in range(3)] == [3, 4, 5]
