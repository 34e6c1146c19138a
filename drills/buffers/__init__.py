"""Bounded in-memory buffers.

This module provides:
- RingBuffer: fixed-capacity circular buffer with overwrite mode
- RingBufferError, EmptyBufferError, FullBufferError: recoverable errors
"""

from .ring_buffer import (
    RingBuffer,
    RingBufferError,
    EmptyBufferError,
    FullBufferError,
)

__all__ = [
    "RingBuffer",
    "RingBufferError",
    "EmptyBufferError",
    "FullBufferError",
]
