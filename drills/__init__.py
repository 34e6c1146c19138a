"""Drills - small, self-contained programming exercises.

Each subpackage stands alone:
- buffers: fixed-capacity ring buffer
- poker: five-card hand evaluation and winner selection
- sequences: sublist classification
- assembly: production line throughput
"""

__version__ = "0.1.0"
__author__ = "Drills Team"

from drills.assembly import production_rate_per_hour, working_items_per_minute
from drills.buffers import RingBuffer
from drills.poker import winning_hands
from drills.sequences import Comparison, sublist

__all__ = [
    "__version__",
    "RingBuffer",
    "winning_hands",
    "Comparison",
    "sublist",
    "production_rate_per_hour",
    "working_items_per_minute",
]
