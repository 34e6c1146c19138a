"""Assembly line production rates.

Each speed step produces 221 cars per hour, but faster speeds lose a share
of cars to defects:

- speed 0: stopped
- speed 1-4: every car succeeds
- speed 5-8: 90% succeed
- speed 9-10: 77% succeed

Speeds outside 0-10 produce nothing.
"""

import logging
import math
from typing import Tuple

logger = logging.getLogger(__name__)

# Cars produced per hour for each speed step, before losses
CARS_PER_HOUR_PER_SPEED = 221.0

# Highest valid speed setting
MAX_SPEED = 10

# (lowest speed, highest speed, success rate), inclusive bounds
SUCCESS_RATE_TIERS: Tuple[Tuple[int, int, float], ...] = (
    (0, 4, 1.0),
    (5, 8, 0.9),
    (9, MAX_SPEED, 0.77),
)


def success_rate(speed: int) -> float:
    """Share of cars that pass inspection at ``speed``.

    Returns 0.0 for speeds outside the valid range.
    """
    for low, high, rate in SUCCESS_RATE_TIERS:
        if low <= speed <= high:
            return rate
    logger.warning("Speed %r is outside 0-%d; production stops", speed, MAX_SPEED)
    return 0.0


def production_rate_per_hour(speed: int) -> float:
    """Cars successfully produced per hour at ``speed``."""
    return speed * CARS_PER_HOUR_PER_SPEED * success_rate(speed)


def working_items_per_minute(speed: int) -> int:
    """Working cars produced per whole minute at ``speed``, rounded down."""
    return math.floor(production_rate_per_hour(speed) / 60)
