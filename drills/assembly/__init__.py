"""Assembly line throughput calculations."""

from .production import (
    CARS_PER_HOUR_PER_SPEED,
    MAX_SPEED,
    SUCCESS_RATE_TIERS,
    success_rate,
    production_rate_per_hour,
    working_items_per_minute,
)

__all__ = [
    "CARS_PER_HOUR_PER_SPEED",
    "MAX_SPEED",
    "SUCCESS_RATE_TIERS",
    "success_rate",
    "production_rate_per_hour",
    "working_items_per_minute",
]
