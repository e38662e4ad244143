"""Core constants module.

Re-exports all constants for convenience.
"""

from src.core.constants.generic import (
    SECONDS_PER_MINUTE,
    SECONDS_PER_HOUR,
    SECONDS_PER_DAY,
    ACTOR_REF_LENGTH,
    DEFAULT_WINDOW_DAYS,
    GROWTH_OSCILLATION_AMPLITUDE,
    GROWTH_OSCILLATION_PERIOD,
    GROWTH_DRIFT,
    DEFAULT_APR,
    ZERO,
)

__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "ACTOR_REF_LENGTH",
    "DEFAULT_WINDOW_DAYS",
    "GROWTH_OSCILLATION_AMPLITUDE",
    "GROWTH_OSCILLATION_PERIOD",
    "GROWTH_DRIFT",
    "DEFAULT_APR",
    "ZERO",
]
