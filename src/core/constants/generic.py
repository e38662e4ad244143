"""Generic constants for portfolio metric calculations.

These constants are vault-agnostic and shared by the activity feed,
the metrics aggregator and the performance synthesizer.
"""

from decimal import Decimal

# Time constants
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 24 * 3600

# Activity feed
ACTOR_REF_LENGTH = 8  # Chars of the record id shown as a masked actor

# Performance series
DEFAULT_WINDOW_DAYS = 30  # Trailing window, today inclusive
GROWTH_OSCILLATION_AMPLITUDE = 0.01  # sin(i / period) * amplitude
GROWTH_OSCILLATION_PERIOD = 5.0
GROWTH_DRIFT = 0.08  # Linear drift over the whole window

# Yield policy (APR in percent)
DEFAULT_APR = Decimal("15.2")
ZERO = Decimal("0")
