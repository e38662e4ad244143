"""Display formatting helpers for dashboard values."""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from src.core.constants import SECONDS_PER_DAY, SECONDS_PER_HOUR, SECONDS_PER_MINUTE

Number = Union[Decimal, int, float]


def time_ago(timestamp: datetime, now: datetime) -> str:
    """Compact relative age label ("45s", "12m", "3h", "2d").

    Future timestamps are clamped to "0s".
    """
    seconds = int((now - timestamp).total_seconds())
    if seconds < 0:
        seconds = 0

    if seconds < SECONDS_PER_MINUTE:
        return f"{seconds}s"
    if seconds < SECONDS_PER_HOUR:
        return f"{seconds // SECONDS_PER_MINUTE}m"
    if seconds < SECONDS_PER_DAY:
        return f"{seconds // SECONDS_PER_HOUR}h"
    return f"{seconds // SECONDS_PER_DAY}d"


def format_currency(value: Number) -> str:
    """Format as whole US dollars, e.g. "$1,235" or "-$40"."""
    amount = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,}"


def format_apr(value: Number, places: int = 1) -> str:
    """Format an APR given in percent, e.g. "18.9%"."""
    return f"{float(value):.{places}f}%"


def format_millions(value: Number, places: int = 1) -> str:
    """Format a USD amount in millions, e.g. "$6.3M"."""
    return f"${float(value) / 1_000_000:.{places}f}M"
