"""Performance series synthesizer."""

import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from datetime import date, timedelta, timezone
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np

from src.core.constants import (
    DEFAULT_WINDOW_DAYS,
    GROWTH_DRIFT,
    GROWTH_OSCILLATION_AMPLITUDE,
    GROWTH_OSCILLATION_PERIOD,
    ZERO,
)
from src.core.models import Activity, ActivityKind, PerformancePoint

logger = logging.getLogger(__name__)


class GrowthModel(ABC):
    """Valuation model mapping day index to a multiple of principal."""

    @abstractmethod
    def factors(self, days: int) -> Sequence[float]:
        """
        Growth factors for each day of the window.

        Args:
            days: Window length; index 0 is the oldest day

        Returns:
            Sequence of `days` multipliers applied to principal
        """
        pass


class SyntheticGrowthModel(GrowthModel):
    """
    Smoothed synthetic growth curve.

    factor_i = 1 + sin(i / period) × amplitude + (i / (days − 1)) × drift

    Placeholder until a historical valuation feed exists. Pure function of
    the window length, so repeated calls are bit-identical.
    """

    def __init__(
        self,
        amplitude: float = GROWTH_OSCILLATION_AMPLITUDE,
        period: float = GROWTH_OSCILLATION_PERIOD,
        drift: float = GROWTH_DRIFT,
    ):
        self.amplitude = amplitude
        self.period = period
        self.drift = drift

    def factors(self, days: int) -> Sequence[float]:
        if days <= 0:
            return []
        index = np.arange(days, dtype=float)
        span = max(days - 1, 1)
        growth = 1.0 + np.sin(index / self.period) * self.amplitude + (index / span) * self.drift
        return [float(f) for f in growth]


class PerformanceSeriesSynthesizer:
    """
    Reconstruct the trailing value/profit curve of the portfolio.

    The series always has exactly `window_days` points ending `today`
    inclusive and is regenerated from scratch on every call.
    """

    def __init__(
        self,
        model: Optional[GrowthModel] = None,
        window_days: int = DEFAULT_WINDOW_DAYS,
    ):
        if window_days < 1:
            raise ValueError(f"window_days must be positive, got {window_days}")
        self.model = model or SyntheticGrowthModel()
        self.window_days = window_days

    @staticmethod
    def deposits_by_day(transactions: Optional[Iterable[Activity]]) -> Dict[date, Decimal]:
        """Sum deposit amounts per UTC calendar day."""
        totals: Dict[date, Decimal] = defaultdict(lambda: ZERO)
        for activity in transactions or []:
            if activity.kind != ActivityKind.DEPOSIT or activity.amount is None:
                continue
            day = activity.timestamp.astimezone(timezone.utc).date()
            totals[day] += activity.amount
        return dict(totals)

    def build(
        self,
        total_principal: Decimal,
        transactions: Optional[Iterable[Activity]],
        today: date,
    ) -> List[PerformancePoint]:
        """
        Build the performance series.

        Args:
            total_principal: Sum of principal over current positions
            transactions: Normalized transaction activities
            today: Last day of the window (UTC calendar day)

        Returns:
            List of PerformancePoint ordered by date ascending
        """
        factors = self.model.factors(self.window_days)
        if len(factors) != self.window_days:
            raise ValueError(
                f"Growth model returned {len(factors)} factors for {self.window_days} days"
            )

        deposits = self.deposits_by_day(transactions)
        start = today - timedelta(days=self.window_days - 1)

        points = []
        for i, factor in enumerate(factors):
            day = start + timedelta(days=i)
            value = total_principal * Decimal(repr(factor))
            deposited = deposits.get(day)

            points.append(PerformancePoint(
                date=day,
                value=value,
                profit=value - total_principal,
                deposited_that_day=deposited if deposited and deposited > 0 else None,
            ))

        logger.debug(f"Built {len(points)} performance points ending {today.isoformat()}")
        return points
