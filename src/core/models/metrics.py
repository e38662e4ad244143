"""Portfolio metric and performance series data models."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class YieldPolicy:
    """APR estimate (in percent) applied to a vault."""

    apr: Decimal
    label: str = "default"


@dataclass(frozen=True)
class PortfolioMetrics:
    """Aggregate totals over the current investment snapshot."""

    total_principal: Decimal
    total_current_value: Decimal
    total_profit: Decimal
    weighted_apr: Decimal
    position_count: int = 0

    @classmethod
    def empty(cls) -> "PortfolioMetrics":
        """Metrics of an empty portfolio."""
        return cls(
            total_principal=Decimal("0"),
            total_current_value=Decimal("0"),
            total_profit=Decimal("0"),
            weighted_apr=Decimal("0"),
        )

    @property
    def return_on_principal(self) -> Decimal:
        """Total profit as a fraction of principal (0 when no principal)."""
        if self.total_principal == 0:
            return Decimal("0")
        return self.total_profit / self.total_principal

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "total_principal": str(self.total_principal),
            "total_current_value": str(self.total_current_value),
            "total_profit": str(self.total_profit),
            "weighted_apr": str(self.weighted_apr),
            "position_count": self.position_count,
        }


@dataclass(frozen=True)
class PerformancePoint:
    """One day of the reconstructed portfolio value curve."""

    date: date
    value: Decimal
    profit: Decimal
    deposited_that_day: Optional[Decimal] = None

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "date": self.date.isoformat(),
            "value": str(self.value),
            "profit": str(self.profit),
            "deposited_that_day": str(self.deposited_that_day) if self.deposited_that_day else None,
        }
