"""Vault catalog data models."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class RiskLevel(Enum):
    """Risk category of a vault strategy."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Ordering key, lowest risk first."""
        return {"low": 1, "medium": 2, "high": 3}[self.value]


@dataclass(frozen=True)
class Vault:
    """An investment pool listed in the vault catalog."""

    id: str
    name: str
    description: str
    apr: Decimal  # Percent
    tvl: Decimal  # USD
    risk_level: RiskLevel = RiskLevel.MEDIUM

    def matches(self, query: str) -> bool:
        """Check if the name or description contains the query (case-insensitive)."""
        needle = query.strip().lower()
        if not needle:
            return True
        return needle in self.name.lower() or needle in self.description.lower()


@dataclass(frozen=True)
class CatalogKPIs:
    """Headline figures across the vault catalog."""

    total_tvl: Decimal
    average_apr: Decimal
    vault_count: int = 0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "total_tvl": str(self.total_tvl),
            "average_apr": str(self.average_apr),
            "vault_count": self.vault_count,
        }
