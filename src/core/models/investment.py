"""Investment position data model."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Investment:
    """A user's stake in one vault, replaced wholesale on every fetch."""

    vault_ref: str
    principal: Decimal
    current_value: Decimal

    # Profit as reported upstream; informational only
    reported_profit: Optional[Decimal] = None

    @property
    def profit(self) -> Decimal:
        """Profit derived from current value and principal."""
        return self.current_value - self.principal

    @property
    def has_profit_drift(self) -> bool:
        """Check if the upstream profit disagrees with the derived one."""
        return self.reported_profit is not None and self.reported_profit != self.profit

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "vault_ref": self.vault_ref,
            "principal": str(self.principal),
            "current_value": str(self.current_value),
            "profit": str(self.profit),
        }
