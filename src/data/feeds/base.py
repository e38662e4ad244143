"""Feed interfaces consumed by the portfolio engine.

The engine never performs I/O itself: transaction and investment records
arrive through these collaborators, and secondary activity (optimizer
events) through ActivitySource implementations. A live optimizer stream
replaces the synthetic source by implementing the same interface.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List

from src.core.models import Activity


class TransactionFeed(ABC):
    """Source of raw transaction history records."""

    @abstractmethod
    async def fetch_transactions(self) -> List[Dict[str, Any]]:
        """Fetch transaction records.

        Returns:
            List of `{id, type, amount, timestamp, vaultName}` dicts

        Raises:
            Any exception on network failure; the engine treats it as no data
        """
        ...


class InvestmentFeed(ABC):
    """Source of raw investment position records."""

    @abstractmethod
    async def fetch_investments(self) -> List[Dict[str, Any]]:
        """Fetch investment records.

        Returns:
            List of `{vaultId, principal, currentValue, profit}` dicts

        Raises:
            Any exception on network failure; the engine treats it as no data
        """
        ...


class ActivitySource(ABC):
    """Producer of ready-made activities merged alongside transactions."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a human-readable source name."""
        ...

    @abstractmethod
    def get_activities(self, now: datetime) -> List[Activity]:
        """Return activities relative to the reference instant `now`."""
        ...
