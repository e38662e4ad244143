"""Portfolio metrics aggregation."""

import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from src.core.constants import DEFAULT_APR, ZERO
from src.core.models import Investment, PortfolioMetrics, YieldPolicy

logger = logging.getLogger(__name__)


class YieldPolicyTable:
    """
    Explicit mapping from vault reference to APR policy.

    Lookups are exact (case-insensitive) on the vault reference; vaults
    without an entry fall back to the default policy. Substring rules are
    supported only for feeds that cannot supply stable vault references.
    """

    def __init__(
        self,
        policies: Optional[Mapping[str, YieldPolicy]] = None,
        default: Optional[YieldPolicy] = None,
        substring_rules: Optional[Sequence[Tuple[str, YieldPolicy]]] = None,
    ):
        self._policies: Dict[str, YieldPolicy] = {
            key.lower(): policy for key, policy in (policies or {}).items()
        }
        self.default = default or YieldPolicy(apr=DEFAULT_APR)
        self._substring_rules = [(s.lower(), p) for s, p in (substring_rules or [])]

    @classmethod
    def from_aprs(cls, aprs: Mapping[str, float], default_apr: float = float(DEFAULT_APR)) -> "YieldPolicyTable":
        """Build a table from a plain `vault -> apr` mapping (e.g. settings)."""
        policies = {
            vault: YieldPolicy(apr=Decimal(str(apr)), label=vault)
            for vault, apr in aprs.items()
        }
        return cls(policies=policies, default=YieldPolicy(apr=Decimal(str(default_apr))))

    @classmethod
    def from_substring_rules(
        cls,
        rules: Sequence[Tuple[str, float]],
        default_apr: float = float(DEFAULT_APR),
    ) -> "YieldPolicyTable":
        """Build a table that matches vault references by substring, first rule wins."""
        return cls(
            default=YieldPolicy(apr=Decimal(str(default_apr))),
            substring_rules=[(s, YieldPolicy(apr=Decimal(str(apr)), label=s)) for s, apr in rules],
        )

    def resolve(self, vault_ref: str) -> YieldPolicy:
        """Get the policy for a vault."""
        key = vault_ref.lower()
        if key in self._policies:
            return self._policies[key]
        for substring, policy in self._substring_rules:
            if substring in key:
                return policy
        return self.default

    def __len__(self) -> int:
        return len(self._policies) + len(self._substring_rules)


class MetricsAggregator:
    """
    Compute portfolio totals and the value-weighted APR.

    weighted_apr = Σ(current_value_i × apr_i) / Σ current_value_i

    Profit is always derived as current_value − principal; the upstream
    profit field is not trusted. weighted_apr is 0 for an empty or
    zero-valued portfolio.
    """

    def __init__(self, policies: Optional[YieldPolicyTable] = None):
        self.policies = policies or YieldPolicyTable()

    def aggregate(self, investments: Optional[Iterable[Investment]]) -> PortfolioMetrics:
        """
        Aggregate an investment snapshot.

        Args:
            investments: Current positions (None is treated as empty)

        Returns:
            PortfolioMetrics for the snapshot
        """
        positions: List[Investment] = list(investments or [])
        if not positions:
            return PortfolioMetrics.empty()

        total_principal = sum((inv.principal for inv in positions), ZERO)
        total_current_value = sum((inv.current_value for inv in positions), ZERO)

        weighted_sum = ZERO
        for inv in positions:
            if inv.has_profit_drift:
                logger.debug(
                    f"Reported profit {inv.reported_profit} for {inv.vault_ref} "
                    f"differs from derived {inv.profit}"
                )
            weighted_sum += inv.current_value * self.policies.resolve(inv.vault_ref).apr

        if total_current_value == 0:
            weighted_apr = ZERO
        else:
            weighted_apr = weighted_sum / total_current_value

        return PortfolioMetrics(
            total_principal=total_principal,
            total_current_value=total_current_value,
            total_profit=total_current_value - total_principal,
            weighted_apr=weighted_apr,
            position_count=len(positions),
        )
