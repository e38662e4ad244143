"""Vault catalog search, ordering and headline KPIs."""

from enum import Enum
from typing import Iterable, List, Optional, Union

from src.core.constants import ZERO
from src.core.models import CatalogKPIs, Vault


class CatalogSort(Enum):
    """Catalog views offered by the vault listing."""

    ALL = "all"
    TOP_APR = "top_apr"
    LOWEST_RISK = "lowest_risk"
    NEW = "new"

    @classmethod
    def parse(cls, value) -> "CatalogSort":
        """Accept a CatalogSort, its value, or its tab label ("Top APR")."""
        if isinstance(value, CatalogSort):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace(" ", "_")
            for mode in cls:
                if mode.value == key:
                    return mode
        raise ValueError(f"Unknown catalog sort: {value!r}")


def filter_vaults(
    vaults: Optional[Iterable[Vault]],
    query: str = "",
    mode: Union[CatalogSort, str] = CatalogSort.ALL,
) -> List[Vault]:
    """
    Search and order the vault catalog.

    Args:
        vaults: Vault listing (None is treated as empty)
        query: Substring matched against name and description
        mode: "all" keeps feed order, "top_apr" sorts by APR descending,
            "lowest_risk" by risk level ascending, "new" by id

    Returns:
        New list of matching vaults; sorts are stable
    """
    mode = CatalogSort.parse(mode)
    matched = [v for v in (vaults or []) if v.matches(query)]

    if mode == CatalogSort.TOP_APR:
        return sorted(matched, key=lambda v: v.apr, reverse=True)
    if mode == CatalogSort.LOWEST_RISK:
        return sorted(matched, key=lambda v: v.risk_level.rank)
    if mode == CatalogSort.NEW:
        return sorted(matched, key=lambda v: v.id)
    return matched


def catalog_kpis(vaults: Optional[Iterable[Vault]]) -> CatalogKPIs:
    """Total TVL and mean APR across vaults; zeros for an empty catalog."""
    listing = list(vaults or [])
    if not listing:
        return CatalogKPIs(total_tvl=ZERO, average_apr=ZERO)

    total_tvl = sum((v.tvl for v in listing), ZERO)
    average_apr = sum((v.apr for v in listing), ZERO) / len(listing)
    return CatalogKPIs(total_tvl=total_tvl, average_apr=average_apr, vault_count=len(listing))
