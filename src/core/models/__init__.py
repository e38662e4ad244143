"""Core data models for the vault dashboard."""

from .activity import Activity, ActivityKind, FilterMode, USER_KINDS
from .investment import Investment
from .metrics import PerformancePoint, PortfolioMetrics, YieldPolicy
from .vault import CatalogKPIs, RiskLevel, Vault

__all__ = [
    "Activity",
    "ActivityKind",
    "FilterMode",
    "USER_KINDS",
    "Investment",
    "PerformancePoint",
    "PortfolioMetrics",
    "YieldPolicy",
    "CatalogKPIs",
    "RiskLevel",
    "Vault",
]
