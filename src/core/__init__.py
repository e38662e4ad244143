"""Core module - models and constants."""

from .models import (
    Activity,
    ActivityKind,
    CatalogKPIs,
    FilterMode,
    Investment,
    PerformancePoint,
    PortfolioMetrics,
    RiskLevel,
    Vault,
    YieldPolicy,
)
from .constants import ACTOR_REF_LENGTH, DEFAULT_WINDOW_DAYS, DEFAULT_APR

__all__ = [
    "Activity",
    "ActivityKind",
    "FilterMode",
    "Investment",
    "PerformancePoint",
    "PortfolioMetrics",
    "YieldPolicy",
    "CatalogKPIs",
    "RiskLevel",
    "Vault",
    "ACTOR_REF_LENGTH",
    "DEFAULT_WINDOW_DAYS",
    "DEFAULT_APR",
]
