"""Analytics - activity feed, portfolio metrics and performance series."""

from .activity import count_by_mode, filter_activities, merge_activities
from .catalog import CatalogSort, catalog_kpis, filter_vaults
from .engine import EngineSnapshot, PortfolioEngine
from .formatting import format_apr, format_currency, format_millions, time_ago
from .metrics import MetricsAggregator, YieldPolicyTable
from .performance import GrowthModel, PerformanceSeriesSynthesizer, SyntheticGrowthModel

__all__ = [
    "count_by_mode",
    "filter_activities",
    "merge_activities",
    "CatalogSort",
    "catalog_kpis",
    "filter_vaults",
    "EngineSnapshot",
    "PortfolioEngine",
    "format_apr",
    "format_currency",
    "format_millions",
    "time_ago",
    "MetricsAggregator",
    "YieldPolicyTable",
    "GrowthModel",
    "PerformanceSeriesSynthesizer",
    "SyntheticGrowthModel",
]
