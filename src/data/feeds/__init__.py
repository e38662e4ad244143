"""Feed interfaces and placeholder feeds."""

from .base import ActivitySource, InvestmentFeed, TransactionFeed
from .synthetic import DEFAULT_TEMPLATES, OptimizerEventTemplate, SyntheticOptimizerFeed

__all__ = [
    "ActivitySource",
    "InvestmentFeed",
    "TransactionFeed",
    "DEFAULT_TEMPLATES",
    "OptimizerEventTemplate",
    "SyntheticOptimizerFeed",
]
