"""Data layer for the vault dashboard."""

from .parser import MalformedRecordError, RecordParser
from .feeds import (
    ActivitySource,
    InvestmentFeed,
    TransactionFeed,
    OptimizerEventTemplate,
    SyntheticOptimizerFeed,
)

__all__ = [
    "MalformedRecordError",
    "RecordParser",
    "ActivitySource",
    "InvestmentFeed",
    "TransactionFeed",
    "OptimizerEventTemplate",
    "SyntheticOptimizerFeed",
]
