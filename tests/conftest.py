"""Pytest configuration and fixtures."""

import pytest
from datetime import datetime, timedelta, timezone

from config.settings import Settings


FIXED_NOW = datetime(2024, 3, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    """Reference instant shared by time-relative tests."""
    return FIXED_NOW


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        performance_window_days=30,
        actor_ref_length=8,
        synthetic_feed_enabled=True,
        default_apr=15.2,
        apr_policies={"deep-sui-vault": 21.5, "cetus-sui-vault": 18.9},
    )


@pytest.fixture
def raw_transactions(fixed_now) -> list[dict]:
    """Transaction feed records, including one unrecognized type."""
    return [
        {
            "id": "tx-0001-abcdef",
            "type": "deposit",
            "amount": 1000,
            "timestamp": (fixed_now - timedelta(days=3)).isoformat().replace("+00:00", "Z"),
            "vaultName": "DEEP-SUI",
        },
        {
            "id": "tx-0002-abcdef",
            "type": "withdraw",
            "amount": 250.5,
            "timestamp": (fixed_now - timedelta(hours=2)).isoformat().replace("+00:00", "Z"),
            "vaultName": "SUI-USDC",
        },
        {
            "id": "tx-0003-abcdef",
            "type": "transfer",
            "amount": 10,
            "timestamp": (fixed_now - timedelta(hours=1)).isoformat().replace("+00:00", "Z"),
            "vaultName": "SUI-USDC",
        },
        {
            "id": "tx-0004-abcdef",
            "type": "deposit",
            "amount": "500",
            "timestamp": fixed_now.replace(hour=10).isoformat().replace("+00:00", "Z"),
            "vaultName": "CETUS-SUI",
        },
    ]


@pytest.fixture
def raw_investments() -> list[dict]:
    """Investment feed records."""
    return [
        {"vaultId": "deep-sui-vault", "principal": 4000, "currentValue": 4400, "profit": 400},
        {"vaultId": "cetus-sui-vault", "principal": 3000, "currentValue": 3150, "profit": 150},
        {"vaultId": "sui-usdc-vault", "principal": 3000, "currentValue": 3030, "profit": 999},
    ]
