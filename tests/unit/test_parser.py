"""Unit tests for the feed record parser."""

import pytest
from datetime import datetime, timezone
from decimal import Decimal

from src.core.models import ActivityKind
from src.data.parser import MalformedRecordError, RecordParser


class TestTransactionParsing:
    """Tests for RecordParser.parse_transaction."""

    @pytest.fixture
    def parser(self):
        return RecordParser()

    def test_deposit_record(self, parser):
        """Test a well-formed deposit maps to a deposit activity."""
        activity = parser.parse_transaction({
            "id": "tx1",
            "type": "deposit",
            "amount": 100,
            "timestamp": "2024-01-01T00:00:00Z",
            "vaultName": "SUI-USDC",
        })

        assert activity is not None
        assert activity.kind == ActivityKind.DEPOSIT
        assert activity.vault_ref == "SUI-USDC"
        assert activity.amount == Decimal("100")
        assert activity.timestamp == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert activity.optimizer_action is None
        assert activity.optimizer_result is None

    def test_withdraw_record(self, parser):
        """Test type mapping is case-insensitive."""
        activity = parser.parse_transaction({
            "id": "tx2",
            "type": "Withdraw",
            "amount": "42.5",
            "timestamp": "2024-01-02T08:30:00+00:00",
            "vaultName": "DEEP-SUI",
        })

        assert activity.kind == ActivityKind.WITHDRAW
        assert activity.amount == Decimal("42.5")

    def test_actor_is_masked_prefix(self, parser):
        """Test the actor reference is a fixed-length id prefix."""
        activity = parser.parse_transaction({
            "id": "0x1234567890abcdef",
            "type": "deposit",
            "amount": 1,
            "timestamp": "2024-01-01T00:00:00Z",
            "vaultName": "SUI-USDC",
        })

        assert activity.actor_ref == "0x123456"

    def test_custom_actor_length(self):
        """Test a configured mask length."""
        parser = RecordParser(actor_ref_length=4)
        activity = parser.parse_transaction({
            "id": "abcdefgh",
            "type": "deposit",
            "amount": 1,
            "timestamp": "2024-01-01T00:00:00Z",
            "vaultName": "SUI-USDC",
        })

        assert activity.actor_ref == "abcd"

    def test_snake_case_aliases(self, parser):
        """Test snake_case vault field is accepted."""
        activity = parser.parse_transaction({
            "id": "tx3",
            "type": "deposit",
            "amount": 5,
            "timestamp": 1704067200,
            "vault_name": "CETUS-SUI",
        })

        assert activity.vault_ref == "CETUS-SUI"
        assert activity.timestamp == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_naive_timestamp_assumed_utc(self, parser):
        """Test naive ISO timestamps are treated as UTC."""
        activity = parser.parse_transaction({
            "id": "tx4",
            "type": "deposit",
            "amount": 5,
            "timestamp": "2024-01-01T10:00:00",
            "vaultName": "SUI-USDC",
        })

        assert activity.timestamp.tzinfo is not None
        assert activity.timestamp.hour == 10

    def test_unrecognized_type_dropped(self, parser):
        """Test an unknown type yields no activity and no exception."""
        activity = parser.parse_transaction({
            "id": "tx5",
            "type": "transfer",
            "amount": 5,
            "timestamp": "2024-01-01T00:00:00Z",
            "vaultName": "SUI-USDC",
        })

        assert activity is None

    @pytest.mark.parametrize("missing", ["id", "amount", "timestamp", "vaultName"])
    def test_missing_field_dropped(self, parser, missing):
        """Test a record missing a required field is dropped."""
        record = {
            "id": "tx6",
            "type": "deposit",
            "amount": 5,
            "timestamp": "2024-01-01T00:00:00Z",
            "vaultName": "SUI-USDC",
        }
        del record[missing]

        assert parser.parse_transaction(record) is None

    def test_bad_values_dropped(self, parser):
        """Test unparsable amount or timestamp drops the record."""
        base = {"id": "tx7", "type": "deposit", "vaultName": "SUI-USDC"}

        assert parser.parse_transaction({**base, "amount": "abc", "timestamp": "2024-01-01T00:00:00Z"}) is None
        assert parser.parse_transaction({**base, "amount": "NaN", "timestamp": "2024-01-01T00:00:00Z"}) is None
        assert parser.parse_transaction({**base, "amount": 5, "timestamp": "yesterday"}) is None

    def test_non_mapping_dropped(self, parser):
        """Test non-dict records are dropped."""
        assert parser.parse_transaction(None) is None
        assert parser.parse_transaction(["tx8", "deposit"]) is None

    def test_parse_transactions_drops_and_continues(self, parser, raw_transactions):
        """Test malformed records do not affect the others."""
        activities = parser.parse_transactions(raw_transactions)

        assert [a.id for a in activities] == ["tx-0001-abcdef", "tx-0002-abcdef", "tx-0004-abcdef"]

    def test_parse_transactions_missing_feed(self, parser):
        """Test a missing feed parses to an empty list."""
        assert parser.parse_transactions(None) == []
        assert parser.parse_transactions([]) == []


class TestInvestmentParsing:
    """Tests for RecordParser.parse_investment."""

    @pytest.fixture
    def parser(self):
        return RecordParser()

    def test_investment_record(self, parser):
        """Test a well-formed investment record."""
        investment = parser.parse_investment(
            {"vaultId": "deep-sui-vault", "principal": 1000, "currentValue": "1100.50", "profit": 100.5}
        )

        assert investment.vault_ref == "deep-sui-vault"
        assert investment.principal == Decimal("1000")
        assert investment.current_value == Decimal("1100.50")
        assert investment.reported_profit == Decimal("100.5")

    def test_profit_derived_from_values(self, parser):
        """Test profit is current value minus principal, not the reported field."""
        investment = parser.parse_investment(
            {"vaultId": "v", "principal": 1000, "currentValue": 1200, "profit": 999}
        )

        assert investment.profit == Decimal("200")
        assert investment.has_profit_drift

    def test_profit_optional(self, parser):
        """Test the profit field may be absent."""
        investment = parser.parse_investment({"vault_id": "v", "principal": 10, "current_value": 11})

        assert investment.reported_profit is None
        assert investment.profit == Decimal("1")
        assert not investment.has_profit_drift

    def test_investment_to_dict(self, parser):
        """Test serialization carries the derived profit."""
        investment = parser.parse_investment(
            {"vaultId": "v", "principal": 1000, "currentValue": 1200, "profit": 999}
        )

        assert investment.to_dict() == {
            "vault_ref": "v",
            "principal": "1000",
            "current_value": "1200",
            "profit": "200",
        }

    def test_malformed_investment_dropped(self, parser):
        """Test malformed investments are dropped from the feed."""
        investments = parser.parse_investments([
            {"vaultId": "a", "principal": 10, "currentValue": 11},
            {"vaultId": "b", "principal": "ten", "currentValue": 11},
            {"principal": 10, "currentValue": 11},
            {"vaultId": "c", "principal": 5, "currentValue": 5},
        ])

        assert [i.vault_ref for i in investments] == ["a", "c"]


class TestParseHelpers:
    """Tests for the parsing helpers."""

    def test_parse_decimal(self):
        assert RecordParser.parse_decimal(1.5) == Decimal("1.5")
        assert RecordParser.parse_decimal(Decimal("2")) == Decimal("2")

    def test_parse_decimal_rejects(self):
        with pytest.raises(MalformedRecordError):
            RecordParser.parse_decimal(None)
        with pytest.raises(MalformedRecordError):
            RecordParser.parse_decimal(True)
        with pytest.raises(MalformedRecordError):
            RecordParser.parse_decimal("Infinity")

    def test_parse_timestamp_offset_normalized(self):
        parsed = RecordParser.parse_timestamp("2024-01-01T05:00:00+05:00")

        assert parsed == datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
        assert parsed.tzinfo == timezone.utc
