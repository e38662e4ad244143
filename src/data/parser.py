"""Raw feed record parser.

Contains all parsing logic for converting transaction and investment
records from the upstream feeds into domain models.

Malformed records are dropped, never propagated: a broken feed shrinks
the dashboard instead of breaking it.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional

from src.core.constants import ACTOR_REF_LENGTH
from src.core.models import Activity, ActivityKind, Investment, RiskLevel, Vault

logger = logging.getLogger(__name__)


class MalformedRecordError(ValueError):
    """Raised internally when a record cannot be mapped to a model."""


TRANSACTION_KINDS = {
    "deposit": ActivityKind.DEPOSIT,
    "withdraw": ActivityKind.WITHDRAW,
}


class RecordParser:
    """Parser for transaction, investment and vault catalog feed records."""

    def __init__(self, actor_ref_length: int = ACTOR_REF_LENGTH):
        self.actor_ref_length = actor_ref_length

    @staticmethod
    def parse_decimal(value: Any) -> Decimal:
        """Parse a value to Decimal, rejecting missing or non-finite input."""
        if value is None or isinstance(value, bool):
            raise MalformedRecordError(f"Not a number: {value!r}")
        if isinstance(value, Decimal):
            result = value
        else:
            try:
                result = Decimal(str(value))
            except (InvalidOperation, ValueError):
                raise MalformedRecordError(f"Not a number: {value!r}")
        if not result.is_finite():
            raise MalformedRecordError(f"Not a finite number: {value!r}")
        return result

    @staticmethod
    def parse_timestamp(value: Any) -> datetime:
        """Parse an ISO-8601 string, unix timestamp or datetime to aware UTC."""
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                parsed = datetime.fromtimestamp(value, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                raise MalformedRecordError(f"Timestamp out of range: {value!r}")
        elif isinstance(value, str) and value.strip():
            try:
                parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
            except ValueError:
                raise MalformedRecordError(f"Invalid timestamp: {value!r}")
        else:
            raise MalformedRecordError(f"Missing timestamp: {value!r}")

        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)

    @staticmethod
    def _field(record: Dict[str, Any], *names: str) -> Any:
        """Get the first present field among camelCase/snake_case aliases."""
        for name in names:
            value = record.get(name)
            if value is not None:
                return value
        raise MalformedRecordError(f"Missing field: {names[0]}")

    @classmethod
    def _text(cls, record: Dict[str, Any], *names: str) -> str:
        value = str(cls._field(record, *names)).strip()
        if not value:
            raise MalformedRecordError(f"Empty field: {names[0]}")
        return value

    # ========== TRANSACTIONS ==========

    def mask_actor(self, record_id: str) -> str:
        """Mask an identifier down to a fixed-length prefix."""
        return record_id[: self.actor_ref_length]

    def parse_transaction(self, record: Dict[str, Any]) -> Optional[Activity]:
        """Parse a transaction record to an Activity.

        Args:
            record: `{id, type, amount, timestamp, vaultName}` from the feed

        Returns:
            Activity, or None if the record is malformed or of an
            unrecognized type
        """
        if not isinstance(record, dict):
            logger.warning(f"Dropping non-mapping transaction record: {type(record).__name__}")
            return None

        raw_type = str(record.get("type", "")).strip().lower()
        kind = TRANSACTION_KINDS.get(raw_type)
        if kind is None:
            logger.debug(f"Dropping transaction {record.get('id')} with unrecognized type {raw_type!r}")
            return None

        try:
            record_id = self._text(record, "id")
            return Activity(
                id=record_id,
                kind=kind,
                timestamp=self.parse_timestamp(self._field(record, "timestamp")),
                vault_ref=self._text(record, "vaultName", "vault_name"),
                amount=self.parse_decimal(self._field(record, "amount")),
                actor_ref=self.mask_actor(record_id),
            )
        except MalformedRecordError as e:
            logger.warning(f"Dropping malformed transaction {record.get('id')}: {e}")
            return None

    def parse_transactions(self, records: Optional[Iterable[Dict[str, Any]]]) -> List[Activity]:
        """Parse a transaction feed, dropping records that fail to parse."""
        if not records:
            return []

        activities = []
        dropped = 0
        for record in records:
            activity = self.parse_transaction(record)
            if activity is None:
                dropped += 1
                continue
            activities.append(activity)

        if dropped:
            logger.info(f"Parsed {len(activities)} transactions, dropped {dropped}")
        return activities

    # ========== INVESTMENTS ==========

    def parse_investment(self, record: Dict[str, Any]) -> Optional[Investment]:
        """Parse an investment record to an Investment.

        Args:
            record: `{vaultId, principal, currentValue, profit}` from the feed

        Returns:
            Investment, or None if the record is malformed
        """
        if not isinstance(record, dict):
            logger.warning(f"Dropping non-mapping investment record: {type(record).__name__}")
            return None

        try:
            reported_profit = record.get("profit")
            return Investment(
                vault_ref=self._text(record, "vaultId", "vault_id"),
                principal=self.parse_decimal(self._field(record, "principal")),
                current_value=self.parse_decimal(self._field(record, "currentValue", "current_value")),
                reported_profit=self.parse_decimal(reported_profit) if reported_profit is not None else None,
            )
        except MalformedRecordError as e:
            logger.warning(f"Dropping malformed investment {record.get('vaultId')}: {e}")
            return None

    def parse_investments(self, records: Optional[Iterable[Dict[str, Any]]]) -> List[Investment]:
        """Parse an investment feed, dropping records that fail to parse."""
        if not records:
            return []

        investments = []
        for record in records:
            investment = self.parse_investment(record)
            if investment is not None:
                investments.append(investment)
        return investments

    # ========== VAULTS ==========

    def parse_vault(self, record: Dict[str, Any]) -> Optional[Vault]:
        """Parse a vault catalog record to a Vault.

        Args:
            record: `{id, name, description, apr, tvl, riskLevel}` from the feed

        Returns:
            Vault, or None if the record is malformed
        """
        if not isinstance(record, dict):
            logger.warning(f"Dropping non-mapping vault record: {type(record).__name__}")
            return None

        try:
            raw_risk = str(record.get("riskLevel", record.get("risk_level", "medium"))).strip().lower()
            try:
                risk_level = RiskLevel(raw_risk)
            except ValueError:
                raise MalformedRecordError(f"Unknown risk level: {raw_risk!r}")

            return Vault(
                id=self._text(record, "id"),
                name=self._text(record, "name"),
                description=str(record.get("description") or ""),
                apr=self.parse_decimal(self._field(record, "apr")),
                tvl=self.parse_decimal(self._field(record, "tvl")),
                risk_level=risk_level,
            )
        except MalformedRecordError as e:
            logger.warning(f"Dropping malformed vault {record.get('id')}: {e}")
            return None

    def parse_vaults(self, records: Optional[Iterable[Dict[str, Any]]]) -> List[Vault]:
        """Parse a vault catalog feed, dropping records that fail to parse."""
        if not records:
            return []
        return [v for v in (self.parse_vault(r) for r in records) if v is not None]
