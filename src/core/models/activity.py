"""Activity data models for the unified dashboard feed."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class ActivityKind(Enum):
    """Kinds of displayable activity."""

    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    OPTIMIZATION = "optimization"


USER_KINDS = frozenset({ActivityKind.DEPOSIT, ActivityKind.WITHDRAW})


class FilterMode(Enum):
    """Projection applied to the merged activity feed."""

    ALL = "all"
    USER = "user"
    OPTIMIZER = "optimizer"

    @classmethod
    def parse(cls, value) -> "FilterMode":
        """Accept a FilterMode or its name ("ai" is kept as an alias of optimizer)."""
        if isinstance(value, FilterMode):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key == "ai":
                return cls.OPTIMIZER
            for mode in cls:
                if mode.value == key:
                    return mode
        raise ValueError(f"Unknown filter mode: {value!r}")


@dataclass(frozen=True)
class Activity:
    """A single event in the activity feed.

    User activities (deposit/withdraw) carry an amount and a masked actor;
    optimizer activities carry an action and a result instead.
    """

    id: str
    kind: ActivityKind
    timestamp: datetime
    vault_ref: str

    # User activity
    amount: Optional[Decimal] = None
    actor_ref: Optional[str] = None

    # Optimizer activity
    optimizer_action: Optional[str] = None
    optimizer_result: Optional[str] = None

    def __post_init__(self):
        if self.kind in USER_KINDS:
            if self.amount is None:
                raise ValueError(f"{self.kind.value} activity {self.id} requires an amount")
            if self.optimizer_action is not None or self.optimizer_result is not None:
                raise ValueError(f"{self.kind.value} activity {self.id} cannot carry optimizer fields")
        else:
            if self.amount is not None or self.actor_ref is not None:
                raise ValueError(f"Optimization activity {self.id} cannot carry amount or actor")
            if self.optimizer_action is None or self.optimizer_result is None:
                raise ValueError(f"Optimization activity {self.id} requires action and result")

    @property
    def is_user_activity(self) -> bool:
        """Check if the activity originated from a user."""
        return self.kind in USER_KINDS

    @property
    def is_optimizer_activity(self) -> bool:
        """Check if the activity originated from the optimizer."""
        return self.kind == ActivityKind.OPTIMIZATION

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        data = {
            "id": self.id,
            "kind": self.kind.value,
            "timestamp": self.timestamp.isoformat(),
            "vault_ref": self.vault_ref,
        }
        if self.is_user_activity:
            data["amount"] = str(self.amount)
            data["actor_ref"] = self.actor_ref
        else:
            data["optimizer_action"] = self.optimizer_action
            data["optimizer_result"] = self.optimizer_result
        return data
