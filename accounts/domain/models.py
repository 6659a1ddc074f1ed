"""Domain models for profiles and loyalty points.

These are pure domain objects with no API input rules.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Self

from accounts.domain.errors import ZeroPointsAdjustmentError
from shared.domain import EntityId
from shared.domain.errors import MissingRequiredFieldError

DEFAULT_TIER = "Bronze"


class Role(Enum):
    ADMIN = "admin"
    USER = "user"
    STAFF = "staff"
    BLOGGER = "blogger"


class TransactionType(Enum):
    EARNED = "earned"
    REDEEMED = "redeemed"
    ADMIN_CREDIT = "admin_credit"
    ADMIN_DEBIT = "admin_debit"
    BONUS = "bonus"
    ADJUSTMENT = "adjustment"


ADMIN_TRANSACTION_TYPES = (
    TransactionType.ADMIN_CREDIT,
    TransactionType.ADMIN_DEBIT,
    TransactionType.BONUS,
    TransactionType.ADJUSTMENT,
)


@dataclass(frozen=True)
class PointsBalance:
    """A user's loyalty balance.

    ``total`` only ever grows; ``used`` counts everything deducted.
    """

    total: int = 0
    available: int = 0
    used: int = 0

    def apply(self, delta: int) -> Self:
        return replace(
            self,
            total=self.total + max(delta, 0),
            available=max(0, self.available + delta),
            used=self.used + (-delta if delta < 0 else 0),
        )


@dataclass(frozen=True)
class MembershipTier:
    name: str
    min_points: int
    max_points: int | None = None

    def contains(self, points: int) -> bool:
        return self.min_points <= points and (self.max_points is None or points <= self.max_points)


def tier_for(points: int, tiers: Iterable[MembershipTier]) -> str:
    """Name of the lowest tier whose range holds ``points``."""
    for tier in sorted(tiers, key=lambda t: t.min_points):
        if tier.contains(points):
            return tier.name
    return DEFAULT_TIER


@dataclass(frozen=True)
class PointsAdjustment:
    """Admin credit or debit of one user's points."""

    user_id: EntityId
    points: int
    transaction_type: TransactionType
    description: str = ""

    def __post_init__(self) -> None:
        if self.points == 0:
            raise ZeroPointsAdjustmentError()

    @property
    def resolved_description(self) -> str:
        return self.description.strip() or f"Admin {self.transaction_type.value.replace('_', ' ')}"


@dataclass(frozen=True)
class ProfileUpdate:
    """Partial update of the admin-editable profile fields."""

    role: Role | None = None
    is_premium: bool | None = None
    is_organizer: bool | None = None

    def __post_init__(self) -> None:
        if not self.changes():
            raise MissingRequiredFieldError(("role", "is_premium", "is_organizer"))

    def changes(self) -> dict:
        values = {
            "role": self.role.value if self.role is not None else None,
            "is_premium": self.is_premium,
            "is_organizer": self.is_organizer,
        }
        return {field: value for field, value in values.items() if value is not None}
