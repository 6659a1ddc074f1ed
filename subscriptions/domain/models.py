"""Domain models for subscription plans."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from shared.domain.errors import MissingRequiredFieldError


@dataclass(frozen=True)
class Plan:
    id: UUID
    name: str
    description: str | None
    price_monthly: Decimal
    price_yearly: Decimal | None
    tier_level: int
    features: dict[str, Any]
    benefits: tuple[str, ...]
    is_active: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PlanCommand:
    """Validated plan form, features already encoded."""

    name: str
    description: str
    price_monthly: Decimal = Decimal("0")
    price_yearly: Decimal | None = None
    tier_level: int = 1
    features: dict[str, Any] = field(default_factory=dict)
    benefits: tuple[str, ...] = ()
    is_active: bool = True

    def __post_init__(self) -> None:
        missing = tuple(
            name for name, value in (("name", self.name), ("description", self.description))
            if not value.strip()
        )
        if missing:
            raise MissingRequiredFieldError(missing)
