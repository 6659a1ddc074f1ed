"""Draft zones: the unvalidated, form-local rows of one event edit session.

A draft keeps name, price and capacity exactly as typed. Parsing into
``ZoneFields`` happens only when the session is committed.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Self
from uuid import uuid4

from events.domain.models import Zone
from events.domain.value_objects import Capacity, Money, ZoneId

NAME_MAX_LENGTH = 100
MAX_PRICE = Decimal("99999999.99")
CENT = Decimal("0.01")
MAX_CAPACITY = 2_147_483_647


def new_local_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class ZoneFields:
    """Parsed, valid zone attributes."""

    name: str
    price: Money
    capacity: Capacity
    description: str | None = None


@dataclass(frozen=True)
class DraftZone:
    """One row of the zone editor."""

    local_id: str
    name: str = ""
    price: str = ""
    capacity: str = ""
    description: str = ""
    db_id: ZoneId | None = None
    is_existing: bool = False

    @classmethod
    def blank(cls) -> Self:
        return cls(local_id=new_local_id())

    @classmethod
    def from_zone(cls, zone: Zone) -> Self:
        return cls(
            local_id=new_local_id(),
            name=zone.name,
            price=str(zone.price.amount),
            capacity=str(zone.capacity.value),
            description=zone.description or "",
            db_id=zone.id,
            is_existing=True,
        )

    @property
    def is_blank(self) -> bool:
        """True for an untouched row; blank rows are ignored, not rejected."""
        return not (self.name.strip() or self.price.strip() or self.capacity.strip())

    @property
    def identity(self) -> ZoneId | None:
        """The persisted zone this row edits, or None for a new zone."""
        return self.db_id if self.is_existing else None


def parse_price(text: str) -> Money | None:
    try:
        amount = Decimal(text.strip())
    except InvalidOperation:
        return None
    if not amount.is_finite() or amount < 0 or amount > MAX_PRICE:
        return None
    # the column keeps two decimal places
    if amount != amount.quantize(CENT):
        return None
    # "-0" parses fine but should not be stored with a sign
    return Money(amount.copy_abs() if amount == 0 else amount)


def parse_capacity(text: str) -> Capacity | None:
    text = text.strip()
    if not text.isdecimal():
        return None
    value = int(text)
    if value < 1 or value > MAX_CAPACITY:
        return None
    return Capacity(value)


def parse_name(text: str) -> str | None:
    name = text.strip()
    if not name or len(name) > NAME_MAX_LENGTH:
        return None
    return name


def invalid_fields(draft: DraftZone) -> tuple[str, ...]:
    """Names of the fields of ``draft`` that do not parse."""
    problems = []
    if parse_name(draft.name) is None:
        problems.append("name")
    if parse_price(draft.price) is None:
        problems.append("price")
    if parse_capacity(draft.capacity) is None:
        problems.append("capacity")
    return tuple(problems)


def to_fields(draft: DraftZone) -> ZoneFields | None:
    """Parse a draft, or None when any field is invalid."""
    name = parse_name(draft.name)
    price = parse_price(draft.price)
    capacity = parse_capacity(draft.capacity)
    if name is None or price is None or capacity is None:
        return None
    description = draft.description.strip() or None
    return ZoneFields(name=name, price=price, capacity=capacity, description=description)
