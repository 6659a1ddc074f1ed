"""Browse categories and the default set every installation starts with."""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Self

from content.domain.errors import InvalidSortOrderError
from shared.domain.errors import MissingRequiredFieldError

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def to_slug(text: str) -> str:
    """``Live Shows!`` -> ``live_shows``."""
    return _NON_SLUG.sub("_", text.strip().lower()).strip("_")


def parse_sort_order(text: str) -> int | None:
    """Blank means unordered; anything else must be a whole number."""
    text = text.strip()
    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise InvalidSortOrderError() from None
    if not value.is_finite() or value != value.to_integral_value():
        raise InvalidSortOrderError()
    return int(value)


def _optional(text: str | None) -> str | None:
    text = (text or "").strip()
    return text or None


@dataclass(frozen=True)
class CategoryCommand:
    display_name: str
    name: str
    icon: str | None = None
    color: str | None = None
    sort_order: int | None = None
    is_active: bool = True

    @classmethod
    def from_form(
        cls,
        display_name: str,
        name: str = "",
        icon: str | None = None,
        color: str | None = None,
        sort_order: str = "",
        is_active: bool = True,
    ) -> Self:
        """Build from raw form text; ``name`` defaults to the slug of the display name.

        Raises:
            MissingRequiredFieldError: If the display name (or derived name) is empty.
            InvalidSortOrderError: If sort order is not a whole number.
        """
        display_name = display_name.strip()
        if not display_name:
            raise MissingRequiredFieldError(("display_name",))
        name = name.strip() or to_slug(display_name)
        if not name:
            raise MissingRequiredFieldError(("name",))
        return cls(
            display_name=display_name,
            name=name,
            icon=_optional(icon),
            color=_optional(color),
            sort_order=parse_sort_order(sort_order),
            is_active=is_active,
        )


DEFAULT_CATEGORIES = (
    CategoryCommand(display_name="Restaurants", name="restaurants", sort_order=10),
    CategoryCommand(display_name="Clubs", name="clubs", sort_order=20),
    CategoryCommand(display_name="Lounges", name="lounges", sort_order=30),
    CategoryCommand(display_name="Pubs", name="pubs", sort_order=40),
    CategoryCommand(display_name="Live Shows", name="live_shows", sort_order=50),
    CategoryCommand(display_name="Arcade Centers", name="arcade_centers", sort_order=60),
    CategoryCommand(display_name="Beaches", name="beaches", sort_order=70),
)


def missing_defaults(existing_names: Iterable[str]) -> list[CategoryCommand]:
    existing = set(existing_names)
    return [category for category in DEFAULT_CATEGORIES if category.name not in existing]
