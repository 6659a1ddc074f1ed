"""Discrete list filters expressed as Django ``Q`` objects."""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

from django.db.models import Q

from shared.domain.errors import InvalidFilterError


@dataclass(frozen=True)
class FilterSpec:
    """Maps each accepted filter value to a ``Q`` factory.

    Factories are called per query so time-relative filters see the current
    clock.
    """

    name: str
    choices: Mapping[str, Callable[[], Q]]

    def to_q(self, value: str) -> Q:
        try:
            factory = self.choices[value]
        except KeyError:
            raise InvalidFilterError(self.name, value) from None
        return factory()


def choice_filter(name: str, field: str, values: Iterable[str]) -> FilterSpec:
    """Equality filter on an enum-like column."""
    return FilterSpec(
        name=name,
        choices={value: (lambda value=value: Q(**{field: value})) for value in values},
    )


def flag_filter(name: str, field: str, on: str, off: str) -> FilterSpec:
    """Two-valued filter on a boolean column, e.g. featured/not_featured."""
    return FilterSpec(
        name=name,
        choices={on: lambda: Q(**{field: True}), off: lambda: Q(**{field: False})},
    )


def venue_status_filter() -> FilterSpec:
    """The active/inactive/featured status select used by the venue lists."""
    return FilterSpec(
        name="status",
        choices={
            "active": lambda: Q(is_active=True),
            "inactive": lambda: Q(is_active=False),
            "featured": lambda: Q(is_featured=True),
        },
    )
