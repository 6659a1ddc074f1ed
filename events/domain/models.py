"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Self
from uuid import UUID

from events.domain.errors import InvalidEventScheduleError
from events.domain.value_objects import Capacity, EventId, Money, ZoneId


class EventStatus(Enum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    PAST = "past"


def status_at(start_date: datetime, end_date: datetime, now: datetime) -> EventStatus:
    if start_date > now:
        return EventStatus.UPCOMING
    if end_date >= now:
        return EventStatus.ONGOING
    return EventStatus.PAST


@dataclass(frozen=True)
class Zone:
    """Domain representation of a Zone."""

    id: ZoneId
    event_id: EventId
    name: str
    price: Money
    capacity: Capacity
    description: str | None
    created_at: datetime


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    location: str
    start_date: datetime
    end_date: datetime
    club_id: UUID | None
    club_name: str | None
    cover_image: str | None
    is_featured: bool
    created_at: datetime
    updated_at: datetime
    zones: tuple[Zone, ...] = ()

    def status(self, now: datetime) -> EventStatus:
        return status_at(self.start_date, self.end_date, now)

    @property
    def total_capacity(self) -> int:
        return sum(zone.capacity.value for zone in self.zones)


@dataclass(frozen=True)
class ClubOption:
    """A club the event form can assign an event to."""

    id: UUID
    name: str


@dataclass(frozen=True)
class EventStats:
    """Counts shown above the events table."""

    total: int
    upcoming: int
    ongoing: int
    past: int

    @classmethod
    def from_windows(cls, windows: Iterable[tuple[datetime, datetime]], now: datetime) -> Self:
        counts = {status: 0 for status in EventStatus}
        total = 0
        for start_date, end_date in windows:
            counts[status_at(start_date, end_date, now)] += 1
            total += 1
        return cls(
            total=total,
            upcoming=counts[EventStatus.UPCOMING],
            ongoing=counts[EventStatus.ONGOING],
            past=counts[EventStatus.PAST],
        )


@dataclass(frozen=True)
class EventCommand:
    """Validated event form fields, ready for the store."""

    title: str
    description: str
    location: str
    start_date: datetime
    end_date: datetime
    club_id: UUID
    cover_image: str | None = None

    def __post_init__(self) -> None:
        if self.end_date < self.start_date:
            raise InvalidEventScheduleError()
