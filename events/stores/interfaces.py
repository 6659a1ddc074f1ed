"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from contextlib import AbstractContextManager
from datetime import datetime

from events.domain import ClubOption, Event, EventCommand, EventId, Zone, ZoneFields, ZoneId
from shared.domain import ListQuery, Page
from shared.stores.interfaces import FlagStore


class EventStore(FlagStore):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self, query: ListQuery) -> Page[Event]:
        """Return one page of events, newest first, with zones attached."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def event_windows(self) -> list[tuple[datetime, datetime]]:
        """Return (start_date, end_date) for every event."""
        ...

    @abstractmethod
    def list_club_options(self) -> list[ClubOption]:
        """Return every club, ordered by name."""
        ...

    @abstractmethod
    def create_event(self, command: EventCommand) -> Event:
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, command: EventCommand) -> Event | None:
        """Overwrite the editable fields; None if the event does not exist."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event and, through the storage layer, its zones."""
        ...


class ZoneStore(ABC):
    """Interface for zone persistence operations.

    ``supports_transactions`` tells callers whether ``atomic()`` really rolls
    back; when False it only groups statements.
    """

    supports_transactions: bool = False

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        ...

    def on_commit(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` once the enclosing transaction commits.

        Stores without transactions have nothing to wait for.
        """
        callback()

    @abstractmethod
    def list_zones(self, event_id: EventId) -> list[Zone]:
        """Return the event's zones ordered by name."""
        ...

    @abstractmethod
    def delete_zones(self, event_id: EventId, zone_ids: Sequence[ZoneId]) -> int:
        """Delete the given zones of one event in a single statement."""
        ...

    @abstractmethod
    def update_zone(self, event_id: EventId, zone_id: ZoneId, fields: ZoneFields) -> Zone:
        """Update one zone in place.

        Raises:
            NotFoundError: If the zone does not exist under this event.
        """
        ...

    @abstractmethod
    def insert_zone(self, event_id: EventId, fields: ZoneFields) -> Zone:
        ...
