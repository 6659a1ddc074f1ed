"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime

from django.utils import timezone

from events.domain import ClubOption, DraftZone, Event, EventCommand, EventId, EventStats, Zone
from events.domain.errors import EventNotFoundError, InvalidEventIdError
from events.services.zone_reconciler import ZoneReconciler
from events.stores.interfaces import EventStore, ZoneStore
from shared.cache import QueryInvalidator
from shared.domain import EntityId, EntityType, ListQuery, Page, ToggleCommand
from shared.domain.errors import DomainError, ValidationError
from shared.notifications import Notifier
from shared.services.images import ImageUploads
from shared.services.toggle import ToggleMutation
from shared.storage import EVENT_IMAGES, ObjectStorage

logger = logging.getLogger(__name__)


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (ValueError, TypeError, AttributeError):
        raise InvalidEventIdError() from None


class EventService:
    """Service for the events screen and the zone editor."""

    def __init__(
        self,
        store: EventStore,
        zone_store: ZoneStore,
        storage: ObjectStorage,
        invalidator: QueryInvalidator,
        notifier: Notifier,
    ) -> None:
        self._store = store
        self._zone_store = zone_store
        self._covers = ImageUploads(storage, EVENT_IMAGES, notifier, noun="cover image")
        self._invalidator = invalidator
        self._notifier = notifier
        self._reconciler = ZoneReconciler(zone_store, invalidator)

    def _failed(self, action: str, err: DomainError) -> None:
        if isinstance(err, ValidationError):
            self._notifier.error(err.message)
        else:
            self._notifier.error(f"Failed to {action}")

    def _require(self, event_id: EventId) -> None:
        if not self._store.event_exists(event_id):
            raise EventNotFoundError(str(event_id))

    def list_events(self, query: ListQuery) -> Page[Event]:
        return self._store.list_events(query)

    def club_options(self) -> list[ClubOption]:
        return self._store.list_club_options()

    def event_stats(self, now: datetime | None = None) -> EventStats:
        return EventStats.from_windows(self._store.event_windows(), now or timezone.now())

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def create_event(
        self, command: EventCommand, zones: Sequence[DraftZone], cover=None
    ) -> Event:
        """Create an event together with its first zones and cover image.

        The zones are validated before the event row is written, so a bad
        zone list never leaves a zoneless event behind. The cover is uploaded
        after that check and removed again if the writes fail.
        """
        stored = None
        try:
            plan = self._reconciler.plan((), zones)
            stored = self._covers.upload(cover)
            if stored is not None:
                command = replace(command, cover_image=stored.url)
            with self._zone_store.atomic():
                event = self._store.create_event(command)
                self._reconciler.apply(event.id, plan)
        except DomainError as err:
            self._covers.discard(stored)
            self._failed("create event", err)
            raise
        self._invalidator.invalidate_entity(EntityType.EVENT)
        logger.info("Created event %s with %d zones", event.id, len(plan.inserts))
        self._notifier.success("Event created successfully!")
        return self._store.get_event(event.id)

    def update_event(
        self,
        event_id: str,
        command: EventCommand,
        zones: Sequence[DraftZone] | None = None,
        cover=None,
    ) -> Event:
        """Save the event form and, when given, the zone editor in one go.

        A new cover replaces the old one, which is removed after the save;
        without one the event keeps its cover.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        stored = None
        try:
            current = self._store.get_event(parsed)
            if current is None:
                raise EventNotFoundError(event_id)
            plan = None
            if zones is not None:
                original = self._original_drafts(parsed)
                plan = self._reconciler.plan(original, zones)
            stored = self._covers.upload(cover)
            command = replace(command, cover_image=stored.url if stored else current.cover_image)
            with self._zone_store.atomic():
                if self._store.update_event(parsed, command) is None:
                    raise EventNotFoundError(event_id)
                if plan is not None:
                    self._reconciler.apply(parsed, plan)
        except DomainError as err:
            self._covers.discard(stored)
            self._failed("update event", err)
            raise
        self._covers.replace(stored, current.cover_image)
        self._invalidator.invalidate_entity(EntityType.EVENT)
        logger.info("Updated event %s", parsed)
        self._notifier.success("Event updated successfully!")
        return self._store.get_event(parsed)

    def delete_event(self, event_id: str) -> None:
        parsed = parse_event_id(event_id)
        try:
            current = self._store.get_event(parsed)
            if current is None or not self._store.delete_event(parsed):
                raise EventNotFoundError(event_id)
        except DomainError as err:
            self._failed("delete event", err)
            raise
        self._covers.remove(current.cover_image)
        self._invalidator.invalidate_entity(EntityType.EVENT)
        self._invalidator.invalidate_entity(EntityType.ZONE)
        logger.info("Deleted event %s", parsed)
        self._notifier.success("Event deleted successfully")

    def toggle_featured(self, event_id: str, observed: bool) -> bool:
        command = ToggleCommand(
            entity_type=EntityType.EVENT,
            label="event",
            entity_id=EntityId(parse_event_id(event_id).value),
            field="is_featured",
            observed=observed,
        )
        return ToggleMutation(self._store, self._invalidator, self._notifier).apply(command)

    def _original_drafts(self, event_id: EventId) -> list[DraftZone]:
        return [DraftZone.from_zone(zone) for zone in self._zone_store.list_zones(event_id)]

    def load_zone_drafts(self, event_id: str) -> list[DraftZone]:
        """Open the zone editor: persisted zones, or a single blank row.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        self._require(parsed)
        return self._original_drafts(parsed) or [DraftZone.blank()]

    def list_zones(self, event_id: str) -> list[Zone]:
        parsed = parse_event_id(event_id)
        self._require(parsed)
        return self._zone_store.list_zones(parsed)

    def save_zones(self, event_id: str, zones: Sequence[DraftZone]) -> list[Zone]:
        """Commit the zone editor against what the store holds right now.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            ValidationError: If the drafts cannot be saved; nothing is written.
            StoreError: If a write fails.
        """
        parsed = parse_event_id(event_id)
        try:
            self._require(parsed)
            saved = self._reconciler.reconcile(parsed, self._original_drafts(parsed), zones)
        except DomainError as err:
            self._failed("update event zones", err)
            raise
        self._notifier.success("Event zones updated successfully!")
        return saved
