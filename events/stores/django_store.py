"""Django ORM implementation of the EventStore and ZoneStore."""

from collections.abc import Callable, Sequence
from contextlib import AbstractContextManager
from datetime import datetime

from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from events import models as orm
from events.domain import (
    Capacity,
    ClubOption,
    Event,
    EventCommand,
    EventId,
    Money,
    Zone,
    ZoneFields,
    ZoneId,
)
from events.stores.interfaces import EventStore, ZoneStore
from shared.domain import EntityId, ListQuery, Page
from shared.domain.errors import InvalidToggleFieldError, NotFoundError
from shared.stores.django_store import translate_database_errors
from shared.stores.filters import FilterSpec, flag_filter
from shared.stores.listing import ListConfig, paginate
from venues.models import Club


def _ongoing() -> Q:
    now = timezone.now()
    return Q(start_date__lte=now, end_date__gte=now)


def event_status_filter() -> FilterSpec:
    return FilterSpec(
        name="status",
        choices={
            "upcoming": lambda: Q(start_date__gt=timezone.now()),
            "ongoing": _ongoing,
            "past": lambda: Q(end_date__lt=timezone.now()),
        },
    )


EVENT_LISTING = ListConfig(
    search_fields=("title", "description", "location", "club__name"),
    filters=(
        event_status_filter(),
        flag_filter("featured", "is_featured", on="featured", off="not_featured"),
    ),
)


def zone_to_domain(zone: orm.Zone) -> Zone:
    return Zone(
        id=ZoneId(zone.id),
        event_id=EventId(zone.event_id),
        name=zone.name,
        price=Money(zone.price),
        capacity=Capacity(zone.capacity),
        description=zone.description,
        created_at=zone.created_at,
    )


def event_to_domain(event: orm.Event) -> Event:
    return Event(
        id=EventId(event.id),
        title=event.title,
        description=event.description,
        location=event.location,
        start_date=event.start_date,
        end_date=event.end_date,
        club_id=event.club_id,
        club_name=event.club.name if event.club_id else None,
        cover_image=event.cover_image,
        is_featured=event.is_featured,
        created_at=event.created_at,
        updated_at=event.updated_at,
        zones=tuple(zone_to_domain(zone) for zone in event.zones.all()),
    )


def _event_columns(command: EventCommand) -> dict:
    return {
        "title": command.title,
        "description": command.description,
        "location": command.location,
        "start_date": command.start_date,
        "end_date": command.end_date,
        "club_id": command.club_id,
        "cover_image": command.cover_image,
    }


def _zone_columns(fields: ZoneFields) -> dict:
    return {
        "name": fields.name,
        "price": fields.price.amount,
        "capacity": fields.capacity.value,
        "description": fields.description,
    }


class DjangoEventStore(EventStore):
    """PostgreSQL-backed event store using Django ORM."""

    def _queryset(self):
        return orm.Event.objects.select_related("club").prefetch_related("zones")

    def list_events(self, query: ListQuery) -> Page[Event]:
        with translate_database_errors("load events"):
            page = paginate(self._queryset(), query, EVENT_LISTING)
        return page.map(event_to_domain)

    def get_event(self, event_id: EventId) -> Event | None:
        with translate_database_errors("load event"):
            event = self._queryset().filter(pk=event_id.value).first()
        return event_to_domain(event) if event is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        with translate_database_errors("load event"):
            return orm.Event.objects.filter(pk=event_id.value).exists()

    def event_windows(self) -> list[tuple[datetime, datetime]]:
        with translate_database_errors("load event statistics"):
            return list(orm.Event.objects.values_list("start_date", "end_date"))

    def list_club_options(self) -> list[ClubOption]:
        with translate_database_errors("load clubs"):
            clubs = Club.objects.order_by("name", "pk").values_list("id", "name")
            return [ClubOption(id=club_id, name=name) for club_id, name in clubs]

    def create_event(self, command: EventCommand) -> Event:
        with translate_database_errors("create event"):
            event = orm.Event.objects.create(**_event_columns(command))
        return self.get_event(EventId(event.id))

    def update_event(self, event_id: EventId, command: EventCommand) -> Event | None:
        with translate_database_errors("update event"):
            event = orm.Event.objects.filter(pk=event_id.value).first()
            if event is None:
                return None
            for column, value in _event_columns(command).items():
                setattr(event, column, value)
            event.save()
        return self.get_event(event_id)

    def delete_event(self, event_id: EventId) -> bool:
        with translate_database_errors("delete event"):
            deleted, _ = orm.Event.objects.filter(pk=event_id.value).delete()
        return deleted > 0

    def set_flag(self, entity_id: EntityId, field: str, value: bool) -> None:
        if field != "is_featured":
            raise InvalidToggleFieldError(field)
        with translate_database_errors("update featured status"):
            updated = orm.Event.objects.filter(pk=entity_id.value).update(
                is_featured=value, updated_at=timezone.now()
            )
        if not updated:
            raise NotFoundError("event", str(entity_id))


class DjangoZoneStore(ZoneStore):
    """Zone store running each reconciliation inside one database transaction."""

    supports_transactions = True

    def atomic(self) -> AbstractContextManager:
        return transaction.atomic()

    def on_commit(self, callback: Callable[[], None]) -> None:
        transaction.on_commit(callback)

    def list_zones(self, event_id: EventId) -> list[Zone]:
        with translate_database_errors("load event zones"):
            zones = orm.Zone.objects.filter(event_id=event_id.value).order_by("name", "pk")
            return [zone_to_domain(zone) for zone in zones]

    def delete_zones(self, event_id: EventId, zone_ids: Sequence[ZoneId]) -> int:
        with translate_database_errors("delete zones"):
            deleted, _ = orm.Zone.objects.filter(
                event_id=event_id.value, pk__in=[zone_id.value for zone_id in zone_ids]
            ).delete()
        return deleted

    def update_zone(self, event_id: EventId, zone_id: ZoneId, fields: ZoneFields) -> Zone:
        with translate_database_errors("update zone"):
            updated = orm.Zone.objects.filter(pk=zone_id.value, event_id=event_id.value).update(
                **_zone_columns(fields)
            )
            if not updated:
                raise NotFoundError("zone", str(zone_id))
            return zone_to_domain(orm.Zone.objects.get(pk=zone_id.value))

    def insert_zone(self, event_id: EventId, fields: ZoneFields) -> Zone:
        with translate_database_errors("create zone"):
            zone = orm.Zone.objects.create(event_id=event_id.value, **_zone_columns(fields))
        return zone_to_domain(zone)
