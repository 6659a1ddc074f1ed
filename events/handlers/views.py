"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to the exception handler
- Never contain business logic
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from events.handlers.serializers import (
    ClubOptionSerializer,
    DraftZoneSerializer,
    EventSerializer,
    EventStatsSerializer,
    EventWriteSerializer,
    ZoneEditSerializer,
    ZoneSerializer,
)
from events.services.event_service import EventService
from events.stores.django_store import EVENT_LISTING, DjangoEventStore, DjangoZoneStore
from shared.cache import query_cache
from shared.domain import CacheKey
from shared.handlers import AdminAPIView
from shared.handlers.serializers import ToggleSerializer, page_payload, parse_list_query
from shared.storage import DjangoObjectStorage


def event_service(notifier) -> EventService:
    return EventService(
        DjangoEventStore(), DjangoZoneStore(), DjangoObjectStorage(), query_cache, notifier
    )


class EventListView(AdminAPIView):
    """Handler for GET|POST /api/admin/events"""

    def get(self, request: Request) -> Response:
        query = parse_list_query(request, EVENT_LISTING.filter_names)
        service = event_service(self.notifier)
        payload = query_cache.get_or_set(
            CacheKey.ADMIN_EVENTS,
            ("events", *query.cache_parts()),
            lambda: page_payload(service.list_events(query), EventSerializer),
        )
        return self.respond(payload)

    def post(self, request: Request) -> Response:
        serializer = EventWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = event_service(self.notifier).create_event(
            serializer.command(), serializer.drafts() or [], serializer.cover()
        )
        return self.respond(EventSerializer(event).data, status.HTTP_201_CREATED)


class EventDetailView(AdminAPIView):
    """Handler for GET|PUT|DELETE /api/admin/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = event_service(self.notifier).get_event(event_id)
        return self.respond(EventSerializer(event).data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = event_service(self.notifier).update_event(
            event_id, serializer.command(), serializer.drafts(), serializer.cover()
        )
        return self.respond(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        event_service(self.notifier).delete_event(event_id)
        return self.respond({"id": event_id})


class EventZonesView(AdminAPIView):
    """Handler for GET|PUT /api/admin/events/{event_id}/zones"""

    def get(self, request: Request, event_id: str) -> Response:
        drafts = event_service(self.notifier).load_zone_drafts(event_id)
        return self.respond({"zones": DraftZoneSerializer(drafts, many=True).data})

    def put(self, request: Request, event_id: str) -> Response:
        serializer = ZoneEditSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        zones = event_service(self.notifier).save_zones(event_id, serializer.drafts())
        return self.respond({"zones": ZoneSerializer(zones, many=True).data})


class EventStatsView(AdminAPIView):
    """Handler for GET /api/admin/events/stats"""

    def get(self, request: Request) -> Response:
        service = event_service(self.notifier)
        payload = query_cache.get_or_set(
            CacheKey.EVENT_STATS,
            ("stats",),
            lambda: EventStatsSerializer(service.event_stats()).data,
        )
        return self.respond(payload)


class EventClubOptionsView(AdminAPIView):
    """Handler for GET /api/admin/events/clubs"""

    def get(self, request: Request) -> Response:
        service = event_service(self.notifier)
        payload = query_cache.get_or_set(
            CacheKey.CLUBS_FOR_EVENTS,
            ("options",),
            lambda: list(ClubOptionSerializer(service.club_options(), many=True).data),
        )
        return self.respond(payload)


class EventFeaturedToggleView(AdminAPIView):
    """Handler for POST /api/admin/events/{event_id}/toggle/is_featured"""

    def post(self, request: Request, event_id: str) -> Response:
        serializer = ToggleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        value = event_service(self.notifier).toggle_featured(
            event_id, serializer.validated_data["current"]
        )
        return self.respond({"id": event_id, "field": "is_featured", "value": value})
