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
from rest_framework.views import APIView

from shared.cache import query_cache
from shared.handlers.serializers import (
    StatusSerializer,
    ToggleSerializer,
    page_payload,
    parse_list_query,
)
from shared.notifications import CollectingNotifier, LoggingNotifier
from shared.registry import EntityDefinition, registry
from shared.services.entity_service import EntityService
from shared.stores.django_store import DjangoEntityStore


class AdminAPIView(APIView):
    """Base view collecting operator notifications into the response."""

    def initial(self, request: Request, *args, **kwargs) -> None:
        self.notifier = CollectingNotifier(forward=LoggingNotifier())
        super().initial(request, *args, **kwargs)

    def respond(self, data=None, status_code: int = status.HTTP_200_OK) -> Response:
        return Response({"data": data, "messages": self.notifier.as_payload()}, status=status_code)


def entity_service(definition: EntityDefinition, notifier) -> EntityService:
    return EntityService(definition, DjangoEntityStore(definition), query_cache, notifier)


class EntityListView(AdminAPIView):
    """Handler for GET /api/admin/{entity}"""

    def get(self, request: Request, entity: str) -> Response:
        definition = registry.get(entity)
        query = parse_list_query(request, definition.listing.filter_names)
        service = entity_service(definition, self.notifier)
        payload = query_cache.get_or_set(
            definition.cache_key,
            (definition.slug, *query.cache_parts()),
            lambda: page_payload(service.list(query), definition.serializer_class),
        )
        return self.respond(payload)


class EntityDetailView(AdminAPIView):
    """Handler for DELETE /api/admin/{entity}/{id}"""

    def delete(self, request: Request, entity: str, entity_id: str) -> Response:
        definition = registry.get(entity)
        if not definition.deletable:
            return Response(status=status.HTTP_405_METHOD_NOT_ALLOWED)
        entity_service(definition, self.notifier).delete(entity_id)
        return self.respond({"id": entity_id})


class EntityToggleView(AdminAPIView):
    """Handler for POST /api/admin/{entity}/{id}/toggle/{field}"""

    def post(self, request: Request, entity: str, entity_id: str, field: str) -> Response:
        definition = registry.get(entity)
        serializer = ToggleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        value = entity_service(definition, self.notifier).toggle(
            entity_id, field, serializer.validated_data["current"]
        )
        return self.respond({"id": entity_id, "field": field, "value": value})


class EntityStatusView(AdminAPIView):
    """Handler for PATCH /api/admin/{entity}/{id}/status"""

    def patch(self, request: Request, entity: str, entity_id: str) -> Response:
        definition = registry.get(entity)
        if not definition.statuses:
            return Response(status=status.HTTP_405_METHOD_NOT_ALLOWED)
        serializer = StatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        value = entity_service(definition, self.notifier).change_status(
            entity_id, serializer.validated_data["status"]
        )
        return self.respond({"id": entity_id, "status": value})
