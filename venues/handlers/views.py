"""HTTP handlers (views) for club, venue and live show forms.

Listing and toggling go through the generic entity routes; these views add
the create and edit forms on the same paths and remove images on delete.
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from shared.cache import query_cache
from shared.handlers import EntityDetailView, EntityListView
from shared.registry import registry
from shared.storage import DjangoObjectStorage
from venues.handlers.serializers import (
    ClubWriteSerializer,
    LiveShowWriteSerializer,
    RestaurantWriteSerializer,
    VenueWriteSerializer,
)
from venues.listings import IMAGE_SLOTS
from venues.services.listing_service import ListingService
from venues.stores.django_store import DjangoListingStore

WRITE_SERIALIZERS = {
    "clubs": ClubWriteSerializer,
    "beaches": VenueWriteSerializer,
    "pubs": VenueWriteSerializer,
    "lounges": VenueWriteSerializer,
    "restaurants": RestaurantWriteSerializer,
    "arcade-centers": VenueWriteSerializer,
    "live-shows": LiveShowWriteSerializer,
}


def listing_service(entity: str, notifier) -> ListingService:
    definition = registry.get(entity)
    slot = IMAGE_SLOTS[entity]
    return ListingService(
        definition,
        slot,
        DjangoListingStore(definition, slot.column),
        DjangoObjectStorage(),
        query_cache,
        notifier,
    )


def parse_form(request: Request, entity: str):
    serializer = WRITE_SERIALIZERS[entity](data=request.data)
    serializer.is_valid(raise_exception=True)
    return serializer


class ListingListView(EntityListView):
    """Handler for GET|POST /api/admin/{clubs,beaches,...}"""

    def post(self, request: Request, entity: str) -> Response:
        form = parse_form(request, entity)
        row = listing_service(entity, self.notifier).create(form.command(), form.image())
        data = registry.get(entity).serializer_class(row).data
        return self.respond(data, status.HTTP_201_CREATED)


class ListingDetailView(EntityDetailView):
    """Handler for PUT|DELETE /api/admin/{clubs,beaches,...}/{entity_id}"""

    def put(self, request: Request, entity: str, entity_id: str) -> Response:
        form = parse_form(request, entity)
        row = listing_service(entity, self.notifier).update(
            entity_id, form.command(), form.image()
        )
        return self.respond(registry.get(entity).serializer_class(row).data)

    def delete(self, request: Request, entity: str, entity_id: str) -> Response:
        listing_service(entity, self.notifier).delete(entity_id)
        return self.respond({"id": entity_id})
