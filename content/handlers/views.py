"""HTTP handlers (views) for categories and podcasts.

Listing, toggling and (for categories) deleting go through the generic
entity routes; these views add the create and edit forms on the same paths.
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from content.handlers.serializers import (
    CategoryWriteSerializer,
    PodcastSerializer,
    PodcastWriteSerializer,
)
from content.services.category_service import CategoryService
from content.services.podcast_service import PodcastService
from content.stores.django_store import DjangoCategoryStore, DjangoPodcastStore
from shared.cache import query_cache
from shared.handlers import AdminAPIView, EntityDetailView, EntityListView
from shared.storage import DjangoObjectStorage


def category_service(notifier) -> CategoryService:
    return CategoryService(DjangoCategoryStore(), query_cache, notifier)


def podcast_service(notifier) -> PodcastService:
    return PodcastService(DjangoPodcastStore(), DjangoObjectStorage(), query_cache, notifier)


class CategoryListView(EntityListView):
    """Handler for GET|POST /api/admin/categories"""

    def post(self, request: Request, entity: str) -> Response:
        serializer = CategoryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        category_id = category_service(self.notifier).create(serializer.command())
        return self.respond({"id": category_id}, status.HTTP_201_CREATED)


class CategoryDetailView(EntityDetailView):
    """Handler for PUT|DELETE /api/admin/categories/{entity_id}"""

    def put(self, request: Request, entity: str, entity_id: str) -> Response:
        serializer = CategoryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        category_service(self.notifier).update(entity_id, serializer.command())
        return self.respond({"id": entity_id})


class CategoryDefaultsView(AdminAPIView):
    """Handler for POST /api/admin/categories/defaults"""

    def post(self, request: Request) -> Response:
        count = category_service(self.notifier).add_defaults()
        return self.respond({"added": count})


class PodcastListView(EntityListView):
    """Handler for GET|POST /api/admin/podcasts"""

    def post(self, request: Request, entity: str) -> Response:
        serializer = PodcastWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        podcast = podcast_service(self.notifier).create(serializer.command(), serializer.cover())
        return self.respond(PodcastSerializer(podcast).data, status.HTTP_201_CREATED)


class PodcastDetailView(EntityDetailView):
    """Handler for PUT|DELETE /api/admin/podcasts/{entity_id}"""

    def put(self, request: Request, entity: str, entity_id: str) -> Response:
        serializer = PodcastWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        podcast = podcast_service(self.notifier).update(
            entity_id, serializer.command(), serializer.cover()
        )
        return self.respond(PodcastSerializer(podcast).data)

    def delete(self, request: Request, entity: str, entity_id: str) -> Response:
        podcast_service(self.notifier).delete(entity_id)
        return self.respond({"id": entity_id})
