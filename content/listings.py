"""List definitions for feeds, categories, concierge requests and podcasts."""

from django.db.models import F

from content.handlers.serializers import (
    CategorySerializer,
    ConciergeRequestSerializer,
    FeedSerializer,
    PodcastSerializer,
)
from content.models import Category, ConciergeRequest, Feed, Podcast
from shared.domain import CacheKey, EntityType
from shared.registry import EntityDefinition, registry
from shared.stores.filters import choice_filter, flag_filter
from shared.stores.listing import ListConfig

CONCIERGE_STATUSES = tuple(value for value, _ in ConciergeRequest.STATUS_CHOICES)


def register() -> None:
    registry.register(
        EntityDefinition(
            slug="feeds",
            entity_type=EntityType.FEED,
            label="post",
            model=Feed,
            serializer_class=FeedSerializer,
            listing=ListConfig(search_fields=("content",)),
            cache_key=CacheKey.ADMIN_FEEDS,
            select_related=("user", "event"),
        )
    )
    registry.register(
        EntityDefinition(
            slug="categories",
            entity_type=EntityType.CATEGORY,
            label="category",
            model=Category,
            serializer_class=CategorySerializer,
            listing=ListConfig(
                search_fields=("name", "display_name"),
                filters=(flag_filter("status", "is_active", on="active", off="inactive"),),
                ordering=(F("sort_order").asc(nulls_last=True), "display_name"),
            ),
            cache_key=CacheKey.ADMIN_CATEGORIES,
            toggles=("is_active",),
        )
    )
    registry.register(
        EntityDefinition(
            slug="concierge",
            entity_type=EntityType.CONCIERGE_REQUEST,
            label="request",
            model=ConciergeRequest,
            serializer_class=ConciergeRequestSerializer,
            listing=ListConfig(
                search_fields=("service_name", "description", "user__full_name"),
                filters=(
                    choice_filter("status", "status", CONCIERGE_STATUSES),
                    flag_filter("urgency", "is_urgent", on="urgent", off="normal"),
                ),
            ),
            cache_key=CacheKey.ADMIN_CONCIERGE,
            select_related=("user",),
            statuses=CONCIERGE_STATUSES,
            deletable=False,
        )
    )
    registry.register(
        EntityDefinition(
            slug="podcasts",
            entity_type=EntityType.PODCAST,
            label="podcast",
            model=Podcast,
            serializer_class=PodcastSerializer,
            listing=ListConfig(
                search_fields=("title", "description"),
                filters=(
                    choice_filter("category", "category", [v for v, _ in Podcast.CATEGORY_CHOICES]),
                    choice_filter("status", "status", [v for v, _ in Podcast.STATUS_CHOICES]),
                ),
            ),
            cache_key=CacheKey.ADMIN_PODCASTS,
            toggles=("is_featured",),
        )
    )
