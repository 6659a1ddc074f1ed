"""List definitions and image slots for clubs, venues and live shows."""

from shared.domain import CacheKey, EntityType
from shared.registry import EntityDefinition, registry
from shared.services.images import ImageSlot
from shared.storage import CLUB_LOGOS, VENUE_IMAGES
from shared.stores.filters import venue_status_filter
from shared.stores.listing import ListConfig
from venues.handlers.serializers import (
    ArcadeCenterSerializer,
    BeachSerializer,
    ClubSerializer,
    LiveShowSerializer,
    LoungeSerializer,
    PubSerializer,
    RestaurantSerializer,
)
from venues.models import ArcadeCenter, Beach, Club, LiveShow, Lounge, Pub, Restaurant

VENUE_LISTING = ListConfig(
    search_fields=("name", "location", "description"),
    filters=(venue_status_filter(),),
)

VENUES = [
    ("beaches", EntityType.BEACH, "beach", Beach, BeachSerializer, CacheKey.ADMIN_BEACHES),
    ("pubs", EntityType.PUB, "pub", Pub, PubSerializer, CacheKey.ADMIN_PUBS),
    ("lounges", EntityType.LOUNGE, "lounge", Lounge, LoungeSerializer, CacheKey.ADMIN_LOUNGES),
    (
        "restaurants",
        EntityType.RESTAURANT,
        "restaurant",
        Restaurant,
        RestaurantSerializer,
        CacheKey.ADMIN_RESTAURANTS,
    ),
    (
        "arcade-centers",
        EntityType.ARCADE_CENTER,
        "arcade center",
        ArcadeCenter,
        ArcadeCenterSerializer,
        CacheKey.ADMIN_ARCADE_CENTERS,
    ),
]

# club logos have their own bucket; venue and live show photos share one, by folder
IMAGE_SLOTS = {
    "clubs": ImageSlot("logo_url", CLUB_LOGOS, noun="logo"),
    **{slug: ImageSlot("image_url", VENUE_IMAGES, slug) for slug, *_ in VENUES},
    "live-shows": ImageSlot("image_url", VENUE_IMAGES, "live-shows"),
}


def register() -> None:
    registry.register(
        EntityDefinition(
            slug="clubs",
            entity_type=EntityType.CLUB,
            label="club",
            model=Club,
            serializer_class=ClubSerializer,
            listing=ListConfig(search_fields=("name",)),
            cache_key=CacheKey.ADMIN_CLUBS,
        )
    )
    for slug, entity_type, label, model, serializer_class, cache_key in VENUES:
        registry.register(
            EntityDefinition(
                slug=slug,
                entity_type=entity_type,
                label=label,
                model=model,
                serializer_class=serializer_class,
                listing=VENUE_LISTING,
                cache_key=cache_key,
                toggles=("is_active", "is_featured"),
            )
        )
    registry.register(
        EntityDefinition(
            slug="live-shows",
            entity_type=EntityType.LIVE_SHOW,
            label="live show",
            model=LiveShow,
            serializer_class=LiveShowSerializer,
            listing=ListConfig(
                search_fields=("title", "performer_name", "venue_name"),
                filters=(venue_status_filter(),),
            ),
            cache_key=CacheKey.ADMIN_LIVE_SHOWS,
            toggles=("is_active", "is_featured"),
        )
    )
