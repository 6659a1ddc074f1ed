from shared.domain.cache_keys import INVALIDATION_TABLE, CacheKey, EntityType
from shared.domain.listing import ALL, FIRST_PAGE, PAGE_SIZES, ListQuery, Page
from shared.domain.value_objects import EntityId, ToggleCommand

__all__ = [
    "ALL",
    "FIRST_PAGE",
    "PAGE_SIZES",
    "ListQuery",
    "Page",
    "EntityType",
    "CacheKey",
    "INVALIDATION_TABLE",
    "EntityId",
    "ToggleCommand",
]
