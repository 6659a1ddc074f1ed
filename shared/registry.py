"""Registry of entities served by the generic list/delete/toggle endpoints.

Apps register their definitions from ``AppConfig.ready()``.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from django.core.exceptions import ImproperlyConfigured
from django.db.models import Model
from rest_framework.serializers import BaseSerializer

from shared.domain.cache_keys import INVALIDATION_TABLE, CacheKey, EntityType
from shared.domain.errors import NotFoundError
from shared.stores.listing import ListConfig


@dataclass(frozen=True)
class EntityDefinition:
    slug: str
    entity_type: EntityType
    label: str
    model: type[Model]
    serializer_class: type[BaseSerializer]
    listing: ListConfig
    cache_key: CacheKey
    toggles: tuple[str, ...] = ()
    select_related: tuple[str, ...] = ()
    deletable: bool = True
    statuses: tuple[str, ...] = ()


class EntityRegistry:
    def __init__(self) -> None:
        self._definitions: dict[str, EntityDefinition] = {}

    def register(self, definition: EntityDefinition) -> None:
        if definition.slug in self._definitions:
            raise ImproperlyConfigured(f"Entity {definition.slug!r} registered twice")
        if definition.cache_key not in INVALIDATION_TABLE[definition.entity_type]:
            raise ImproperlyConfigured(
                f"{definition.cache_key.value} is not invalidated by {definition.entity_type.value}"
            )
        self._definitions[definition.slug] = definition

    def get(self, slug: str) -> EntityDefinition:
        try:
            return self._definitions[slug]
        except KeyError:
            raise NotFoundError("entity type", slug) from None

    def __contains__(self, slug: str) -> bool:
        return slug in self._definitions

    def __iter__(self) -> Iterator[EntityDefinition]:
        return iter(self._definitions.values())


registry = EntityRegistry()
