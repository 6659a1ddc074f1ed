"""Keyed query cache on top of the Django cache framework.

List pages are stored under ``<key>:v<version>:<request parts>``. Invalidating
a key bumps its version, which makes every cached page for that key stale at
once without having to enumerate them.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Any

from django.conf import settings
from django.core.cache import BaseCache, cache
from django.db import transaction

from shared.domain.cache_keys import INVALIDATION_TABLE, CacheKey, EntityType

logger = logging.getLogger(__name__)


class QueryInvalidator(ABC):
    """Marks cached list views stale after a successful mutation."""

    @abstractmethod
    def invalidate(self, key: CacheKey) -> None:
        """Mark every cached entry under ``key`` stale."""
        ...

    def invalidate_entity(self, entity_type: EntityType) -> None:
        """Invalidate every list that displays ``entity_type``."""
        for key in INVALIDATION_TABLE[entity_type]:
            self.invalidate(key)


class QueryCache(QueryInvalidator):
    """Versioned namespaces over a Django cache backend."""

    def __init__(self, backend: BaseCache | None = None, timeout: int | None = None) -> None:
        self._backend = backend if backend is not None else cache
        self._timeout = timeout

    @property
    def timeout(self) -> int:
        if self._timeout is not None:
            return self._timeout
        return settings.ADMIN_LIST_CACHE_TIMEOUT

    def _version_key(self, key: CacheKey) -> str:
        return f"{key.value}:version"

    def version(self, key: CacheKey) -> int:
        version_key = self._version_key(key)
        version = self._backend.get(version_key)
        if version is None:
            self._backend.add(version_key, 1, timeout=None)
            version = self._backend.get(version_key, 1)
        return version

    def make_key(self, key: CacheKey, parts: Iterable[Any]) -> str:
        suffix = ":".join(str(part) for part in parts)
        return f"{key.value}:v{self.version(key)}:{suffix}"

    def get_or_set(self, key: CacheKey, parts: Iterable[Any], producer: Callable[[], Any]) -> Any:
        full_key = self.make_key(key, parts)
        value = self._backend.get(full_key)
        if value is not None:
            return value
        value = producer()
        self._backend.set(full_key, value, timeout=self.timeout)
        return value

    def invalidate(self, key: CacheKey) -> None:
        version_key = self._version_key(key)
        self._backend.add(version_key, 1, timeout=None)
        try:
            self._backend.incr(version_key)
        except ValueError:
            # evicted between add() and incr()
            self._backend.set(version_key, 2, timeout=None)
        logger.debug("Invalidated cached queries for %s", key.value)


query_cache = QueryCache()


def invalidate_after_commit(entity_type: EntityType) -> None:
    """Invalidate ``entity_type`` lists once the surrounding transaction commits."""
    transaction.on_commit(lambda: query_cache.invalidate_entity(entity_type))
