"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache

from shared.cache import QueryCache, query_cache
from shared.domain import INVALIDATION_TABLE, CacheKey, EntityType
from shared.registry import registry


@pytest.fixture
def qc() -> QueryCache:
    return QueryCache(backend=cache, timeout=60)


class TestQueryCache:
    """Tests for versioned cache namespaces."""

    def test_producer_runs_once_per_key(self, qc):
        calls = []

        def produce():
            calls.append(1)
            return {"rows": []}

        qc.get_or_set(CacheKey.ADMIN_PUBS, ("p=1",), produce)
        qc.get_or_set(CacheKey.ADMIN_PUBS, ("p=1",), produce)
        assert len(calls) == 1

    def test_request_parts_are_cached_separately(self, qc):
        assert qc.get_or_set(CacheKey.ADMIN_PUBS, ("p=1",), lambda: 1) == 1
        assert qc.get_or_set(CacheKey.ADMIN_PUBS, ("p=2",), lambda: 2) == 2

    def test_invalidate_makes_every_page_stale(self, qc):
        qc.get_or_set(CacheKey.ADMIN_PUBS, ("p=1",), lambda: "old")
        qc.get_or_set(CacheKey.ADMIN_PUBS, ("p=2",), lambda: "old")
        qc.invalidate(CacheKey.ADMIN_PUBS)
        assert qc.get_or_set(CacheKey.ADMIN_PUBS, ("p=1",), lambda: "new") == "new"
        assert qc.get_or_set(CacheKey.ADMIN_PUBS, ("p=2",), lambda: "new") == "new"

    def test_invalidate_leaves_other_keys_alone(self, qc):
        qc.get_or_set(CacheKey.ADMIN_BEACHES, ("p=1",), lambda: "kept")
        qc.invalidate(CacheKey.ADMIN_PUBS)
        assert qc.get_or_set(CacheKey.ADMIN_BEACHES, ("p=1",), lambda: "new") == "kept"

    def test_invalidate_survives_evicted_version(self, qc):
        qc.invalidate(CacheKey.ADMIN_PUBS)
        cache.delete("admin-pubs:version")
        qc.invalidate(CacheKey.ADMIN_PUBS)
        assert qc.version(CacheKey.ADMIN_PUBS) >= 2

    def test_invalidate_entity_covers_its_table_row(self, qc):
        for key in INVALIDATION_TABLE[EntityType.ZONE]:
            qc.get_or_set(key, ("x",), lambda: "old")
        qc.invalidate_entity(EntityType.ZONE)
        for key in INVALIDATION_TABLE[EntityType.ZONE]:
            assert qc.get_or_set(key, ("x",), lambda: "new") == "new"


class TestInvalidationTable:
    """Tests for the entity -> cache key table."""

    def test_every_entity_type_has_a_row(self):
        assert set(INVALIDATION_TABLE) == set(EntityType)

    def test_every_cache_key_is_invalidated_by_something(self):
        covered = {key for keys in INVALIDATION_TABLE.values() for key in keys}
        assert covered == set(CacheKey)

    def test_zone_changes_refresh_event_lists(self):
        assert CacheKey.ADMIN_EVENTS in INVALIDATION_TABLE[EntityType.ZONE]

    def test_registered_lists_are_invalidated_by_their_entity(self):
        for definition in registry:
            assert definition.cache_key in INVALIDATION_TABLE[definition.entity_type]


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_event_save_invalidates_list_cache(self, make_event, django_capture_on_commit_callbacks):
        """Saving an event bumps the events list version once the transaction commits."""
        before = query_cache.version(CacheKey.ADMIN_EVENTS)
        with django_capture_on_commit_callbacks(execute=True):
            make_event()
        assert query_cache.version(CacheKey.ADMIN_EVENTS) > before

    def test_zone_save_invalidates_zone_and_event_caches(
        self, make_event, make_zone, django_capture_on_commit_callbacks
    ):
        """Saving a zone invalidates the zone and event lists."""
        event = make_event()
        zones_before = query_cache.version(CacheKey.EVENT_ZONES)
        events_before = query_cache.version(CacheKey.ADMIN_EVENTS)
        with django_capture_on_commit_callbacks(execute=True):
            make_zone(event)
        assert query_cache.version(CacheKey.EVENT_ZONES) > zones_before
        assert query_cache.version(CacheKey.ADMIN_EVENTS) > events_before

    def test_nothing_is_invalidated_before_commit(self, make_event, django_capture_on_commit_callbacks):
        before = query_cache.version(CacheKey.ADMIN_EVENTS)
        with django_capture_on_commit_callbacks(execute=False) as callbacks:
            make_event()
        assert callbacks
        assert query_cache.version(CacheKey.ADMIN_EVENTS) == before

    def test_venue_delete_invalidates_its_list(self, django_capture_on_commit_callbacks):
        from venues.models import Pub

        pub = Pub.objects.create(name="The Loft")
        before = query_cache.version(CacheKey.ADMIN_PUBS)
        with django_capture_on_commit_callbacks(execute=True):
            pub.delete()
        assert query_cache.version(CacheKey.ADMIN_PUBS) > before

    def test_zone_editor_save_waits_for_commit(
        self, admin_client, make_event, make_zone, django_capture_on_commit_callbacks
    ):
        event = make_event()
        vip = make_zone(event, "VIP", "100", 50)
        rows = [
            {"db_id": str(vip.id), "is_existing": True, "name": "VIP", "price": "90", "capacity": "50"}
        ]
        before = query_cache.version(CacheKey.EVENT_ZONES)
        with django_capture_on_commit_callbacks(execute=False) as callbacks:
            response = admin_client.put(
                f"/api/admin/events/{event.id}/zones", {"zones": rows}, format="json"
            )
        assert response.status_code == 200
        assert query_cache.version(CacheKey.EVENT_ZONES) == before
        for callback in callbacks:
            callback()
        assert query_cache.version(CacheKey.EVENT_ZONES) > before
