"""Unit tests for EventService and the zone reconciler.

These test error handling and domain error mapping against in-memory stores.
Run with: pytest tests/test_services.py -v
"""

from dataclasses import replace
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from events.domain import EventCommand, ZoneId
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    NoValidZonesError,
    PartialSequenceFailureError,
    UnknownZoneError,
)
from events.services.event_service import EventService
from events.services.zone_reconciler import ZoneReconciler
from shared.domain import EntityType
from shared.domain.errors import NotFoundError, StoreError
from shared.notifications import Level
from shared.storage import EVENT_IMAGES
from tests.fakes import draft, image_file


def command(title="Launch Night"):
    start = datetime(2026, 6, 1, 20, 0, tzinfo=UTC)
    return EventCommand(
        title=title,
        description="",
        location="Accra",
        start_date=start,
        end_date=start + timedelta(hours=5),
        club_id=uuid4(),
    )


def texts(notifier, level):
    return [n.text for n in notifier.notifications if n.level is level]


@pytest.fixture
def service(event_store, zone_store, storage, invalidator, notifier):
    return EventService(event_store, zone_store, storage, invalidator, notifier)


@pytest.fixture
def seeded(event_store, zone_store):
    """An event with VIP and General Admission zones."""
    event = event_store.seed()
    zone_store.seed(event.id, "VIP", "100", 50)
    zone_store.seed(event.id, "General Admission", "40", 300)
    return event


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self, service):
        """get_event raises InvalidEventIdError for malformed UUID."""
        with pytest.raises(InvalidEventIdError):
            service.get_event("nope")

    def test_get_event_not_found_raises_error(self, service):
        """get_event raises EventNotFoundError when store returns None."""
        with pytest.raises(EventNotFoundError):
            service.get_event(str(uuid4()))

    def test_get_event_includes_zones(self, service, seeded):
        event = service.get_event(str(seeded.id))
        assert [z.name for z in event.zones] == ["General Admission", "VIP"]
        assert event.total_capacity == 350

    def test_create_event_inserts_zones(self, service, invalidator, notifier):
        event = service.create_event(command(), [draft("VIP", "100", "20"), draft()])
        assert [z.name for z in event.zones] == ["VIP"]
        assert invalidator.saw(EntityType.EVENT)
        assert invalidator.saw(EntityType.ZONE)
        assert texts(notifier, Level.SUCCESS) == ["Event created successfully!"]

    def test_create_event_without_zones_writes_nothing(self, service, event_store, notifier):
        with pytest.raises(NoValidZonesError):
            service.create_event(command(), [draft()])
        assert event_store.events == {}
        assert texts(notifier, Level.ERROR) == ["Please add at least one zone for the event"]

    def test_update_event_missing_raises_not_found(self, service):
        with pytest.raises(EventNotFoundError):
            service.update_event(str(uuid4()), command())

    def test_update_event_without_zones_keeps_zones(self, service, seeded, zone_store):
        event = service.update_event(str(seeded.id), command("Renamed"))
        assert event.title == "Renamed"
        assert len(event.zones) == 2
        assert zone_store.calls == []

    def test_update_event_with_zones_reconciles(self, service, seeded):
        drafts = service.load_zone_drafts(str(seeded.id))
        general, vip = drafts
        event = service.update_event(
            str(seeded.id), command(), [replace(vip, price="150"), draft("Balcony", "70", "60")]
        )
        assert sorted(z.name for z in event.zones) == ["Balcony", "VIP"]
        assert str(next(z for z in event.zones if z.name == "VIP").price) == "150.00"

    def test_delete_event_removes_zones(self, service, seeded, zone_store, invalidator, notifier):
        service.delete_event(str(seeded.id))
        assert zone_store.list_zones(seeded.id) == []
        assert invalidator.saw(EntityType.EVENT) and invalidator.saw(EntityType.ZONE)
        assert texts(notifier, Level.SUCCESS) == ["Event deleted successfully"]

    def test_delete_missing_event_notifies_failure(self, service, notifier):
        with pytest.raises(EventNotFoundError):
            service.delete_event(str(uuid4()))
        assert texts(notifier, Level.ERROR) == ["Failed to delete event"]

    def test_stats_use_the_given_clock(self, service, event_store):
        now = datetime(2026, 1, 1, tzinfo=UTC)
        event_store.seed(start_date=now + timedelta(days=1), end_date=now + timedelta(days=2))
        event_store.seed(start_date=now - timedelta(days=2), end_date=now - timedelta(days=1))
        stats = service.event_stats(now)
        assert (stats.total, stats.upcoming, stats.past) == (2, 1, 1)


class TestEventCover:
    """Tests for event cover uploads."""

    def test_create_stores_cover_in_event_images(self, service, storage):
        event = service.create_event(command(), [draft("VIP", "100", "20")], image_file())
        assert event.cover_image.startswith(f"{storage.base_url}/{EVENT_IMAGES}/")
        assert list(storage.files) == [(EVENT_IMAGES, storage.path_from_url(EVENT_IMAGES, event.cover_image))]

    def test_invalid_zones_upload_nothing(self, service, storage):
        with pytest.raises(NoValidZonesError):
            service.create_event(command(), [draft()], image_file())
        assert storage.files == {}

    def test_failed_create_discards_cover(self, service, event_store, storage, notifier):
        event_store.fail("create_event")
        with pytest.raises(StoreError):
            service.create_event(command(), [draft("VIP", "100", "20")], image_file())
        assert storage.files == {}
        assert texts(notifier, Level.ERROR) == ["Failed to create event"]

    def test_new_cover_replaces_old(self, service, seeded, storage):
        first = service.update_event(str(seeded.id), command(), cover=image_file("old.png"))
        second = service.update_event(str(seeded.id), command(), cover=image_file("new.png"))
        assert second.cover_image != first.cover_image
        assert list(storage.files) == [(EVENT_IMAGES, storage.path_from_url(EVENT_IMAGES, second.cover_image))]

    def test_update_without_cover_keeps_it(self, service, seeded, storage):
        first = service.update_event(str(seeded.id), command(), cover=image_file())
        second = service.update_event(str(seeded.id), command("Renamed"))
        assert second.cover_image == first.cover_image
        assert len(storage.files) == 1

    def test_failed_update_keeps_old_cover(self, service, seeded, event_store, storage):
        first = service.update_event(str(seeded.id), command(), cover=image_file("old.png"))
        event_store.fail("update_event")
        with pytest.raises(StoreError):
            service.update_event(str(seeded.id), command(), cover=image_file("new.png"))
        assert event_store.events[seeded.id].cover_image == first.cover_image
        assert list(storage.files) == [(EVENT_IMAGES, storage.path_from_url(EVENT_IMAGES, first.cover_image))]

    def test_update_missing_event_uploads_nothing(self, service, storage):
        with pytest.raises(EventNotFoundError):
            service.update_event(str(uuid4()), command(), cover=image_file())
        assert storage.files == {}

    def test_delete_removes_cover(self, service, seeded, storage):
        service.update_event(str(seeded.id), command(), cover=image_file())
        service.delete_event(str(seeded.id))
        assert storage.files == {}


class TestZoneEditor:
    """Tests for loading and saving the zone editor."""

    def test_event_without_zones_opens_with_one_blank_row(self, service, event_store):
        event = event_store.seed()
        drafts = service.load_zone_drafts(str(event.id))
        assert len(drafts) == 1
        assert drafts[0].is_blank and not drafts[0].is_existing

    def test_loaded_drafts_keep_zone_identity(self, service, seeded, zone_store):
        drafts = service.load_zone_drafts(str(seeded.id))
        assert {d.db_id for d in drafts} == set(zone_store.zones)
        assert all(d.is_existing for d in drafts)

    def test_save_preserves_identity_of_edited_zone(self, service, seeded, zone_store):
        general, vip = service.load_zone_drafts(str(seeded.id))
        saved = service.save_zones(str(seeded.id), [general, replace(vip, name="VIP Gold")])
        assert {z.id for z in saved} == {general.db_id, vip.db_id}
        assert zone_store.zones[vip.db_id].name == "VIP Gold"

    def test_save_runs_deletes_before_writes(self, service, seeded, zone_store, notifier):
        general, vip = service.load_zone_drafts(str(seeded.id))
        service.save_zones(str(seeded.id), [replace(vip, name="VIP Gold"), draft("Balcony", "70", "60")])
        assert zone_store.calls == ["delete", "update", "insert"]
        assert sorted(z.name for z in zone_store.list_zones(seeded.id)) == ["Balcony", "VIP Gold"]
        assert texts(notifier, Level.SUCCESS) == ["Event zones updated successfully!"]

    def test_invalid_drafts_write_nothing(self, service, seeded, zone_store, notifier):
        general, vip = service.load_zone_drafts(str(seeded.id))
        before = dict(zone_store.zones)
        with pytest.raises(UnknownZoneError):
            service.save_zones(str(seeded.id), [vip, draft("Terrace", "1", "1", db_id=ZoneId(uuid4()))])
        assert zone_store.zones == before
        assert zone_store.calls == []
        assert texts(notifier, Level.ERROR) == ["Zone does not belong to this event"]

    def test_save_for_missing_event_raises_not_found(self, service):
        with pytest.raises(EventNotFoundError):
            service.save_zones(str(uuid4()), [draft("VIP", "1", "1")])


class TestZoneReconcilerFailures:
    """Tests for writes failing half way."""

    def test_non_transactional_failure_reports_partial_sequence(
        self, service, seeded, zone_store, invalidator, notifier
    ):
        general, vip = service.load_zone_drafts(str(seeded.id))
        zone_store.fail("insert_zone")
        with pytest.raises(PartialSequenceFailureError) as excinfo:
            service.save_zones(str(seeded.id), [vip, draft("Balcony", "70", "60")])
        assert (excinfo.value.completed, excinfo.value.total) == (2, 3)
        assert isinstance(excinfo.value.__cause__, StoreError)
        assert invalidator.saw(EntityType.ZONE)
        assert texts(notifier, Level.ERROR) == ["Failed to update event zones"]

    def test_failure_on_first_step_is_a_plain_store_error(self, service, seeded, zone_store):
        general, vip = service.load_zone_drafts(str(seeded.id))
        zone_store.fail("delete_zones")
        with pytest.raises(StoreError) as excinfo:
            service.save_zones(str(seeded.id), [vip])
        assert not isinstance(excinfo.value, PartialSequenceFailureError)
        assert len(zone_store.list_zones(seeded.id)) == 2

    def test_transactional_store_rolls_back_every_step(self, event_store, tx_zone_store, invalidator):
        event = event_store.seed()
        vip = tx_zone_store.seed(event.id, "VIP", "100", 50)
        tx_zone_store.seed(event.id, "General Admission", "40", 300)
        before = dict(tx_zone_store.zones)
        reconciler = ZoneReconciler(tx_zone_store, invalidator)
        original = [draft("VIP", "100", "50", db_id=z.id) for z in tx_zone_store.list_zones(event.id)]
        tx_zone_store.fail("insert_zone")
        with pytest.raises(StoreError) as excinfo:
            reconciler.reconcile(
                event.id,
                original,
                [draft("VIP Gold", "100", "50", db_id=vip.id), draft("Balcony", "70", "60")],
            )
        assert not isinstance(excinfo.value, PartialSequenceFailureError)
        assert tx_zone_store.zones == before
        assert EntityType.ZONE not in invalidator.entities

    def test_missing_zone_during_update_is_not_found(self, event_store, zone_store, invalidator):
        event = event_store.seed()
        vip = zone_store.seed(event.id, "VIP", "100", 50)
        original = [draft("VIP", "100", "50", db_id=vip.id)]
        del zone_store.zones[vip.id]
        with pytest.raises(NotFoundError):
            ZoneReconciler(zone_store, invalidator).reconcile(
                event.id, original, [draft("VIP", "90", "50", db_id=vip.id)]
            )


class TestZoneInvalidation:
    """Tests for when zone caches are invalidated."""

    def test_reconciler_waits_for_the_outer_transaction(self, event_store, tx_zone_store, invalidator):
        event = event_store.seed()
        reconciler = ZoneReconciler(tx_zone_store, invalidator)
        plan = reconciler.plan((), [draft("VIP", "100", "50")])
        with tx_zone_store.atomic():
            reconciler.apply(event.id, plan)
            assert EntityType.ZONE not in invalidator.entities
        assert invalidator.saw(EntityType.ZONE)

    def test_rolled_back_outer_transaction_invalidates_nothing(
        self, event_store, tx_zone_store, invalidator
    ):
        event = event_store.seed()
        reconciler = ZoneReconciler(tx_zone_store, invalidator)
        plan = reconciler.plan((), [draft("VIP", "100", "50")])
        with pytest.raises(StoreError):
            with tx_zone_store.atomic():
                reconciler.apply(event.id, plan)
                raise StoreError("create event")
        assert tx_zone_store.list_zones(event.id) == []
        assert EntityType.ZONE not in invalidator.entities

    def test_create_event_invalidates_zones_once_committed(
        self, event_store, tx_zone_store, storage, invalidator, notifier
    ):
        service = EventService(event_store, tx_zone_store, storage, invalidator, notifier)
        service.create_event(command(), [draft("VIP", "100", "50")])
        assert invalidator.entities == [EntityType.ZONE, EntityType.EVENT]
        assert tx_zone_store.pending == []


class TestToggleFeatured:
    """Tests for the featured switch."""

    @pytest.mark.parametrize("observed", [True, False])
    def test_toggle_writes_negation_of_observed(self, service, event_store, observed):
        event = event_store.seed(is_featured=observed)
        assert service.toggle_featured(str(event.id), observed) is (not observed)
        assert event_store.events[event.id].is_featured is (not observed)

    def test_stale_toggles_converge(self, service, event_store):
        """Two admins who both saw False both write True."""
        event = event_store.seed(is_featured=False)
        service.toggle_featured(str(event.id), False)
        service.toggle_featured(str(event.id), False)
        assert event_store.events[event.id].is_featured is True

    def test_toggle_missing_event_notifies_failure(self, service, notifier):
        with pytest.raises(NotFoundError):
            service.toggle_featured(str(uuid4()), False)
        assert texts(notifier, Level.ERROR) == ["Failed to update featured status"]

