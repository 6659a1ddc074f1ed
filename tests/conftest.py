"""Pytest configuration and shared fixtures."""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from shared.notifications import CollectingNotifier
from tests.fakes import (
    InMemoryEventStore,
    InMemoryObjectStorage,
    InMemoryZoneStore,
    RecordingInvalidator,
    TransactionalZoneStore,
)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def staff_user(django_user_model):
    return django_user_model.objects.create_user(
        username="operator", password="not-used", is_staff=True
    )


@pytest.fixture
def admin_client(staff_user) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def notifier() -> CollectingNotifier:
    return CollectingNotifier()


@pytest.fixture
def invalidator() -> RecordingInvalidator:
    return RecordingInvalidator()


@pytest.fixture
def zone_store() -> InMemoryZoneStore:
    return InMemoryZoneStore()


@pytest.fixture
def tx_zone_store() -> TransactionalZoneStore:
    return TransactionalZoneStore()


@pytest.fixture
def event_store(zone_store) -> InMemoryEventStore:
    return InMemoryEventStore(zone_store)


@pytest.fixture
def storage() -> InMemoryObjectStorage:
    return InMemoryObjectStorage()


@pytest.fixture
def media_root(settings, tmp_path):
    """Uploads through the default storage land in a throwaway directory."""
    settings.MEDIA_ROOT = str(tmp_path)
    return tmp_path


@pytest.fixture
def club(db):
    from venues.models import Club
    return Club.objects.create(name="Sky Lounge")


@pytest.fixture
def make_event(db, club):
    from events.models import Event

    def make(title="Launch Night", start_in=timedelta(days=7), length=timedelta(hours=4), **extra):
        start = timezone.now() + start_in
        return Event.objects.create(
            title=title,
            location="Osu, Accra",
            start_date=start,
            end_date=start + length,
            club=club,
            **extra,
        )

    return make


@pytest.fixture
def make_zone(db):
    from events.models import Zone

    def make(event, name="General", price="50.00", capacity=100):
        return Zone.objects.create(event=event, name=name, price=Decimal(price), capacity=capacity)

    return make


@pytest.fixture
def make_profile(db):
    from accounts.models import Profile

    def make(email="ama@example.com", **extra):
        return Profile.objects.create(email=email, full_name=extra.pop("full_name", "Ama Mensah"), **extra)

    return make
