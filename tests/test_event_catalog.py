"""Integration tests for the events admin API.

Run with: pytest tests/test_event_catalog.py -v
"""

from datetime import timedelta
from uuid import uuid4

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone
from rest_framework.test import APIClient

from events.models import Event, Zone
from shared.storage import EVENT_IMAGES
from tests.fakes import image_file

EVENTS_URL = "/api/admin/events"


def event_url(event_id, suffix=""):
    return f"{EVENTS_URL}/{event_id}{suffix}"


def event_payload(club, **overrides):
    start = timezone.now() + timedelta(days=10)
    payload = {
        "title": "Afrobeats Night",
        "description": "Live DJ sets",
        "location": "Labadi Beach",
        "start_date": start.isoformat(),
        "end_date": (start + timedelta(hours=6)).isoformat(),
        "club": str(club.pk),
        "zones": [
            {"name": "VIP", "price": "250", "capacity": "40"},
            {"name": "General Admission", "price": "80", "capacity": "400"},
        ],
    }
    payload.update(overrides)
    return payload


def zone_rows(response):
    return {row["name"]: row for row in response.data["data"]["zones"]}


@pytest.mark.django_db
class TestAccess:
    """Tests for authentication on the admin API."""

    def test_anonymous_requests_are_rejected(self, api_client: APIClient):
        assert api_client.get(EVENTS_URL).status_code == 403

    def test_non_staff_users_are_rejected(self, api_client: APIClient, django_user_model):
        user = django_user_model.objects.create_user(username="guest", password="x")
        api_client.force_authenticate(user=user)
        assert api_client.get(EVENTS_URL).status_code == 403


@pytest.mark.django_db
class TestEventList:
    """Tests for GET /api/admin/events"""

    def test_list_events_returns_paginated_results(self, admin_client, make_event):
        """Given events exist, returns one page plus the filtered count."""
        for i in range(12):
            make_event(title=f"Event {i}")
        response = admin_client.get(EVENTS_URL, {"page": 2, "page_size": 10})
        assert response.status_code == 200
        data = response.data["data"]
        assert len(data["rows"]) == 2
        assert (data["total_count"], data["page"], data["total_pages"]) == (12, 2, 2)

    def test_list_events_empty_catalog(self, admin_client):
        """Given no events, returns empty list."""
        response = admin_client.get(EVENTS_URL)
        assert response.status_code == 200
        assert response.data["data"]["rows"] == []
        assert response.data["data"]["total_count"] == 0

    def test_list_events_cached_response(self, admin_client, make_event):
        """Rows written behind the service's back stay hidden until invalidated."""
        make_event()
        admin_client.get(EVENTS_URL)
        Event.objects.filter().update(title="Changed in place")
        response = admin_client.get(EVENTS_URL)
        assert response.data["data"]["rows"][0]["title"] == "Launch Night"

    def test_list_reflects_api_writes_immediately(self, admin_client, club):
        admin_client.get(EVENTS_URL)
        admin_client.post(EVENTS_URL, event_payload(club), format="json")
        assert admin_client.get(EVENTS_URL).data["data"]["total_count"] == 1

    def test_status_filter(self, admin_client, make_event):
        make_event(title="Soon")
        make_event(title="Over", start_in=-timedelta(days=3))
        make_event(title="Now", start_in=-timedelta(hours=1))
        titles = lambda status: [
            r["title"] for r in admin_client.get(EVENTS_URL, {"status": status}).data["data"]["rows"]
        ]
        assert titles("upcoming") == ["Soon"]
        assert titles("past") == ["Over"]
        assert titles("ongoing") == ["Now"]

    def test_search_matches_title_and_club(self, admin_client, make_event):
        make_event(title="Jazz Brunch")
        make_event(title="Rooftop Party")
        response = admin_client.get(EVENTS_URL, {"search": "jazz"})
        assert [r["title"] for r in response.data["data"]["rows"]] == ["Jazz Brunch"]
        response = admin_client.get(EVENTS_URL, {"search": "sky lounge"})
        assert response.data["data"]["total_count"] == 2

    def test_unknown_filter_value_is_rejected(self, admin_client):
        response = admin_client.get(EVENTS_URL, {"status": "someday"})
        assert response.status_code == 400
        assert response.data["error"]["code"] == "INVALID_FILTER"

    def test_stats(self, admin_client, make_event):
        make_event()
        make_event(start_in=-timedelta(days=3))
        response = admin_client.get(f"{EVENTS_URL}/stats")
        assert response.data["data"] == {"total": 2, "upcoming": 1, "ongoing": 0, "past": 1}

    def test_club_options_are_ordered_by_name(self, admin_client, club):
        from venues.models import Club

        Club.objects.create(name="Afro Hub")
        response = admin_client.get(f"{EVENTS_URL}/clubs")
        assert [c["name"] for c in response.data["data"]] == ["Afro Hub", "Sky Lounge"]


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET|PUT|DELETE /api/admin/events/{id}"""

    def test_get_event_returns_details(self, admin_client, make_event, make_zone):
        """Given event exists, returns event details with zones."""
        event = make_event()
        make_zone(event, "VIP", "200", 20)
        response = admin_client.get(event_url(event.id))
        assert response.status_code == 200
        data = response.data["data"]
        assert data["title"] == "Launch Night"
        assert data["club_name"] == "Sky Lounge"
        assert data["status"] == "upcoming"
        assert data["zones"][0]["price"] == "200.00"
        assert data["total_capacity"] == 20

    def test_get_event_not_found(self, admin_client):
        """Given event does not exist, returns 404."""
        response = admin_client.get(event_url(uuid4()))
        assert response.status_code == 404
        assert response.data["error"]["code"] == "NOT_FOUND"

    def test_get_event_invalid_id_format(self, admin_client):
        """Given invalid UUID, returns 400."""
        response = admin_client.get(event_url("not-a-uuid"))
        assert response.status_code == 400
        assert response.data["error"] == {"code": "INVALID_ID", "message": "Invalid event ID format"}

    def test_update_fields_only(self, admin_client, make_event, make_zone, club):
        event = make_event()
        zone = make_zone(event)
        payload = event_payload(club, title="Renamed")
        del payload["zones"]
        response = admin_client.put(event_url(event.id), payload, format="json")
        assert response.status_code == 200
        assert response.data["data"]["title"] == "Renamed"
        assert [z["id"] for z in response.data["data"]["zones"]] == [str(zone.id)]
        assert response.data["messages"] == [
            {"level": "success", "text": "Event updated successfully!"}
        ]

    def test_update_with_zones_keeps_edited_zone_identity(
        self, admin_client, make_event, make_zone, club
    ):
        event = make_event()
        vip = make_zone(event, "VIP", "100", 50)
        make_zone(event, "General Admission", "40", 300)
        payload = event_payload(
            club,
            zones=[
                {"db_id": str(vip.id), "is_existing": True, "name": "VIP Gold", "price": "120", "capacity": "45"},
                {"name": "Balcony", "price": "70", "capacity": "60"},
            ],
        )
        response = admin_client.put(event_url(event.id), payload, format="json")
        assert response.status_code == 200
        zones = zone_rows(response)
        assert set(zones) == {"VIP Gold", "Balcony"}
        assert zones["VIP Gold"]["id"] == str(vip.id)

    def test_delete_event_cascades_zones(self, admin_client, make_event, make_zone):
        event = make_event()
        make_zone(event)
        response = admin_client.delete(event_url(event.id))
        assert response.status_code == 200
        assert not Event.objects.filter(pk=event.id).exists()
        assert not Zone.objects.filter(event_id=event.id).exists()

    def test_delete_missing_event(self, admin_client):
        response = admin_client.delete(event_url(uuid4()))
        assert response.status_code == 404
        assert response.data["messages"] == [{"level": "error", "text": "Failed to delete event"}]

    def test_toggle_featured(self, admin_client, make_event):
        event = make_event()
        response = admin_client.post(
            event_url(event.id, "/toggle/is_featured"), {"current": False}, format="json"
        )
        assert response.data["data"]["value"] is True
        event.refresh_from_db()
        assert event.is_featured is True

    def test_toggle_requires_current_value(self, admin_client, make_event):
        event = make_event()
        response = admin_client.post(event_url(event.id, "/toggle/is_featured"), {}, format="json")
        assert response.status_code == 400


@pytest.mark.django_db
class TestEventCreate:
    """Tests for POST /api/admin/events"""

    def test_create_event_with_zones(self, admin_client, club):
        response = admin_client.post(EVENTS_URL, event_payload(club), format="json")
        assert response.status_code == 201
        assert set(zone_rows(response)) == {"VIP", "General Admission"}
        assert response.data["messages"] == [
            {"level": "success", "text": "Event created successfully!"}
        ]

    def test_missing_end_date_defaults_to_start(self, admin_client, club):
        payload = event_payload(club)
        del payload["end_date"]
        response = admin_client.post(EVENTS_URL, payload, format="json")
        assert response.status_code == 201
        assert response.data["data"]["end_date"] == response.data["data"]["start_date"]

    def test_end_before_start_is_rejected(self, admin_client, club):
        start = timezone.now() + timedelta(days=2)
        payload = event_payload(
            club,
            start_date=start.isoformat(),
            end_date=(start - timedelta(hours=1)).isoformat(),
        )
        response = admin_client.post(EVENTS_URL, payload, format="json")
        assert response.status_code == 400
        assert not Event.objects.exists()

    def test_unknown_club_is_rejected(self, admin_client, club):
        response = admin_client.post(EVENTS_URL, event_payload(club, club=str(uuid4())), format="json")
        assert response.status_code == 400
        assert "club" in response.data

    def test_blank_zones_only_creates_nothing(self, admin_client, club):
        payload = event_payload(club, zones=[{"name": "", "price": "", "capacity": ""}])
        response = admin_client.post(EVENTS_URL, payload, format="json")
        assert response.status_code == 400
        assert response.data["error"]["code"] == "NO_VALID_ZONES"
        assert not Event.objects.exists()

    def test_invalid_zone_rejects_whole_event(self, admin_client, club):
        payload = event_payload(
            club,
            zones=[
                {"local_id": "row-1", "name": "VIP", "price": "100", "capacity": "10"},
                {"local_id": "row-2", "name": "Balcony", "price": "-0.01", "capacity": "abc"},
            ],
        )
        response = admin_client.post(EVENTS_URL, payload, format="json")
        assert response.status_code == 400
        error = response.data["error"]
        assert error["code"] == "INVALID_ZONE_FIELDS"
        assert error["details"] == {"row-2": ["price", "capacity"]}
        assert not Event.objects.exists()
        assert not Zone.objects.exists()


@pytest.mark.django_db
class TestZoneEditor:
    """Tests for GET|PUT /api/admin/events/{id}/zones"""

    def test_event_without_zones_gets_one_blank_row(self, admin_client, make_event):
        event = make_event()
        response = admin_client.get(event_url(event.id, "/zones"))
        rows = response.data["data"]["zones"]
        assert len(rows) == 1
        assert rows[0]["db_id"] is None and rows[0]["name"] == ""

    def test_existing_zones_are_loaded_as_text(self, admin_client, make_event, make_zone):
        event = make_event()
        zone = make_zone(event, "VIP", "99.50", 12)
        rows = admin_client.get(event_url(event.id, "/zones")).data["data"]["zones"]
        assert rows == [
            {
                "local_id": rows[0]["local_id"],
                "db_id": str(zone.id),
                "is_existing": True,
                "name": "VIP",
                "price": "99.50",
                "capacity": "12",
                "description": "",
            }
        ]

    def test_save_round_trip_preserves_identity(self, admin_client, make_event, make_zone):
        event = make_event()
        vip = make_zone(event, "VIP", "100", 50)
        ga = make_zone(event, "General Admission", "40", 300)
        rows = admin_client.get(event_url(event.id, "/zones")).data["data"]["zones"]
        for row in rows:
            if row["db_id"] == str(vip.id):
                row["name"] = "VIP Gold"
        rows = [row for row in rows if row["db_id"] != str(ga.id)]
        rows.append({"name": "Balcony", "price": "70", "capacity": "60"})
        response = admin_client.put(event_url(event.id, "/zones"), {"zones": rows}, format="json")
        assert response.status_code == 200
        assert {z.name for z in Zone.objects.filter(event=event)} == {"VIP Gold", "Balcony"}
        assert Zone.objects.get(pk=vip.id).name == "VIP Gold"
        assert not Zone.objects.filter(pk=ga.id).exists()

    def test_zone_of_another_event_is_rejected(self, admin_client, make_event, make_zone):
        event = make_event()
        other = make_zone(make_event(title="Other"), "VIP", "10", 10)
        rows = [{"db_id": str(other.id), "is_existing": True, "name": "VIP", "price": "10", "capacity": "10"}]
        response = admin_client.put(event_url(event.id, "/zones"), {"zones": rows}, format="json")
        assert response.status_code == 400
        assert response.data["error"]["code"] == "UNKNOWN_ZONE"
        assert Zone.objects.get(pk=other.id).event_id == other.event_id

    def test_deleting_a_booked_zone_conflicts_and_rolls_back(
        self, admin_client, make_event, make_zone, make_profile
    ):
        from bookings.models import Booking

        event = make_event()
        booked = make_zone(event, "VIP", "100", 50)
        ga = make_zone(event, "General Admission", "40", 300)
        Booking.objects.create(
            user=make_profile(), event=event, zone=booked, booking_date=timezone.now()
        )
        rows = [
            {"db_id": str(ga.id), "is_existing": True, "name": "GA", "price": "45", "capacity": "300"},
        ]
        response = admin_client.put(event_url(event.id, "/zones"), {"zones": rows}, format="json")
        assert response.status_code == 409
        assert response.data["error"]["code"] == "INTEGRITY_VIOLATION"
        assert Zone.objects.filter(event=event).count() == 2
        assert Zone.objects.get(pk=ga.id).name == "General Admission"

    def test_sub_cent_prices_are_rejected(self, admin_client, make_event, make_zone):
        event = make_event()
        make_zone(event, "A", "10.00", 5)
        rows = [
            {"local_id": "row-a", "name": "A", "price": "10.999", "capacity": "5"},
            {"local_id": "row-b", "name": "B", "price": "0.004", "capacity": "5"},
        ]
        response = admin_client.put(event_url(event.id, "/zones"), {"zones": rows}, format="json")
        assert response.status_code == 400
        error = response.data["error"]
        assert error["code"] == "INVALID_ZONE_FIELDS"
        assert error["details"] == {"row-a": ["price"], "row-b": ["price"]}
        assert [(z.name, str(z.price)) for z in Zone.objects.filter(event=event)] == [("A", "10.00")]

    def test_zones_for_missing_event(self, admin_client):
        response = admin_client.get(event_url(uuid4(), "/zones"))
        assert response.status_code == 404


@pytest.mark.django_db
@pytest.mark.usefixtures("media_root")
class TestEventCover:
    """Tests for cover uploads on POST|PUT /api/admin/events"""

    def multipart(self, club, **overrides):
        payload = event_payload(club, **overrides)
        zones = payload.pop("zones", [])
        for index, zone in enumerate(zones):
            for key, value in zone.items():
                payload[f"zones[{index}]{key}"] = value
        return payload

    def test_create_with_cover(self, admin_client, club, media_root):
        response = admin_client.post(
            EVENTS_URL, self.multipart(club, cover_image=image_file()), format="multipart"
        )
        assert response.status_code == 201
        data = response.data["data"]
        assert f"/{EVENT_IMAGES}/" in data["cover_image"]
        assert set(zone_rows(response)) == {"VIP", "General Admission"}
        assert len(list((media_root / EVENT_IMAGES).iterdir())) == 1

    def test_rejected_cover_creates_nothing(self, admin_client, club, media_root):
        notes = SimpleUploadedFile("notes.txt", b"hello", content_type="text/plain")
        response = admin_client.post(
            EVENTS_URL, self.multipart(club, cover_image=notes), format="multipart"
        )
        assert response.status_code == 400
        assert response.data["error"]["code"] == "UPLOAD_REJECTED"
        assert not Event.objects.exists()
        assert not (media_root / EVENT_IMAGES).exists()

    def test_new_cover_replaces_old_file(self, admin_client, make_event, club, media_root):
        event = make_event()
        payload = self.multipart(club, zones=[])
        first = admin_client.put(
            event_url(event.id), {**payload, "cover_image": image_file("old.png")}, format="multipart"
        ).data["data"]["cover_image"]
        second = admin_client.put(
            event_url(event.id), {**payload, "cover_image": image_file("new.png")}, format="multipart"
        ).data["data"]["cover_image"]
        assert first != second
        files = list((media_root / EVENT_IMAGES).iterdir())
        assert [f.name for f in files] == [second.rsplit("/", 1)[1]]

    def test_json_update_keeps_cover(self, admin_client, make_event, club):
        event = make_event()
        payload = event_payload(club)
        del payload["zones"]
        cover = admin_client.put(
            event_url(event.id),
            self.multipart(club, zones=[], cover_image=image_file()),
            format="multipart",
        ).data["data"]["cover_image"]
        response = admin_client.put(
            event_url(event.id), {**payload, "title": "Renamed"}, format="json"
        )
        assert response.data["data"]["cover_image"] == cover
        assert Event.objects.get(pk=event.id).title == "Renamed"
