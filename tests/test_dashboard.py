"""Tests for the dashboard summary.

Run with: pytest tests/test_dashboard.py -v
"""

from datetime import date, datetime, timedelta, timezone as dt_timezone
from decimal import Decimal

import pytest
from django.utils import timezone

from dashboard.domain import (
    BookingRow,
    EventRow,
    Snapshot,
    UserRow,
    build_dashboard,
    month_starts,
)

API = "/api/admin"
NOW = datetime(2024, 3, 15, 12, 0, tzinfo=dt_timezone.utc)


def at(year, month, day=10):
    return datetime(year, month, day, 12, 0, tzinfo=dt_timezone.utc)


def snapshot(users=(), events=(), bookings=(), **counts):
    return Snapshot(
        users=list(users),
        events=list(events),
        bookings=list(bookings),
        clubs=counts.get("clubs", 0),
        feeds=counts.get("feeds", 0),
        concierge_requests=counts.get("concierge_requests", 0),
        active_subscriptions=counts.get("active_subscriptions", 0),
        recent_events=counts.get("recent_events", []),
        recent_bookings=counts.get("recent_bookings", []),
    )


def user(created_at, role="user", is_premium=False, is_organizer=False):
    return UserRow(created_at, role, is_premium, is_organizer)


class TestMonthStarts:
    """Tests for the month axis."""

    def test_six_months_oldest_first(self):
        assert month_starts(NOW) == [
            date(2023, 10, 1),
            date(2023, 11, 1),
            date(2023, 12, 1),
            date(2024, 1, 1),
            date(2024, 2, 1),
            date(2024, 3, 1),
        ]

    def test_labels(self):
        months = build_dashboard(snapshot(), NOW).months
        assert [m.label for m in months] == ["Oct", "Nov", "Dec", "Jan", "Feb", "Mar"]


class TestBuildDashboard:
    """Tests for the figures computed from a snapshot."""

    def test_empty_snapshot(self):
        dashboard = build_dashboard(snapshot(), NOW)
        assert dashboard.revenue == Decimal("0")
        assert dashboard.users.total == 0
        assert dashboard.status_distribution == (("confirmed", 0), ("pending", 0), ("cancelled", 0))
        assert all(m.revenue == 0 and m.total_users == 0 for m in dashboard.months)

    def test_user_counts(self):
        users = [
            user(at(2024, 1), role="admin"),
            user(at(2024, 2), is_premium=True),
            user(at(2024, 3), is_premium=True, is_organizer=True),
        ]
        counts = build_dashboard(snapshot(users=users), NOW).users
        assert (counts.total, counts.premium, counts.organizers, counts.admins) == (3, 2, 1, 1)

    def test_user_growth_is_cumulative(self):
        users = [user(at(2023, 6)), user(at(2024, 1)), user(at(2024, 1)), user(at(2024, 3))]
        months = build_dashboard(snapshot(users=users), NOW).months
        assert [m.new_users for m in months] == [0, 0, 0, 2, 0, 1]
        assert [m.total_users for m in months] == [1, 1, 1, 3, 3, 4]

    def test_monthly_revenue_counts_confirmed_only(self):
        bookings = [
            BookingRow(at(2024, 3), "confirmed", Decimal("100.00")),
            BookingRow(at(2024, 3), "pending", Decimal("40.00")),
            BookingRow(at(2024, 2), "confirmed", Decimal("25.50")),
            BookingRow(at(2024, 2), "confirmed", None),
        ]
        dashboard = build_dashboard(snapshot(bookings=bookings), NOW)
        assert [m.revenue for m in dashboard.months][-2:] == [Decimal("25.50"), Decimal("100.00")]
        assert dashboard.revenue == Decimal("165.50")
        assert dashboard.bookings.confirmed == 3
        assert dashboard.status_distribution[1] == ("pending", 1)

    def test_rows_outside_the_window_are_ignored(self):
        bookings = [BookingRow(at(2023, 9), "confirmed", Decimal("10"))]
        events = [EventRow(at(2023, 9), at(2023, 9, 20), at(2023, 9, 21))]
        dashboard = build_dashboard(snapshot(events=events, bookings=bookings), NOW)
        assert sum(m.revenue for m in dashboard.months) == 0
        assert sum(m.events for m in dashboard.months) == 0
        assert dashboard.events.past == 1

    def test_months_follow_local_time(self):
        """A booking at 23:30 UTC on 29 Feb falls in March in Lagos time (UTC+1)."""
        lagos = dt_timezone(timedelta(hours=1))
        now = NOW.astimezone(lagos)
        late = datetime(2024, 2, 29, 23, 30, tzinfo=dt_timezone.utc)
        months = build_dashboard(
            snapshot(bookings=[BookingRow(late, "confirmed", Decimal("5"))]), now
        ).months
        assert months[-1].revenue == Decimal("5")
        assert months[-2].revenue == Decimal("0")

    def test_event_status_counts(self):
        events = [
            EventRow(at(2024, 1), NOW + timedelta(days=3), NOW + timedelta(days=3, hours=4)),
            EventRow(at(2024, 3), NOW - timedelta(hours=1), NOW + timedelta(hours=2)),
            EventRow(at(2024, 3), NOW - timedelta(days=9), NOW - timedelta(days=8)),
        ]
        dashboard = build_dashboard(snapshot(events=events), NOW)
        stats = dashboard.events
        assert (stats.total, stats.upcoming, stats.ongoing, stats.past) == (3, 1, 1, 1)
        assert [m.events for m in dashboard.months][-3:] == [1, 0, 2]

    def test_recent_rows_are_capped(self):
        dashboard = build_dashboard(snapshot(recent_events=list(range(8))), NOW)
        assert len(dashboard.recent_events) == 5


@pytest.mark.django_db
class TestDashboardApi:
    """Tests for GET /api/admin/dashboard"""

    def test_summary(self, admin_client, make_event, make_zone, make_profile):
        from bookings.models import Booking

        event = make_event()
        profile = make_profile(is_premium=True)
        for status, amount in (("confirmed", "120.00"), ("pending", "30.00")):
            Booking.objects.create(
                user=profile,
                event=event,
                zone=make_zone(event, name=status),
                booking_date=timezone.now(),
                amount=amount,
                status=status,
            )
        response = admin_client.get(f"{API}/dashboard")
        assert response.status_code == 200
        data = response.data["data"]
        assert data["users"]["premium"] == 1
        assert data["events"]["upcoming"] == 1
        assert data["bookings"]["total"] == 2
        assert data["revenue"] == "150.00"
        assert data["months"][-1]["revenue"] == "120.00"
        assert data["clubs"] == 1
        assert data["status_distribution"][0] == {"status": "confirmed", "label": "Confirmed", "count": 1}
        assert data["recent_events"][0]["club_name"] == "Sky Lounge"
        assert data["recent_bookings"][0]["user_name"] == "Ama Mensah"

    def test_requires_staff(self, api_client):
        assert api_client.get(f"{API}/dashboard").status_code == 403
