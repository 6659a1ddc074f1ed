"""Django ORM implementation of the dashboard store."""

from accounts.models import Profile
from bookings.models import Booking
from content.models import ConciergeRequest, Feed
from dashboard.domain.models import (
    BookingRow,
    EventRow,
    RecentBooking,
    RecentEvent,
    Snapshot,
    UserRow,
)
from dashboard.stores.interfaces import DashboardStore
from events.models import Event
from shared.stores.django_store import translate_database_errors
from subscriptions.models import UserSubscription
from venues.models import Club


class DjangoDashboardStore(DashboardStore):
    def snapshot(self, recent: int) -> Snapshot:
        with translate_database_errors("load dashboard"):
            users = [
                UserRow(*row)
                for row in Profile.objects.values_list(
                    "created_at", "role", "is_premium", "is_organizer"
                )
            ]
            events = [
                EventRow(*row)
                for row in Event.objects.values_list("created_at", "start_date", "end_date")
            ]
            bookings = [
                BookingRow(*row)
                for row in Booking.objects.values_list("created_at", "status", "amount")
            ]
            recent_events = [
                RecentEvent(
                    id=event.id,
                    title=event.title,
                    start_date=event.start_date,
                    end_date=event.end_date,
                    location=event.location,
                    club_name=event.club.name if event.club else None,
                )
                for event in Event.objects.select_related("club").order_by("-created_at")[:recent]
            ]
            recent_bookings = [
                RecentBooking(
                    id=booking.id,
                    user_name=booking.user.full_name,
                    event_title=booking.event.title,
                    status=booking.status,
                    amount=booking.amount,
                    booking_date=booking.booking_date,
                    created_at=booking.created_at,
                )
                for booking in Booking.objects.select_related("user", "event").order_by(
                    "-created_at"
                )[:recent]
            ]
            return Snapshot(
                users=users,
                events=events,
                bookings=bookings,
                clubs=Club.objects.count(),
                feeds=Feed.objects.count(),
                concierge_requests=ConciergeRequest.objects.count(),
                active_subscriptions=UserSubscription.objects.filter(status="active").count(),
                recent_events=recent_events,
                recent_bookings=recent_bookings,
            )
