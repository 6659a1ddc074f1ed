from dashboard.domain.models import (
    BookingRow,
    Dashboard,
    EventRow,
    RecentBooking,
    RecentEvent,
    Snapshot,
    UserRow,
    build_dashboard,
    month_starts,
)

__all__ = [
    "BookingRow",
    "Dashboard",
    "EventRow",
    "RecentBooking",
    "RecentEvent",
    "Snapshot",
    "UserRow",
    "build_dashboard",
    "month_starts",
]
