"""Dashboard figures computed in plain Python from fetched rows.

Month series cover the last six calendar months including the current one,
oldest first, in the time zone of ``now``.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from events.domain.models import EventStats

SERIES_MONTHS = 6
RECENT_LIMIT = 5
DISTRIBUTION_STATUSES = ("confirmed", "pending", "cancelled")


@dataclass(frozen=True)
class UserRow:
    created_at: datetime
    role: str
    is_premium: bool
    is_organizer: bool


@dataclass(frozen=True)
class EventRow:
    created_at: datetime
    start_date: datetime
    end_date: datetime


@dataclass(frozen=True)
class BookingRow:
    created_at: datetime
    status: str
    amount: Decimal | None


@dataclass(frozen=True)
class RecentEvent:
    id: UUID
    title: str
    start_date: datetime
    end_date: datetime
    location: str
    club_name: str | None


@dataclass(frozen=True)
class RecentBooking:
    id: UUID
    user_name: str | None
    event_title: str
    status: str
    amount: Decimal | None
    booking_date: datetime
    created_at: datetime


@dataclass(frozen=True)
class Snapshot:
    """Everything the dashboard reads, fetched in one pass."""

    users: Sequence[UserRow]
    events: Sequence[EventRow]
    bookings: Sequence[BookingRow]
    clubs: int
    feeds: int
    concierge_requests: int
    active_subscriptions: int
    recent_events: Sequence[RecentEvent]
    recent_bookings: Sequence[RecentBooking]


@dataclass(frozen=True)
class UserCounts:
    total: int
    premium: int
    organizers: int
    admins: int


@dataclass(frozen=True)
class BookingCounts:
    total: int
    confirmed: int
    pending: int
    cancelled: int


@dataclass(frozen=True)
class MonthPoint:
    month: date
    revenue: Decimal
    new_users: int
    total_users: int
    events: int

    @property
    def label(self) -> str:
        return self.month.strftime("%b")


@dataclass(frozen=True)
class Dashboard:
    users: UserCounts
    events: EventStats
    bookings: BookingCounts
    revenue: Decimal
    clubs: int
    feeds: int
    concierge_requests: int
    active_subscriptions: int
    months: tuple[MonthPoint, ...]
    status_distribution: tuple[tuple[str, int], ...]
    recent_events: tuple[RecentEvent, ...]
    recent_bookings: tuple[RecentBooking, ...]


def month_starts(now: datetime, count: int = SERIES_MONTHS) -> list[date]:
    starts = []
    year, month = now.year, now.month
    for _ in range(count):
        starts.append(date(year, month, 1))
        year, month = (year, month - 1) if month > 1 else (year - 1, 12)
    return starts[::-1]


def _next_month(month: date) -> date:
    return date(month.year + 1, 1, 1) if month.month == 12 else date(month.year, month.month + 1, 1)


def _month_of(value: datetime, now: datetime) -> date:
    local = value.astimezone(now.tzinfo) if now.tzinfo is not None else value
    return date(local.year, local.month, 1)


def _amount(value: Decimal | None) -> Decimal:
    return value if value is not None else Decimal("0")


def count_users(users: Iterable[UserRow]) -> UserCounts:
    users = list(users)
    return UserCounts(
        total=len(users),
        premium=sum(1 for u in users if u.is_premium),
        organizers=sum(1 for u in users if u.is_organizer),
        admins=sum(1 for u in users if u.role == "admin"),
    )


def count_bookings(bookings: Iterable[BookingRow]) -> BookingCounts:
    bookings = list(bookings)
    return BookingCounts(
        total=len(bookings),
        confirmed=sum(1 for b in bookings if b.status == "confirmed"),
        pending=sum(1 for b in bookings if b.status == "pending"),
        cancelled=sum(1 for b in bookings if b.status == "cancelled"),
    )


def monthly_series(snapshot: Snapshot, now: datetime) -> tuple[MonthPoint, ...]:
    """Revenue counts confirmed bookings only; totals count users created
    before the end of each month."""
    user_months = [_month_of(u.created_at, now) for u in snapshot.users]
    event_months = [_month_of(e.created_at, now) for e in snapshot.events]
    points = []
    for month in month_starts(now):
        revenue = sum(
            (
                _amount(b.amount)
                for b in snapshot.bookings
                if b.status == "confirmed" and _month_of(b.created_at, now) == month
            ),
            Decimal("0"),
        )
        points.append(
            MonthPoint(
                month=month,
                revenue=revenue,
                new_users=sum(1 for m in user_months if m == month),
                total_users=sum(1 for m in user_months if m < _next_month(month)),
                events=sum(1 for m in event_months if m == month),
            )
        )
    return tuple(points)


def build_dashboard(snapshot: Snapshot, now: datetime) -> Dashboard:
    bookings = count_bookings(snapshot.bookings)
    return Dashboard(
        users=count_users(snapshot.users),
        events=EventStats.from_windows(((e.start_date, e.end_date) for e in snapshot.events), now),
        bookings=bookings,
        revenue=sum((_amount(b.amount) for b in snapshot.bookings), Decimal("0")),
        clubs=snapshot.clubs,
        feeds=snapshot.feeds,
        concierge_requests=snapshot.concierge_requests,
        active_subscriptions=snapshot.active_subscriptions,
        months=monthly_series(snapshot, now),
        status_distribution=(
            ("confirmed", bookings.confirmed),
            ("pending", bookings.pending),
            ("cancelled", bookings.cancelled),
        ),
        recent_events=tuple(snapshot.recent_events[:RECENT_LIMIT]),
        recent_bookings=tuple(snapshot.recent_bookings[:RECENT_LIMIT]),
    )
