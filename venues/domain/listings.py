"""Create and edit commands for clubs, venue listings and live shows.

Field names are the stored column names. Images are not part of a command:
the service uploads them and passes the resulting URL to the store.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from shared.domain.errors import MissingRequiredFieldError
from venues.domain.errors import InvalidRatingError, InvalidTicketPriceError

MIN_RATING = Decimal("0")
MAX_RATING = Decimal("5")


def require(**values: str) -> None:
    """Raise MissingRequiredFieldError naming every blank value, in order."""
    missing = tuple(name for name, value in values.items() if not (value or "").strip())
    if missing:
        raise MissingRequiredFieldError(missing)


@dataclass(frozen=True)
class ClubCommand:
    name: str
    description: str = ""

    def __post_init__(self) -> None:
        require(name=self.name)


@dataclass(frozen=True)
class VenueCommand:
    """Beach, pub, lounge and arcade center form."""

    name: str
    location: str
    description: str = ""
    phone: str = ""
    opening_hours: str = ""
    rating: Decimal | None = None
    is_active: bool = True
    is_featured: bool = False

    def __post_init__(self) -> None:
        require(name=self.name, location=self.location)
        if self.rating is not None and not MIN_RATING <= self.rating <= MAX_RATING:
            raise InvalidRatingError()


@dataclass(frozen=True)
class RestaurantCommand(VenueCommand):
    cuisine: str = ""


@dataclass(frozen=True)
class LiveShowCommand:
    title: str
    performer_name: str
    venue_name: str = ""
    description: str = ""
    show_date: datetime | None = None
    ticket_price: Decimal | None = None
    is_active: bool = True
    is_featured: bool = False

    def __post_init__(self) -> None:
        require(title=self.title, performer_name=self.performer_name)
        if self.ticket_price is not None and self.ticket_price < 0:
            raise InvalidTicketPriceError()


ListingCommand = ClubCommand | VenueCommand | LiveShowCommand
