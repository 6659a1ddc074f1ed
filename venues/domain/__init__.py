from venues.domain.listings import (
    ClubCommand,
    ListingCommand,
    LiveShowCommand,
    RestaurantCommand,
    VenueCommand,
)

__all__ = [
    "ClubCommand",
    "ListingCommand",
    "LiveShowCommand",
    "RestaurantCommand",
    "VenueCommand",
]
