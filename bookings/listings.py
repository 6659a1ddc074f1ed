"""List definition for bookings; status changes use the generic status route."""

from bookings.handlers.serializers import BookingSerializer
from bookings.models import Booking
from shared.domain import CacheKey, EntityType
from shared.registry import EntityDefinition, registry
from shared.stores.filters import choice_filter
from shared.stores.listing import ListConfig

BOOKING_STATUSES = tuple(value for value, _ in Booking.STATUS_CHOICES)


def register() -> None:
    registry.register(
        EntityDefinition(
            slug="bookings",
            entity_type=EntityType.BOOKING,
            label="booking",
            model=Booking,
            serializer_class=BookingSerializer,
            listing=ListConfig(
                search_fields=("user__full_name", "user__email", "event__title"),
                filters=(choice_filter("status", "status", BOOKING_STATUSES),),
            ),
            cache_key=CacheKey.ADMIN_BOOKINGS,
            select_related=("user", "event", "zone"),
            statuses=BOOKING_STATUSES,
        )
    )
