"""Django signals for cache invalidation on direct model edits."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from bookings.models import Booking
from shared.cache import invalidate_after_commit
from shared.domain import EntityType


@receiver([post_save, post_delete], sender=Booking)
def invalidate_booking_cache(sender, instance, **kwargs):
    """Invalidate caches when a booking is saved or deleted."""
    invalidate_after_commit(EntityType.BOOKING)
