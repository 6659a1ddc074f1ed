"""Django signals for cache invalidation on direct model edits."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.models import Event, Zone
from shared.cache import invalidate_after_commit
from shared.domain import EntityType


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    invalidate_after_commit(EntityType.EVENT)


@receiver([post_save, post_delete], sender=Zone)
def invalidate_zone_cache(sender, instance, **kwargs):
    """Invalidate caches when a zone is saved or deleted."""
    invalidate_after_commit(EntityType.ZONE)
