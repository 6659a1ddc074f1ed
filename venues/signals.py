"""Django signals for cache invalidation on direct model edits."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from shared.cache import invalidate_after_commit
from shared.domain import EntityType
from venues.models import ArcadeCenter, Beach, Club, LiveShow, Lounge, Pub, Restaurant

ENTITY_TYPES = {
    Club: EntityType.CLUB,
    Beach: EntityType.BEACH,
    Pub: EntityType.PUB,
    Lounge: EntityType.LOUNGE,
    Restaurant: EntityType.RESTAURANT,
    ArcadeCenter: EntityType.ARCADE_CENTER,
    LiveShow: EntityType.LIVE_SHOW,
}


@receiver([post_save, post_delete])
def invalidate_venue_cache(sender, instance, **kwargs):
    """Invalidate venue lists when a club or venue is saved or deleted."""
    entity_type = ENTITY_TYPES.get(sender)
    if entity_type is not None:
        invalidate_after_commit(entity_type)
