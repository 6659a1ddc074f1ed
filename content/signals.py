"""Django signals for cache invalidation on direct model edits."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from content.models import Category, ConciergeRequest, Feed, Podcast
from shared.cache import invalidate_after_commit
from shared.domain import EntityType

ENTITY_TYPES = {
    Feed: EntityType.FEED,
    Category: EntityType.CATEGORY,
    ConciergeRequest: EntityType.CONCIERGE_REQUEST,
    Podcast: EntityType.PODCAST,
}


@receiver([post_save, post_delete])
def invalidate_content_cache(sender, instance, **kwargs):
    entity_type = ENTITY_TYPES.get(sender)
    if entity_type is not None:
        invalidate_after_commit(entity_type)
