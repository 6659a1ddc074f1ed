"""Django signals for cache invalidation on direct model edits."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from accounts.models import MembershipTier, PointTransaction, Profile, UserPoints
from shared.cache import invalidate_after_commit
from shared.domain import EntityType

ENTITY_TYPES = {
    Profile: EntityType.PROFILE,
    UserPoints: EntityType.USER_POINTS,
    PointTransaction: EntityType.POINT_TRANSACTION,
    MembershipTier: EntityType.MEMBERSHIP_TIER,
}


@receiver([post_save, post_delete])
def invalidate_account_cache(sender, instance, **kwargs):
    entity_type = ENTITY_TYPES.get(sender)
    if entity_type is not None:
        invalidate_after_commit(entity_type)
