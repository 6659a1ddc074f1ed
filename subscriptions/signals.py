"""Django signals for cache invalidation on direct model edits."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from shared.cache import invalidate_after_commit
from shared.domain import EntityType
from subscriptions.models import SubscriptionPlan, UserSubscription


@receiver([post_save, post_delete], sender=SubscriptionPlan)
def invalidate_plan_cache(sender, instance, **kwargs):
    invalidate_after_commit(EntityType.SUBSCRIPTION_PLAN)


@receiver([post_save, post_delete], sender=UserSubscription)
def invalidate_subscription_cache(sender, instance, **kwargs):
    invalidate_after_commit(EntityType.USER_SUBSCRIPTION)
