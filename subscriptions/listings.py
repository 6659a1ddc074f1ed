"""List definitions for plans and user subscriptions."""

from shared.domain import CacheKey, EntityType
from shared.registry import EntityDefinition, registry
from shared.stores.filters import choice_filter, flag_filter
from shared.stores.listing import ListConfig
from subscriptions.handlers.serializers import PlanSerializer, UserSubscriptionSerializer
from subscriptions.models import SubscriptionPlan, UserSubscription

SUBSCRIPTION_STATUSES = tuple(value for value, _ in UserSubscription.STATUS_CHOICES)


def register() -> None:
    registry.register(
        EntityDefinition(
            slug="plans",
            entity_type=EntityType.SUBSCRIPTION_PLAN,
            label="subscription plan",
            model=SubscriptionPlan,
            serializer_class=PlanSerializer,
            listing=ListConfig(
                search_fields=("name", "description"),
                filters=(flag_filter("status", "is_active", on="active", off="inactive"),),
                ordering=("tier_level", "price_monthly"),
            ),
            cache_key=CacheKey.SUBSCRIPTION_PLANS,
            toggles=("is_active",),
        )
    )
    registry.register(
        EntityDefinition(
            slug="subscriptions",
            entity_type=EntityType.USER_SUBSCRIPTION,
            label="subscription",
            model=UserSubscription,
            serializer_class=UserSubscriptionSerializer,
            listing=ListConfig(
                search_fields=("user__full_name", "user__email", "plan_name"),
                filters=(choice_filter("status", "status", SUBSCRIPTION_STATUSES),),
            ),
            cache_key=CacheKey.USER_SUBSCRIPTIONS,
            select_related=("user",),
            statuses=SUBSCRIPTION_STATUSES,
            deletable=False,
        )
    )
