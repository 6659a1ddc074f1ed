"""List definitions for users, loyalty points and tiers."""

from accounts.handlers.serializers import (
    MembershipTierSerializer,
    PointTransactionSerializer,
    ProfileSerializer,
    UserPointsSerializer,
)
from accounts.models import MembershipTier, PointTransaction, Profile, UserPoints
from shared.domain import CacheKey, EntityType
from shared.registry import EntityDefinition, registry
from shared.stores.filters import choice_filter, flag_filter
from shared.stores.listing import ListConfig


def register() -> None:
    registry.register(
        EntityDefinition(
            slug="users",
            entity_type=EntityType.PROFILE,
            label="user",
            model=Profile,
            serializer_class=ProfileSerializer,
            listing=ListConfig(
                search_fields=("full_name", "phone", "email"),
                filters=(
                    choice_filter("role", "role", [value for value, _ in Profile.ROLE_CHOICES]),
                    flag_filter("premium", "is_premium", on="premium", off="free"),
                    flag_filter("organizer", "is_organizer", on="organizer", off="not_organizer"),
                ),
            ),
            cache_key=CacheKey.ADMIN_USERS,
            toggles=("is_premium", "is_organizer"),
            deletable=False,
        )
    )
    registry.register(
        EntityDefinition(
            slug="points",
            entity_type=EntityType.USER_POINTS,
            label="user points",
            model=UserPoints,
            serializer_class=UserPointsSerializer,
            listing=ListConfig(
                search_fields=("user__full_name", "user__phone"),
                ordering=("-total_points",),
            ),
            cache_key=CacheKey.ADMIN_POINTS,
            select_related=("user",),
            deletable=False,
        )
    )
    registry.register(
        EntityDefinition(
            slug="point-transactions",
            entity_type=EntityType.POINT_TRANSACTION,
            label="point transaction",
            model=PointTransaction,
            serializer_class=PointTransactionSerializer,
            listing=ListConfig(
                search_fields=("description", "user__full_name"),
                filters=(
                    choice_filter(
                        "type",
                        "transaction_type",
                        [value for value, _ in PointTransaction.TYPE_CHOICES],
                    ),
                ),
            ),
            cache_key=CacheKey.POINT_TRANSACTIONS,
            select_related=("user",),
            deletable=False,
        )
    )
    registry.register(
        EntityDefinition(
            slug="membership-tiers",
            entity_type=EntityType.MEMBERSHIP_TIER,
            label="membership tier",
            model=MembershipTier,
            serializer_class=MembershipTierSerializer,
            listing=ListConfig(search_fields=("name",), ordering=("min_points",)),
            cache_key=CacheKey.MEMBERSHIP_TIERS,
        )
    )
