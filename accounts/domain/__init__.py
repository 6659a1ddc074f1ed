from accounts.domain.models import (
    ADMIN_TRANSACTION_TYPES,
    DEFAULT_TIER,
    MembershipTier,
    PointsAdjustment,
    PointsBalance,
    ProfileUpdate,
    Role,
    TransactionType,
    tier_for,
)

__all__ = [
    "ADMIN_TRANSACTION_TYPES",
    "DEFAULT_TIER",
    "MembershipTier",
    "PointsAdjustment",
    "PointsBalance",
    "ProfileUpdate",
    "Role",
    "TransactionType",
    "tier_for",
]
