"""Serializers for profiles, loyalty points and membership tiers."""

from rest_framework import serializers

from accounts.domain import (
    ADMIN_TRANSACTION_TYPES,
    PointsAdjustment,
    ProfileUpdate,
    Role,
    TransactionType,
)
from accounts.models import MembershipTier, PointTransaction, Profile, UserPoints
from shared.domain import EntityId


class ProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = Profile
        fields = [
            "id",
            "email",
            "full_name",
            "username",
            "phone",
            "avatar_url",
            "role",
            "is_premium",
            "is_organizer",
            "is_approved",
            "created_at",
            "updated_at",
        ]


class UserPointsSerializer(serializers.ModelSerializer):
    full_name = serializers.CharField(source="user.full_name", read_only=True)
    phone = serializers.CharField(source="user.phone", read_only=True)
    avatar_url = serializers.CharField(source="user.avatar_url", read_only=True)

    class Meta:
        model = UserPoints
        fields = [
            "id",
            "user_id",
            "full_name",
            "phone",
            "avatar_url",
            "total_points",
            "available_points",
            "used_points",
            "updated_at",
        ]


class PointTransactionSerializer(serializers.ModelSerializer):
    full_name = serializers.CharField(source="user.full_name", read_only=True)

    class Meta:
        model = PointTransaction
        fields = [
            "id",
            "user_id",
            "full_name",
            "points",
            "transaction_type",
            "description",
            "created_at",
        ]


class MembershipTierSerializer(serializers.ModelSerializer):
    class Meta:
        model = MembershipTier
        fields = ["id", "name", "min_points", "max_points", "benefits", "color"]


class TierSerializer(serializers.Serializer):
    """Serializer for the MembershipTier domain model."""

    name = serializers.CharField()
    min_points = serializers.IntegerField()
    max_points = serializers.IntegerField(allow_null=True)


class ProfileUpdateSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=[role.value for role in Role], required=False)
    is_premium = serializers.BooleanField(required=False)
    is_organizer = serializers.BooleanField(required=False)

    def command(self) -> ProfileUpdate:
        data = self.validated_data
        role = data.get("role")
        return ProfileUpdate(
            role=Role(role) if role is not None else None,
            is_premium=data.get("is_premium"),
            is_organizer=data.get("is_organizer"),
        )


class PointsAdjustmentSerializer(serializers.Serializer):
    points = serializers.IntegerField()
    transaction_type = serializers.ChoiceField(
        choices=[kind.value for kind in ADMIN_TRANSACTION_TYPES],
        default=TransactionType.ADMIN_CREDIT.value,
    )
    description = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)

    def command(self, user_id: EntityId) -> PointsAdjustment:
        data = self.validated_data
        return PointsAdjustment(
            user_id=user_id,
            points=data["points"],
            transaction_type=TransactionType(data["transaction_type"]),
            description=data["description"],
        )


class PointsBalanceSerializer(serializers.Serializer):
    total_points = serializers.IntegerField(source="total")
    available_points = serializers.IntegerField(source="available")
    used_points = serializers.IntegerField(source="used")


class TierLookupSerializer(serializers.Serializer):
    points = serializers.IntegerField(required=False, min_value=0)
