"""Serializers for subscription plans and user subscriptions."""

from rest_framework import serializers

from subscriptions.domain import (
    FeatureRow,
    FeatureType,
    PlanCommand,
    clean_benefits,
    decode_features,
    encode_features,
)
from subscriptions.models import UserSubscription


class FeatureRowSerializer(serializers.Serializer):
    key = serializers.CharField(allow_blank=True)
    value = serializers.CharField(allow_blank=True, required=False, default="")
    type = serializers.ChoiceField(
        choices=[kind.value for kind in FeatureType], default=FeatureType.TEXT.value
    )
    label = serializers.CharField(read_only=True)

    def to_representation(self, instance: FeatureRow) -> dict:
        return {
            "key": instance.key,
            "value": instance.value,
            "type": instance.type.value,
            "label": instance.label,
        }


class PlanSerializer(serializers.Serializer):
    """Reads both ORM rows and Plan domain objects."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    price_monthly = serializers.DecimalField(max_digits=10, decimal_places=2)
    price_yearly = serializers.DecimalField(max_digits=10, decimal_places=2, allow_null=True)
    tier_level = serializers.IntegerField()
    features = serializers.JSONField()
    feature_rows = serializers.SerializerMethodField()
    benefits = serializers.ListField(child=serializers.CharField())
    is_active = serializers.BooleanField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()

    def get_feature_rows(self, obj) -> list[dict]:
        return FeatureRowSerializer(decode_features(obj.features), many=True).data


class PlanWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100, allow_blank=True)
    description = serializers.CharField(allow_blank=True)
    price_monthly = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False, default=0
    )
    price_yearly = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False, allow_null=True, default=None
    )
    tier_level = serializers.IntegerField(min_value=1, required=False, default=1)
    features = FeatureRowSerializer(many=True, required=False, default=list)
    benefits = serializers.ListField(
        child=serializers.CharField(allow_blank=True), required=False, default=list
    )
    is_active = serializers.BooleanField(required=False, default=True)

    def command(self) -> PlanCommand:
        data = self.validated_data
        rows = [
            FeatureRow(key=row["key"], value=row["value"], type=FeatureType(row["type"]))
            for row in data["features"]
        ]
        return PlanCommand(
            name=data["name"].strip(),
            description=data["description"].strip(),
            price_monthly=data["price_monthly"],
            price_yearly=data["price_yearly"],
            tier_level=data["tier_level"],
            features=encode_features(rows),
            benefits=clean_benefits(data["benefits"]),
            is_active=data["is_active"],
        )


class UserSubscriptionSerializer(serializers.ModelSerializer):
    user_name = serializers.CharField(source="user.full_name", read_only=True)
    user_email = serializers.CharField(source="user.email", read_only=True)

    class Meta:
        model = UserSubscription
        fields = [
            "id",
            "user_id",
            "user_name",
            "user_email",
            "plan_id",
            "plan_name",
            "subscription_type",
            "amount",
            "currency",
            "status",
            "is_auto_renew",
            "start_date",
            "end_date",
            "created_at",
        ]
