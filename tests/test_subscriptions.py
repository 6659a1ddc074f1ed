"""Tests for subscription plans and their feature editor.

Run with: pytest tests/test_subscriptions.py -v
"""

from decimal import Decimal

import pytest

from shared.domain.errors import MissingRequiredFieldError
from subscriptions.domain import (
    FeatureRow,
    FeatureType,
    PlanCommand,
    clean_benefits,
    decode_features,
    encode_features,
)
from subscriptions.domain.features import humanize_key, leading_int

API = "/api/admin"


class TestFeatures:
    """Tests for converting editor rows to and from the stored object."""

    def test_humanize_key(self):
        assert humanize_key("max_guests") == "Max Guests"
        assert humanize_key("vip") == "Vip"

    @pytest.mark.parametrize("text,expected", [("12", 12), ("7 nights", 7), ("-3", -3), ("abc", 0), ("", 0)])
    def test_leading_int(self, text, expected):
        assert leading_int(text) == expected

    def test_encode_by_type(self):
        rows = [
            FeatureRow("priority_booking", "true", FeatureType.BOOLEAN),
            FeatureRow("lounge_access", "yes", FeatureType.BOOLEAN),
            FeatureRow("max_guests", "4 people", FeatureType.NUMBER),
            FeatureRow("support", "24/7"),
        ]
        assert encode_features(rows) == {
            "priority_booking": True,
            "lounge_access": False,
            "max_guests": 4,
            "support": "24/7",
        }

    def test_blank_keys_are_dropped_and_last_duplicate_wins(self):
        rows = [FeatureRow("  ", "x"), FeatureRow("tier", "a"), FeatureRow("tier", "b")]
        assert encode_features(rows) == {"tier": "b"}

    def test_decode_infers_types(self):
        rows = decode_features({"max_guests": 4, "priority_booking": False, "support": "24/7"})
        assert [(r.key, r.value, r.type) for r in rows] == [
            ("max_guests", "4", FeatureType.NUMBER),
            ("priority_booking", "false", FeatureType.BOOLEAN),
            ("support", "24/7", FeatureType.TEXT),
        ]

    def test_decode_non_object_is_empty(self):
        assert decode_features(None) == []
        assert decode_features(["a", "b"]) == []

    def test_decoded_rows_encode_back(self):
        stored = {"max_guests": 4, "priority_booking": True, "support": "email"}
        assert encode_features(decode_features(stored)) == stored

    def test_clean_benefits(self):
        assert clean_benefits([" Free entry ", "", "VIP lane", "Free entry", "  "]) == (
            "Free entry",
            "VIP lane",
        )


class TestPlanCommand:
    """Tests for plan form validation."""

    def test_name_and_description_are_required(self):
        with pytest.raises(MissingRequiredFieldError) as excinfo:
            PlanCommand(name=" ", description="")
        assert excinfo.value.fields == ("name", "description")

    def test_defaults(self):
        command = PlanCommand(name="Gold", description="Top tier")
        assert command.price_monthly == Decimal("0")
        assert command.tier_level == 1
        assert command.is_active is True


@pytest.mark.django_db
class TestPlanApi:
    """Tests for /api/admin/plans"""

    payload = {
        "name": "Gold",
        "description": "Priority access to every event",
        "price_monthly": "99.00",
        "price_yearly": "990.00",
        "tier_level": 3,
        "features": [
            {"key": "max_guests", "value": "4", "type": "number"},
            {"key": "priority_booking", "value": "true", "type": "boolean"},
            {"key": "", "value": "ignored"},
        ],
        "benefits": ["Free entry", " Free entry ", ""],
    }

    def test_create_plan(self, admin_client):
        from subscriptions.models import SubscriptionPlan

        response = admin_client.post(f"{API}/plans", self.payload, format="json")
        assert response.status_code == 201
        plan = SubscriptionPlan.objects.get()
        assert plan.features == {"max_guests": 4, "priority_booking": True}
        assert plan.benefits == ["Free entry"]
        assert response.data["data"]["feature_rows"][0] == {
            "key": "max_guests",
            "value": "4",
            "type": "number",
            "label": "Max Guests",
        }
        assert response.data["messages"] == [
            {"level": "success", "text": "Subscription plan created successfully!"}
        ]

    def test_missing_description_is_rejected(self, admin_client):
        from subscriptions.models import SubscriptionPlan

        response = admin_client.post(
            f"{API}/plans", {**self.payload, "description": "  "}, format="json"
        )
        assert response.status_code == 400
        assert response.data["error"]["code"] == "MISSING_REQUIRED_FIELD"
        assert not SubscriptionPlan.objects.exists()

    def test_update_plan(self, admin_client):
        created = admin_client.post(f"{API}/plans", self.payload, format="json").data["data"]
        response = admin_client.put(
            f"{API}/plans/{created['id']}",
            {**self.payload, "name": "Platinum", "features": [], "is_active": False},
            format="json",
        )
        assert response.status_code == 200
        assert response.data["data"]["name"] == "Platinum"
        assert response.data["data"]["features"] == {}
        assert response.data["data"]["is_active"] is False

    def test_update_missing_plan(self, admin_client):
        from uuid import uuid4

        response = admin_client.put(f"{API}/plans/{uuid4()}", self.payload, format="json")
        assert response.status_code == 404
        assert response.data["messages"] == [
            {"level": "error", "text": "Failed to update subscription plan"}
        ]

    def test_plans_list_and_toggle(self, admin_client):
        created = admin_client.post(f"{API}/plans", self.payload, format="json").data["data"]
        response = admin_client.post(
            f"{API}/plans/{created['id']}/toggle/is_active", {"current": True}, format="json"
        )
        assert response.status_code == 200
        rows = admin_client.get(f"{API}/plans").data["data"]["rows"]
        assert rows[0]["is_active"] is False

    def test_subscription_status_change(self, admin_client, make_profile):
        from django.utils import timezone

        from subscriptions.models import UserSubscription

        subscription = UserSubscription.objects.create(
            user=make_profile(), plan_name="Gold", start_date=timezone.now()
        )
        response = admin_client.patch(
            f"{API}/subscriptions/{subscription.pk}/status", {"status": "active"}, format="json"
        )
        assert response.status_code == 200
        subscription.refresh_from_db()
        assert subscription.status == "active"
