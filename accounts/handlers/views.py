"""HTTP handlers (views) for users and loyalty points."""

from rest_framework.request import Request
from rest_framework.response import Response

from accounts.handlers.serializers import (
    PointsAdjustmentSerializer,
    PointsBalanceSerializer,
    ProfileUpdateSerializer,
    TierLookupSerializer,
    TierSerializer,
)
from accounts.services.points_service import PointsService
from accounts.services.profile_service import ProfileService
from accounts.stores.django_store import DjangoPointsStore, DjangoProfileStore
from shared.cache import query_cache
from shared.domain import CacheKey
from shared.handlers import AdminAPIView, EntityDetailView
from shared.services.entity_service import parse_entity_id


def points_service(notifier) -> PointsService:
    return PointsService(DjangoPointsStore(), query_cache, notifier)


class UserDetailView(EntityDetailView):
    """Handler for PATCH /api/admin/users/{entity_id}"""

    def patch(self, request: Request, entity: str, entity_id: str) -> Response:
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        update = serializer.command()
        ProfileService(DjangoProfileStore(), query_cache, self.notifier).update(entity_id, update)
        return self.respond({"id": entity_id, **update.changes()})


class PointsAdjustView(AdminAPIView):
    """Handler for POST /api/admin/points/{user_id}/adjust"""

    def post(self, request: Request, user_id: str) -> Response:
        serializer = PointsAdjustmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        adjustment = serializer.command(parse_entity_id(user_id, "user"))
        balance = points_service(self.notifier).adjust(adjustment)
        return self.respond({"user_id": user_id, **PointsBalanceSerializer(balance).data})


class MembershipTierView(AdminAPIView):
    """Handler for GET /api/admin/points/tiers[?points=N]"""

    def get(self, request: Request) -> Response:
        serializer = TierLookupSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        service = points_service(self.notifier)
        tiers = query_cache.get_or_set(
            CacheKey.MEMBERSHIP_TIERS,
            ("lookup",),
            lambda: list(TierSerializer(service.tiers(), many=True).data),
        )
        payload = {"tiers": tiers}
        points = serializer.validated_data.get("points")
        if points is not None:
            payload["tier"] = service.tier_for_points(points)
        return self.respond(payload)
