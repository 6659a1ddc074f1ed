"""HTTP handlers (views) for subscription plans.

Listing, deleting and toggling plans go through the generic entity routes;
these views add create and edit on the same paths.
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from shared.cache import query_cache
from shared.handlers import EntityDetailView, EntityListView
from subscriptions.handlers.serializers import PlanSerializer, PlanWriteSerializer
from subscriptions.services.plan_service import PlanService
from subscriptions.stores.django_store import DjangoPlanStore


def plan_service(notifier) -> PlanService:
    return PlanService(DjangoPlanStore(), query_cache, notifier)


class PlanListView(EntityListView):
    """Handler for GET|POST /api/admin/plans"""

    def post(self, request: Request, entity: str) -> Response:
        serializer = PlanWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        plan = plan_service(self.notifier).create(serializer.command())
        return self.respond(PlanSerializer(plan).data, status.HTTP_201_CREATED)


class PlanDetailView(EntityDetailView):
    """Handler for PUT|DELETE /api/admin/plans/{entity_id}"""

    def put(self, request: Request, entity: str, entity_id: str) -> Response:
        serializer = PlanWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        plan = plan_service(self.notifier).update(entity_id, serializer.command())
        return self.respond(PlanSerializer(plan).data)
