from rest_framework.request import Request
from rest_framework.response import Response

from dashboard.handlers.serializers import DashboardSerializer
from dashboard.services.dashboard_service import DashboardService
from dashboard.stores.django_store import DjangoDashboardStore
from shared.cache import query_cache
from shared.domain import CacheKey
from shared.handlers import AdminAPIView


class DashboardView(AdminAPIView):
    """Handler for GET /api/admin/dashboard"""

    def get(self, request: Request) -> Response:
        service = DashboardService(DjangoDashboardStore(), self.notifier)
        payload = query_cache.get_or_set(
            CacheKey.DASHBOARD,
            ("summary",),
            lambda: DashboardSerializer(service.summary()).data,
        )
        return self.respond(payload)
