import logging
from datetime import datetime

from django.utils import timezone

from dashboard.domain.models import RECENT_LIMIT, Dashboard, build_dashboard
from dashboard.stores.interfaces import DashboardStore
from shared.domain.errors import DomainError
from shared.notifications import Notifier

logger = logging.getLogger(__name__)


class DashboardService:
    def __init__(self, store: DashboardStore, notifier: Notifier) -> None:
        self._store = store
        self._notifier = notifier

    def summary(self, now: datetime | None = None) -> Dashboard:
        try:
            snapshot = self._store.snapshot(RECENT_LIMIT)
        except DomainError:
            self._notifier.error("Failed to load dashboard data")
            raise
        return build_dashboard(snapshot, now or timezone.localtime())
