from abc import ABC, abstractmethod

from dashboard.domain.models import Snapshot


class DashboardStore(ABC):
    """Interface for the read-only dashboard queries."""

    @abstractmethod
    def snapshot(self, recent: int) -> Snapshot:
        """Fetch every row the dashboard aggregates plus the ``recent`` newest
        events and bookings.

        Raises:
            StoreError: If any query fails.
        """
        ...
