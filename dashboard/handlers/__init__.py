from dashboard.handlers.views import DashboardView

__all__ = ["DashboardView"]
