from subscriptions.handlers.views import PlanDetailView, PlanListView

__all__ = ["PlanListView", "PlanDetailView"]
