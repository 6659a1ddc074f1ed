from django.urls import path

from subscriptions.handlers import PlanDetailView, PlanListView

urlpatterns = [
    path("plans", PlanListView.as_view(), {"entity": "plans"}, name="plan-list"),
    path(
        "plans/<str:entity_id>",
        PlanDetailView.as_view(),
        {"entity": "plans"},
        name="plan-detail",
    ),
]
