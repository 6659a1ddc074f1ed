from django.urls import path

from dashboard.handlers import DashboardView

urlpatterns = [
    path("dashboard", DashboardView.as_view(), name="dashboard"),
]
