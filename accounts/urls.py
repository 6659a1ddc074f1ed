from django.urls import path

from accounts.handlers import MembershipTierView, PointsAdjustView, UserDetailView

urlpatterns = [
    path("points/tiers", MembershipTierView.as_view(), name="membership-tier-lookup"),
    path("points/<str:user_id>/adjust", PointsAdjustView.as_view(), name="points-adjust"),
    path(
        "users/<str:entity_id>",
        UserDetailView.as_view(),
        {"entity": "users"},
        name="user-detail",
    ),
]
