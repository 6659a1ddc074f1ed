from accounts.handlers.views import MembershipTierView, PointsAdjustView, UserDetailView

__all__ = ["UserDetailView", "PointsAdjustView", "MembershipTierView"]
