from django.contrib import admin

from accounts.models import MembershipTier, PointTransaction, Profile, UserPoints


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ["full_name", "email", "role", "is_premium", "is_organizer", "created_at"]
    list_filter = ["role", "is_premium", "is_organizer"]
    search_fields = ["full_name", "email", "phone"]


@admin.register(UserPoints)
class UserPointsAdmin(admin.ModelAdmin):
    list_display = ["user", "total_points", "available_points", "used_points"]
    search_fields = ["user__full_name"]


@admin.register(PointTransaction)
class PointTransactionAdmin(admin.ModelAdmin):
    list_display = ["user", "points", "transaction_type", "created_at"]
    list_filter = ["transaction_type"]


@admin.register(MembershipTier)
class MembershipTierAdmin(admin.ModelAdmin):
    list_display = ["name", "min_points", "max_points"]
