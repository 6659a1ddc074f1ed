from django.contrib import admin

from subscriptions.models import SubscriptionPlan, UserSubscription


@admin.register(SubscriptionPlan)
class SubscriptionPlanAdmin(admin.ModelAdmin):
    list_display = ["name", "tier_level", "price_monthly", "price_yearly", "is_active"]
    list_filter = ["is_active"]


@admin.register(UserSubscription)
class UserSubscriptionAdmin(admin.ModelAdmin):
    list_display = ["user", "plan_name", "status", "start_date", "end_date"]
    list_filter = ["status"]
    search_fields = ["user__full_name", "plan_name"]
