from django.contrib import admin

from bookings.models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["user", "event", "zone", "status", "quantity", "amount", "created_at"]
    list_filter = ["status"]
    search_fields = ["user__full_name", "event__title"]
