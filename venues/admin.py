from django.contrib import admin

from venues.models import ArcadeCenter, Beach, Club, LiveShow, Lounge, Pub, Restaurant


@admin.register(Club)
class ClubAdmin(admin.ModelAdmin):
    list_display = ["name", "created_at"]
    search_fields = ["name"]


@admin.register(Beach, Pub, Lounge, Restaurant, ArcadeCenter)
class VenueAdmin(admin.ModelAdmin):
    list_display = ["name", "location", "is_active", "is_featured", "created_at"]
    list_filter = ["is_active", "is_featured"]
    search_fields = ["name", "location", "description"]


@admin.register(LiveShow)
class LiveShowAdmin(admin.ModelAdmin):
    list_display = ["title", "performer_name", "show_date", "is_active", "is_featured"]
    list_filter = ["is_active", "is_featured"]
    search_fields = ["title", "performer_name", "venue_name"]
