from django.contrib import admin

from events.models import Event, Zone


class ZoneInline(admin.TabularInline):
    model = Zone
    extra = 1


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "club", "start_date", "end_date", "is_featured"]
    list_filter = ["is_featured"]
    search_fields = ["title", "location"]
    inlines = [ZoneInline]


@admin.register(Zone)
class ZoneAdmin(admin.ModelAdmin):
    list_display = ["name", "event", "price", "capacity"]
    list_filter = ["event"]
