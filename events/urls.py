from django.urls import path

from events.handlers import (
    EventClubOptionsView,
    EventDetailView,
    EventFeaturedToggleView,
    EventListView,
    EventStatsView,
    EventZonesView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/stats", EventStatsView.as_view(), name="event-stats"),
    path("events/clubs", EventClubOptionsView.as_view(), name="event-club-options"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/zones", EventZonesView.as_view(), name="event-zones"),
    path(
        "events/<str:event_id>/toggle/is_featured",
        EventFeaturedToggleView.as_view(),
        name="event-toggle-featured",
    ),
]
