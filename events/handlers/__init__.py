from events.handlers.views import (
    EventClubOptionsView,
    EventDetailView,
    EventFeaturedToggleView,
    EventListView,
    EventStatsView,
    EventZonesView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventZonesView",
    "EventStatsView",
    "EventClubOptionsView",
    "EventFeaturedToggleView",
]
