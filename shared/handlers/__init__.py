from shared.handlers.views import (
    AdminAPIView,
    EntityDetailView,
    EntityListView,
    EntityStatusView,
    EntityToggleView,
)

__all__ = [
    "AdminAPIView",
    "EntityListView",
    "EntityDetailView",
    "EntityStatusView",
    "EntityToggleView",
]
