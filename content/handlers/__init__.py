from content.handlers.views import (
    CategoryDefaultsView,
    CategoryDetailView,
    CategoryListView,
    PodcastDetailView,
    PodcastListView,
)

__all__ = [
    "CategoryListView",
    "CategoryDetailView",
    "CategoryDefaultsView",
    "PodcastListView",
    "PodcastDetailView",
]
