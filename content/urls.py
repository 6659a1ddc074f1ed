from django.urls import path

from content.handlers import (
    CategoryDefaultsView,
    CategoryDetailView,
    CategoryListView,
    PodcastDetailView,
    PodcastListView,
)

urlpatterns = [
    path("categories", CategoryListView.as_view(), {"entity": "categories"}, name="category-list"),
    path("categories/defaults", CategoryDefaultsView.as_view(), name="category-defaults"),
    path(
        "categories/<str:entity_id>",
        CategoryDetailView.as_view(),
        {"entity": "categories"},
        name="category-detail",
    ),
    path("podcasts", PodcastListView.as_view(), {"entity": "podcasts"}, name="podcast-list"),
    path(
        "podcasts/<str:entity_id>",
        PodcastDetailView.as_view(),
        {"entity": "podcasts"},
        name="podcast-detail",
    ),
]
