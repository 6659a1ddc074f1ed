from django.urls import path

from shared.handlers import EntityDetailView, EntityListView, EntityStatusView, EntityToggleView

urlpatterns = [
    path("<slug:entity>", EntityListView.as_view(), name="entity-list"),
    path("<slug:entity>/<str:entity_id>", EntityDetailView.as_view(), name="entity-detail"),
    path(
        "<slug:entity>/<str:entity_id>/status",
        EntityStatusView.as_view(),
        name="entity-status",
    ),
    path(
        "<slug:entity>/<str:entity_id>/toggle/<str:field>",
        EntityToggleView.as_view(),
        name="entity-toggle",
    ),
]
