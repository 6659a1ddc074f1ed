from django.urls import path

from venues.handlers.views import WRITE_SERIALIZERS, ListingDetailView, ListingListView

urlpatterns = []
for entity in WRITE_SERIALIZERS:
    urlpatterns += [
        path(entity, ListingListView.as_view(), {"entity": entity}, name=f"{entity}-list"),
        path(
            f"{entity}/<str:entity_id>",
            ListingDetailView.as_view(),
            {"entity": entity},
            name=f"{entity}-detail",
        ),
    ]
