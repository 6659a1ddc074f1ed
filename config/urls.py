from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

api_patterns = [
    path("", include("events.urls")),
    path("", include("accounts.urls")),
    path("", include("subscriptions.urls")),
    path("", include("content.urls")),
    path("", include("venues.urls")),
    path("", include("dashboard.urls")),
    # generic list/delete/toggle routes come last so app routes win
    path("", include("shared.urls")),
]

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/admin/", include(api_patterns)),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
