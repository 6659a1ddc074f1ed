from django.contrib import admin

from content.models import Category, ConciergeRequest, Feed, Podcast


@admin.register(Feed)
class FeedAdmin(admin.ModelAdmin):
    list_display = ["user", "event", "like_count", "comment_count", "created_at"]
    search_fields = ["content"]


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ["display_name", "name", "sort_order", "is_active"]
    list_filter = ["is_active"]
    search_fields = ["name", "display_name"]


@admin.register(ConciergeRequest)
class ConciergeRequestAdmin(admin.ModelAdmin):
    list_display = ["service_name", "user", "category", "is_urgent", "status", "created_at"]
    list_filter = ["status", "is_urgent"]
    search_fields = ["service_name", "description"]


@admin.register(Podcast)
class PodcastAdmin(admin.ModelAdmin):
    list_display = ["title", "category", "status", "is_featured", "created_at"]
    list_filter = ["category", "status", "is_featured"]
    search_fields = ["title", "description"]
