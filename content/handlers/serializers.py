"""Serializers for feeds, categories, concierge requests and podcasts."""

from rest_framework import serializers

from content.domain import CategoryCommand, PodcastCategory, PodcastCommand, PodcastStatus, parse_tags
from content.models import Category, ConciergeRequest, Feed


class FeedSerializer(serializers.ModelSerializer):
    user_name = serializers.CharField(source="user.full_name", read_only=True)
    event_title = serializers.CharField(source="event.title", read_only=True, default=None)

    class Meta:
        model = Feed
        fields = [
            "id",
            "user_id",
            "user_name",
            "event_id",
            "event_title",
            "content",
            "image_url",
            "like_count",
            "comment_count",
            "created_at",
        ]


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = [
            "id",
            "name",
            "display_name",
            "icon",
            "color",
            "sort_order",
            "is_active",
            "created_at",
            "updated_at",
        ]


class CategoryWriteSerializer(serializers.Serializer):
    display_name = serializers.CharField(allow_blank=True, max_length=100)
    name = serializers.CharField(required=False, allow_blank=True, max_length=100, default="")
    icon = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    color = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    sort_order = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default=""
    )
    is_active = serializers.BooleanField(required=False, default=True)

    def command(self) -> CategoryCommand:
        data = self.validated_data
        return CategoryCommand.from_form(
            display_name=data["display_name"],
            name=data["name"],
            icon=data["icon"],
            color=data["color"],
            sort_order=data["sort_order"] or "",
            is_active=data["is_active"],
        )


class ConciergeRequestSerializer(serializers.ModelSerializer):
    user_name = serializers.CharField(source="user.full_name", read_only=True)
    user_phone = serializers.CharField(source="user.phone", read_only=True)

    class Meta:
        model = ConciergeRequest
        fields = [
            "id",
            "user_id",
            "user_name",
            "user_phone",
            "service_name",
            "category",
            "description",
            "additional_details",
            "is_urgent",
            "status",
            "requested_at",
            "created_at",
            "updated_at",
        ]


def _enum_value(value):
    return getattr(value, "value", value)


class PodcastSerializer(serializers.Serializer):
    """Reads both ORM rows and Podcast domain objects."""

    id = serializers.UUIDField()
    title = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    youtube_url = serializers.CharField()
    thumbnail_url = serializers.CharField(allow_null=True)
    cover_image = serializers.CharField(allow_null=True)
    duration = serializers.CharField(allow_null=True)
    published_at = serializers.DateTimeField(allow_null=True)
    category = serializers.SerializerMethodField()
    tags = serializers.ListField(child=serializers.CharField())
    is_featured = serializers.BooleanField()
    view_count = serializers.IntegerField()
    status = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()

    def get_category(self, obj) -> str:
        return _enum_value(obj.category)

    def get_status(self, obj) -> str:
        return _enum_value(obj.status)


class PodcastWriteSerializer(serializers.Serializer):
    """Multipart podcast form; ``tags`` is one comma-separated string."""

    title = serializers.CharField(allow_blank=True, max_length=255)
    youtube_url = serializers.CharField(allow_blank=True, max_length=500)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    thumbnail_url = serializers.URLField(required=False, allow_blank=True, default="")
    duration = serializers.CharField(required=False, allow_blank=True, max_length=20, default="")
    published_at = serializers.DateTimeField(required=False, allow_null=True, default=None)
    category = serializers.ChoiceField(
        choices=[c.value for c in PodcastCategory], default=PodcastCategory.PODCAST.value
    )
    tags = serializers.CharField(required=False, allow_blank=True, default="")
    is_featured = serializers.BooleanField(required=False, default=False)
    status = serializers.ChoiceField(
        choices=[s.value for s in PodcastStatus], default=PodcastStatus.PUBLISHED.value
    )
    cover_image = serializers.FileField(required=False, allow_empty_file=False)

    def command(self) -> PodcastCommand:
        data = self.validated_data
        return PodcastCommand(
            title=data["title"],
            youtube_url=data["youtube_url"].strip(),
            description=data["description"].strip() or None,
            thumbnail_url=data["thumbnail_url"] or None,
            duration=data["duration"].strip() or None,
            published_at=data["published_at"],
            category=PodcastCategory(data["category"]),
            tags=parse_tags(data["tags"]),
            is_featured=data["is_featured"],
            status=PodcastStatus(data["status"]),
        )

    def cover(self):
        return self.validated_data.get("cover_image")
