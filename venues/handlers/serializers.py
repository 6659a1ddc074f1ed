"""Serializers for clubs and venue listings."""

from rest_framework import serializers
from rest_framework.fields import empty

from venues.domain import ClubCommand, LiveShowCommand, RestaurantCommand, VenueCommand
from venues.models import ArcadeCenter, Beach, Club, LiveShow, Lounge, Pub, Restaurant

VENUE_FIELDS = [
    "id",
    "name",
    "description",
    "location",
    "image_url",
    "phone",
    "opening_hours",
    "rating",
    "is_active",
    "is_featured",
    "created_at",
    "updated_at",
]


class ClubSerializer(serializers.ModelSerializer):
    class Meta:
        model = Club
        fields = ["id", "name", "description", "logo_url", "created_at"]


class BeachSerializer(serializers.ModelSerializer):
    class Meta:
        model = Beach
        fields = VENUE_FIELDS


class PubSerializer(serializers.ModelSerializer):
    class Meta:
        model = Pub
        fields = VENUE_FIELDS


class LoungeSerializer(serializers.ModelSerializer):
    class Meta:
        model = Lounge
        fields = VENUE_FIELDS


class RestaurantSerializer(serializers.ModelSerializer):
    class Meta:
        model = Restaurant
        fields = VENUE_FIELDS + ["cuisine"]


class ArcadeCenterSerializer(serializers.ModelSerializer):
    class Meta:
        model = ArcadeCenter
        fields = VENUE_FIELDS


class LiveShowSerializer(serializers.ModelSerializer):
    class Meta:
        model = LiveShow
        fields = [
            "id",
            "title",
            "performer_name",
            "venue_name",
            "description",
            "show_date",
            "ticket_price",
            "image_url",
            "is_active",
            "is_featured",
            "created_at",
        ]


class FormBooleanField(serializers.BooleanField):
    """A flag left out of a multipart form keeps its default instead of turning False."""

    default_empty_html = empty


class ClubWriteSerializer(serializers.Serializer):
    """Multipart club form with an optional ``logo`` upload."""

    name = serializers.CharField(allow_blank=True, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    logo = serializers.FileField(required=False, allow_empty_file=False)

    def command(self) -> ClubCommand:
        data = self.validated_data
        return ClubCommand(name=data["name"], description=data["description"])

    def image(self):
        return self.validated_data.get("logo")


class VenueWriteSerializer(serializers.Serializer):
    """Multipart venue form with an optional ``image`` upload."""

    name = serializers.CharField(allow_blank=True, max_length=255)
    location = serializers.CharField(allow_blank=True, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    phone = serializers.CharField(required=False, allow_blank=True, max_length=50, default="")
    opening_hours = serializers.CharField(
        required=False, allow_blank=True, max_length=255, default=""
    )
    rating = serializers.DecimalField(
        max_digits=3, decimal_places=2, required=False, allow_null=True, default=None
    )
    is_active = FormBooleanField(required=False, default=True)
    is_featured = FormBooleanField(required=False, default=False)
    image = serializers.FileField(required=False, allow_empty_file=False)

    command_class = VenueCommand

    def command_fields(self) -> dict:
        data = self.validated_data
        return {
            "name": data["name"],
            "location": data["location"],
            "description": data["description"],
            "phone": data["phone"],
            "opening_hours": data["opening_hours"],
            "rating": data["rating"],
            "is_active": data["is_active"],
            "is_featured": data["is_featured"],
        }

    def command(self) -> VenueCommand:
        return self.command_class(**self.command_fields())

    def image(self):
        return self.validated_data.get("image")


class RestaurantWriteSerializer(VenueWriteSerializer):
    cuisine = serializers.CharField(required=False, allow_blank=True, max_length=100, default="")

    command_class = RestaurantCommand

    def command_fields(self) -> dict:
        return {**super().command_fields(), "cuisine": self.validated_data["cuisine"]}


class LiveShowWriteSerializer(serializers.Serializer):
    """Multipart live show form with an optional ``image`` upload."""

    title = serializers.CharField(allow_blank=True, max_length=255)
    performer_name = serializers.CharField(allow_blank=True, max_length=255)
    venue_name = serializers.CharField(required=False, allow_blank=True, max_length=255, default="")
    description = serializers.CharField(required=False, allow_blank=True, default="")
    show_date = serializers.DateTimeField(required=False, allow_null=True, default=None)
    ticket_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False, allow_null=True, default=None
    )
    is_active = FormBooleanField(required=False, default=True)
    is_featured = FormBooleanField(required=False, default=False)
    image = serializers.FileField(required=False, allow_empty_file=False)

    def command(self) -> LiveShowCommand:
        data = self.validated_data
        return LiveShowCommand(
            title=data["title"],
            performer_name=data["performer_name"],
            venue_name=data["venue_name"],
            description=data["description"],
            show_date=data["show_date"],
            ticket_price=data["ticket_price"],
            is_active=data["is_active"],
            is_featured=data["is_featured"],
        )

    def image(self):
        return self.validated_data.get("image")
