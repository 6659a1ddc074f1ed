"""Serializers for transforming domain models to API responses and back."""

from django.utils import timezone
from rest_framework import serializers

from events.domain import DraftZone, EventCommand, ZoneId
from events.domain.drafts import new_local_id
from venues.models import Club


class ZoneSerializer(serializers.Serializer):
    """Serializer for Zone domain model."""

    id = serializers.SerializerMethodField()
    event_id = serializers.SerializerMethodField()
    name = serializers.CharField()
    price = serializers.SerializerMethodField()
    capacity = serializers.SerializerMethodField()
    description = serializers.CharField(allow_null=True)
    created_at = serializers.DateTimeField()

    def get_id(self, obj) -> str:
        return str(obj.id)

    def get_event_id(self, obj) -> str:
        return str(obj.event_id)

    def get_price(self, obj) -> str:
        return str(obj.price)

    def get_capacity(self, obj) -> int:
        return obj.capacity.value


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.SerializerMethodField()
    title = serializers.CharField()
    description = serializers.CharField()
    location = serializers.CharField()
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField()
    status = serializers.SerializerMethodField()
    club_id = serializers.UUIDField(allow_null=True)
    club_name = serializers.CharField(allow_null=True)
    cover_image = serializers.CharField(allow_null=True)
    is_featured = serializers.BooleanField()
    total_capacity = serializers.IntegerField()
    zones = ZoneSerializer(many=True)
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()

    def get_id(self, obj) -> str:
        return str(obj.id)

    def get_status(self, obj) -> str:
        return obj.status(self.context.get("now") or timezone.now()).value


class EventStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    upcoming = serializers.IntegerField()
    ongoing = serializers.IntegerField()
    past = serializers.IntegerField()


class ClubOptionSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()


class DraftZoneSerializer(serializers.Serializer):
    """One zone editor row, exactly as typed.

    Name, price and capacity stay text here; the reconciler decides whether
    they are valid.
    """

    local_id = serializers.CharField(required=False, allow_blank=False)
    db_id = serializers.UUIDField(required=False, allow_null=True, default=None)
    is_existing = serializers.BooleanField(required=False, default=False)
    name = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False, default="")
    price = serializers.CharField(required=False, allow_blank=True, default="")
    capacity = serializers.CharField(required=False, allow_blank=True, default="")
    description = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default=""
    )

    def to_representation(self, instance: DraftZone) -> dict:
        return {
            "local_id": instance.local_id,
            "db_id": str(instance.db_id) if instance.db_id is not None else None,
            "is_existing": instance.is_existing,
            "name": instance.name,
            "price": instance.price,
            "capacity": instance.capacity,
            "description": instance.description,
        }


def to_draft(data: dict) -> DraftZone:
    db_id = data.get("db_id")
    return DraftZone(
        local_id=data.get("local_id") or new_local_id(),
        name=data.get("name", ""),
        price=data.get("price", ""),
        capacity=data.get("capacity", ""),
        description=data.get("description") or "",
        db_id=ZoneId(db_id) if db_id is not None else None,
        is_existing=data.get("is_existing", False),
    )


class ZoneEditSerializer(serializers.Serializer):
    zones = DraftZoneSerializer(many=True)

    def drafts(self) -> list[DraftZone]:
        return [to_draft(row) for row in self.validated_data["zones"]]


class EventWriteSerializer(serializers.Serializer):
    """Event form input. A missing end date means the event ends when it starts.

    Sent as multipart when a cover image is attached; zone rows then use
    ``zones[0]name`` style keys.
    """

    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    location = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField(required=False, allow_null=True, default=None)
    club = serializers.PrimaryKeyRelatedField(queryset=Club.objects.all())
    cover_image = serializers.FileField(required=False, allow_empty_file=False)
    zones = DraftZoneSerializer(many=True, required=False)

    def command(self) -> EventCommand:
        data = self.validated_data
        return EventCommand(
            title=data["title"].strip(),
            description=data["description"],
            location=data["location"].strip(),
            start_date=data["start_date"],
            end_date=data["end_date"] or data["start_date"],
            club_id=data["club"].pk,
        )

    def drafts(self) -> list[DraftZone] | None:
        rows = self.validated_data.get("zones")
        if rows is None:
            return None
        return [to_draft(row) for row in rows]

    def cover(self):
        return self.validated_data.get("cover_image")
