from rest_framework import serializers

from bookings.models import Booking


class BookingSerializer(serializers.ModelSerializer):
    user_name = serializers.CharField(source="user.full_name", read_only=True)
    user_email = serializers.CharField(source="user.email", read_only=True)
    event_title = serializers.CharField(source="event.title", read_only=True)
    zone_name = serializers.CharField(source="zone.name", read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "user_id",
            "user_name",
            "user_email",
            "event_id",
            "event_title",
            "zone_id",
            "zone_name",
            "status",
            "quantity",
            "amount",
            "booking_date",
            "event_date",
            "created_at",
        ]
