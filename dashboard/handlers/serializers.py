from rest_framework import serializers

from events.handlers.serializers import EventStatsSerializer


class UserCountsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    premium = serializers.IntegerField()
    organizers = serializers.IntegerField()
    admins = serializers.IntegerField()


class BookingCountsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    confirmed = serializers.IntegerField()
    pending = serializers.IntegerField()
    cancelled = serializers.IntegerField()


class MonthPointSerializer(serializers.Serializer):
    month = serializers.DateField()
    label = serializers.CharField()
    revenue = serializers.DecimalField(max_digits=12, decimal_places=2)
    new_users = serializers.IntegerField()
    total_users = serializers.IntegerField()
    events = serializers.IntegerField()


class RecentEventSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    title = serializers.CharField()
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField()
    location = serializers.CharField()
    club_name = serializers.CharField(allow_null=True)


class RecentBookingSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    user_name = serializers.CharField(allow_null=True)
    event_title = serializers.CharField()
    status = serializers.CharField()
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, allow_null=True)
    booking_date = serializers.DateTimeField()
    created_at = serializers.DateTimeField()


class DashboardSerializer(serializers.Serializer):
    users = UserCountsSerializer()
    events = EventStatsSerializer()
    bookings = BookingCountsSerializer()
    revenue = serializers.DecimalField(max_digits=14, decimal_places=2)
    clubs = serializers.IntegerField()
    feeds = serializers.IntegerField()
    concierge_requests = serializers.IntegerField()
    active_subscriptions = serializers.IntegerField()
    months = MonthPointSerializer(many=True)
    status_distribution = serializers.SerializerMethodField()
    recent_events = RecentEventSerializer(many=True)
    recent_bookings = RecentBookingSerializer(many=True)

    def get_status_distribution(self, obj) -> list[dict]:
        return [
            {"status": status, "label": status.capitalize(), "count": count}
            for status, count in obj.status_distribution
        ]
