"""Django ORM models (persistence layer)."""

import uuid

from django.db import models


class Booking(models.Model):
    """A user's tickets in one zone of one event.

    Deleting the event removes its bookings; deleting a booked zone is refused.
    """

    STATUS_CHOICES = [
        ("pending", "Pending"),
        ("confirmed", "Confirmed"),
        ("cancelled", "Cancelled"),
        ("completed", "Completed"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey("accounts.Profile", on_delete=models.CASCADE, related_name="bookings")
    event = models.ForeignKey("events.Event", on_delete=models.CASCADE, related_name="bookings")
    zone = models.ForeignKey("events.Zone", on_delete=models.RESTRICT, related_name="bookings")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="pending")
    quantity = models.PositiveIntegerField(default=1)
    amount = models.DecimalField(max_digits=10, decimal_places=2, blank=True, null=True)
    booking_date = models.DateTimeField()
    event_date = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"]),
            models.Index(fields=["-created_at"]),
        ]

    def __str__(self) -> str:
        return f"{self.user} - {self.event} ({self.status})"
