"""Django ORM models (persistence layer) for clubs and venue listings."""

import uuid

from django.db import models


class Club(models.Model):
    """Persistence model for clubs that own events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    logo_url = models.URLField(max_length=500, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.name


class Venue(models.Model):
    """Columns shared by every bookable venue listing."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    location = models.CharField(max_length=255, blank=True)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    phone = models.CharField(max_length=50, blank=True)
    opening_hours = models.CharField(max_length=255, blank=True)
    rating = models.DecimalField(max_digits=3, decimal_places=2, null=True, blank=True)
    is_active = models.BooleanField(default=True)
    is_featured = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.name


class Beach(Venue):
    class Meta(Venue.Meta):
        verbose_name_plural = "beaches"


class Pub(Venue):
    pass


class Lounge(Venue):
    pass


class Restaurant(Venue):
    cuisine = models.CharField(max_length=100, blank=True)


class ArcadeCenter(Venue):
    pass


class LiveShow(models.Model):
    """Persistence model for live show listings."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    performer_name = models.CharField(max_length=255)
    venue_name = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)
    show_date = models.DateTimeField(null=True, blank=True)
    ticket_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    is_active = models.BooleanField(default=True)
    is_featured = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.title} - {self.performer_name}"
