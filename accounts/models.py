"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.db import models


class Profile(models.Model):
    """Persistence model for an app user's profile."""

    ROLE_CHOICES = [
        ("admin", "Admin"),
        ("user", "User"),
        ("staff", "Staff"),
        ("blogger", "Blogger"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="profile",
    )
    email = models.EmailField()
    full_name = models.CharField(max_length=255, blank=True, null=True)
    username = models.CharField(max_length=150, blank=True, null=True)
    phone = models.CharField(max_length=50, blank=True, null=True)
    avatar_url = models.URLField(max_length=500, blank=True, null=True)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default="user")
    is_premium = models.BooleanField(default=False)
    is_organizer = models.BooleanField(default=False)
    is_approved = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.full_name or self.email


class UserPoints(models.Model):
    """Loyalty balance, one row per profile."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(Profile, on_delete=models.CASCADE, related_name="points")
    total_points = models.IntegerField(default=0)
    available_points = models.IntegerField(default=0)
    used_points = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-total_points"]
        verbose_name_plural = "user points"

    def __str__(self) -> str:
        return f"{self.user} - {self.total_points}"


class PointTransaction(models.Model):
    TYPE_CHOICES = [
        ("earned", "Earned"),
        ("redeemed", "Redeemed"),
        ("admin_credit", "Admin credit"),
        ("admin_debit", "Admin debit"),
        ("bonus", "Bonus"),
        ("adjustment", "Adjustment"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name="point_transactions")
    points = models.IntegerField()
    transaction_type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    description = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.transaction_type} {self.points:+d}"


class MembershipTier(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    min_points = models.IntegerField(default=0)
    max_points = models.IntegerField(blank=True, null=True)
    benefits = models.JSONField(default=list, blank=True)
    color = models.CharField(max_length=20, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["min_points"]

    def __str__(self) -> str:
        return self.name
