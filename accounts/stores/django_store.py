"""Django ORM implementation of the ProfileStore and PointsStore."""

from contextlib import AbstractContextManager

from django.db import transaction

from accounts import models as orm
from accounts.domain import MembershipTier, PointsBalance, TransactionType
from accounts.stores.interfaces import PointsStore, ProfileStore
from shared.domain import EntityId
from shared.stores.django_store import translate_database_errors


class DjangoProfileStore(ProfileStore):
    def update_profile(self, user_id: EntityId, changes: dict) -> bool:
        with translate_database_errors("update user"):
            profile = orm.Profile.objects.filter(pk=user_id.value).first()
            if profile is None:
                return False
            for field, value in changes.items():
                setattr(profile, field, value)
            profile.save(update_fields=[*changes, "updated_at"])
        return True


class DjangoPointsStore(PointsStore):
    def atomic(self) -> AbstractContextManager:
        return transaction.atomic()

    def profile_exists(self, user_id: EntityId) -> bool:
        with translate_database_errors("load user"):
            return orm.Profile.objects.filter(pk=user_id.value).exists()

    def get_balance(self, user_id: EntityId) -> PointsBalance:
        with translate_database_errors("load user points"):
            row = orm.UserPoints.objects.select_for_update().filter(user_id=user_id.value).first()
        if row is None:
            return PointsBalance()
        return PointsBalance(
            total=row.total_points,
            available=row.available_points,
            used=row.used_points,
        )

    def save_balance(self, user_id: EntityId, balance: PointsBalance) -> None:
        with translate_database_errors("update user points"):
            orm.UserPoints.objects.update_or_create(
                user_id=user_id.value,
                defaults={
                    "total_points": balance.total,
                    "available_points": balance.available,
                    "used_points": balance.used,
                },
            )

    def record_transaction(
        self,
        user_id: EntityId,
        points: int,
        transaction_type: TransactionType,
        description: str,
    ) -> None:
        with translate_database_errors("record point transaction"):
            orm.PointTransaction.objects.create(
                user_id=user_id.value,
                points=points,
                transaction_type=transaction_type.value,
                description=description,
            )

    def list_tiers(self) -> list[MembershipTier]:
        with translate_database_errors("load membership tiers"):
            rows = orm.MembershipTier.objects.order_by("min_points", "pk")
            return [
                MembershipTier(name=row.name, min_points=row.min_points, max_points=row.max_points)
                for row in rows
            ]
