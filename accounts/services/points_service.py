"""Loyalty points - admin adjustments and tier lookup."""

import logging

from accounts.domain import MembershipTier, PointsAdjustment, PointsBalance, tier_for
from accounts.domain.errors import UserNotFoundError
from accounts.stores.interfaces import PointsStore
from shared.cache import QueryInvalidator
from shared.domain import EntityType
from shared.domain.errors import DomainError
from shared.notifications import Notifier

logger = logging.getLogger(__name__)


class PointsService:
    def __init__(self, store: PointsStore, invalidator: QueryInvalidator, notifier: Notifier) -> None:
        self._store = store
        self._invalidator = invalidator
        self._notifier = notifier

    def adjust(self, adjustment: PointsAdjustment) -> PointsBalance:
        """Record the transaction and move the balance in one transaction.

        Raises:
            UserNotFoundError: If the user has no profile.
            StoreError: If either write fails; neither is kept.
        """
        user_id = adjustment.user_id
        try:
            with self._store.atomic():
                if not self._store.profile_exists(user_id):
                    raise UserNotFoundError(str(user_id))
                self._store.record_transaction(
                    user_id,
                    adjustment.points,
                    adjustment.transaction_type,
                    adjustment.resolved_description,
                )
                balance = self._store.get_balance(user_id).apply(adjustment.points)
                self._store.save_balance(user_id, balance)
        except DomainError:
            self._notifier.error("Failed to update points")
            raise
        self._invalidator.invalidate_entity(EntityType.POINT_TRANSACTION)
        self._invalidator.invalidate_entity(EntityType.USER_POINTS)
        logger.info(
            "Adjusted points for %s by %+d (%s)",
            user_id,
            adjustment.points,
            adjustment.transaction_type.value,
        )
        verb = "added" if adjustment.points > 0 else "deducted"
        self._notifier.success(f"Successfully {verb} {abs(adjustment.points)} points")
        return balance

    def tiers(self) -> list[MembershipTier]:
        return self._store.list_tiers()

    def tier_for_points(self, points: int) -> str:
        return tier_for(points, self._store.list_tiers())
