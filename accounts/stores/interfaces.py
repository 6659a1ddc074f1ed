"""Store interfaces (repository pattern) for profiles and loyalty points."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from accounts.domain import MembershipTier, PointsBalance, TransactionType
from shared.domain import EntityId


class ProfileStore(ABC):
    @abstractmethod
    def update_profile(self, user_id: EntityId, changes: dict) -> bool:
        """Write ``changes`` to one profile; False if it does not exist."""
        ...


class PointsStore(ABC):
    """Interface for the loyalty ledger and balances."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        ...

    @abstractmethod
    def profile_exists(self, user_id: EntityId) -> bool:
        ...

    @abstractmethod
    def get_balance(self, user_id: EntityId) -> PointsBalance:
        """Return the user's balance, locked for update; zeros when none exists yet."""
        ...

    @abstractmethod
    def save_balance(self, user_id: EntityId, balance: PointsBalance) -> None:
        ...

    @abstractmethod
    def record_transaction(
        self,
        user_id: EntityId,
        points: int,
        transaction_type: TransactionType,
        description: str,
    ) -> None:
        ...

    @abstractmethod
    def list_tiers(self) -> list[MembershipTier]:
        """Return every membership tier ordered by min_points."""
        ...
