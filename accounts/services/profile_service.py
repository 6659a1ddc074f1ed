import logging

from accounts.domain import ProfileUpdate
from accounts.domain.errors import UserNotFoundError
from accounts.stores.interfaces import ProfileStore
from shared.cache import QueryInvalidator
from shared.domain import EntityType
from shared.domain.errors import DomainError
from shared.notifications import Notifier
from shared.services.entity_service import parse_entity_id

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, store: ProfileStore, invalidator: QueryInvalidator, notifier: Notifier) -> None:
        self._store = store
        self._invalidator = invalidator
        self._notifier = notifier

    def update(self, user_id: str, update: ProfileUpdate) -> None:
        parsed = parse_entity_id(user_id, "user")
        try:
            if not self._store.update_profile(parsed, update.changes()):
                raise UserNotFoundError(user_id)
        except DomainError:
            self._notifier.error("Failed to update user role")
            raise
        self._invalidator.invalidate_entity(EntityType.PROFILE)
        logger.info("Updated user %s: %s", parsed, sorted(update.changes()))
        self._notifier.success("User role updated successfully")
