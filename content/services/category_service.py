"""Create and edit browse categories."""

import logging

from content.domain import CategoryCommand, missing_defaults
from content.stores.interfaces import CategoryStore
from shared.cache import QueryInvalidator
from shared.domain import EntityType
from shared.domain.errors import DomainError, NotFoundError, ValidationError
from shared.notifications import Notifier
from shared.services.entity_service import parse_entity_id

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(
        self, store: CategoryStore, invalidator: QueryInvalidator, notifier: Notifier
    ) -> None:
        self._store = store
        self._invalidator = invalidator
        self._notifier = notifier

    def _failed(self, fallback: str, err: DomainError) -> None:
        self._notifier.error(err.message if isinstance(err, ValidationError) else fallback)

    def create(self, command: CategoryCommand) -> str:
        try:
            category_id = self._store.create_category(command)
        except DomainError as err:
            self._failed("Failed to save category", err)
            raise
        self._invalidator.invalidate_entity(EntityType.CATEGORY)
        logger.info("Created category %s (%s)", command.name, category_id)
        self._notifier.success("Category created")
        return str(category_id)

    def update(self, category_id: str, command: CategoryCommand) -> str:
        parsed = parse_entity_id(category_id, "category")
        try:
            if not self._store.update_category(parsed, command):
                raise NotFoundError("category", category_id)
        except DomainError as err:
            self._failed("Failed to save category", err)
            raise
        self._invalidator.invalidate_entity(EntityType.CATEGORY)
        logger.info("Updated category %s", parsed)
        self._notifier.success("Category updated")
        return str(parsed)

    def add_defaults(self) -> int:
        """Insert the default categories whose names are not taken yet."""
        try:
            to_insert = missing_defaults(self._store.category_names())
            count = self._store.create_categories(to_insert) if to_insert else 0
        except DomainError as err:
            self._failed("Failed to add default categories", err)
            raise
        if count == 0:
            self._notifier.success("Default categories already exist")
            return 0
        self._invalidator.invalidate_entity(EntityType.CATEGORY)
        logger.info("Added %d default categories", count)
        self._notifier.success(f"Added {count} default categories")
        return count
