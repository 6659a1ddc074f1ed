"""Generic list/delete/toggle service for registered entities."""

import logging

from shared.cache import QueryInvalidator
from shared.domain import EntityId, ListQuery, Page, ToggleCommand
from shared.domain.errors import DomainError, InvalidIdError, InvalidStatusError
from shared.notifications import Notifier
from shared.registry import EntityDefinition
from shared.services.toggle import ToggleMutation
from shared.stores.interfaces import EntityStore

logger = logging.getLogger(__name__)


def parse_entity_id(value: str, label: str) -> EntityId:
    """Parse a UUID string, raising InvalidIdError naming the entity."""
    try:
        return EntityId.from_string(value)
    except (ValueError, TypeError, AttributeError):
        raise InvalidIdError(label) from None


class EntityService:
    """Service for the operations every list screen shares."""

    def __init__(
        self,
        definition: EntityDefinition,
        store: EntityStore,
        invalidator: QueryInvalidator,
        notifier: Notifier,
    ) -> None:
        self._definition = definition
        self._store = store
        self._invalidator = invalidator
        self._notifier = notifier

    def list(self, query: ListQuery) -> Page:
        return self._store.list_page(query)

    def delete(self, entity_id: str) -> None:
        label = self._definition.label
        parsed = parse_entity_id(entity_id, label)
        try:
            self._store.delete(parsed)
        except DomainError:
            self._notifier.error(f"Failed to delete {label}")
            raise
        self._invalidator.invalidate_entity(self._definition.entity_type)
        logger.info("Deleted %s %s", label, parsed)
        self._notifier.success(f"{label.capitalize()} deleted successfully")

    def change_status(self, entity_id: str, status: str) -> str:
        """Move one row to another workflow status.

        Raises:
            InvalidStatusError: If the entity has no such status.
            NotFoundError: If the row does not exist.
        """
        label = self._definition.label
        allowed = self._definition.statuses
        if status not in allowed:
            raise InvalidStatusError(status, allowed)
        parsed = parse_entity_id(entity_id, label)
        try:
            self._store.set_status(parsed, status)
        except DomainError:
            self._notifier.error(f"Failed to update {label} status")
            raise
        self._invalidator.invalidate_entity(self._definition.entity_type)
        logger.info("Set %s %s status to %s", label, parsed, status)
        self._notifier.success(f"{label.capitalize()} status updated successfully")
        return status

    def toggle(self, entity_id: str, field: str, observed: bool) -> bool:
        command = ToggleCommand(
            entity_type=self._definition.entity_type,
            label=self._definition.label,
            entity_id=parse_entity_id(entity_id, self._definition.label),
            field=field,
            observed=observed,
        )
        return ToggleMutation(self._store, self._invalidator, self._notifier).apply(command)
