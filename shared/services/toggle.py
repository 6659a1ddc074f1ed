"""Single boolean field flip shared by every active/featured switch."""

import logging

from shared.cache import QueryInvalidator
from shared.domain import ToggleCommand
from shared.domain.errors import DomainError
from shared.notifications import Notifier
from shared.stores.interfaces import FlagStore

logger = logging.getLogger(__name__)

FIELD_LABELS = {
    "is_active": "active status",
    "is_featured": "featured status",
    "is_premium": "premium status",
    "is_organizer": "organizer status",
}


def field_label(field: str) -> str:
    return FIELD_LABELS.get(field, field.replace("_", " "))


class ToggleMutation:
    """Writes ``not observed`` and invalidates every list showing the entity."""

    def __init__(self, store: FlagStore, invalidator: QueryInvalidator, notifier: Notifier) -> None:
        self._store = store
        self._invalidator = invalidator
        self._notifier = notifier

    def apply(self, command: ToggleCommand) -> bool:
        what = field_label(command.field)
        try:
            self._store.set_flag(command.entity_id, command.field, command.new_value)
        except DomainError:
            self._notifier.error(f"Failed to update {what}")
            raise
        self._invalidator.invalidate_entity(command.entity_type)
        logger.info(
            "Set %s.%s=%s for %s",
            command.entity_type.value,
            command.field,
            command.new_value,
            command.entity_id,
        )
        self._notifier.success(f"{command.label.capitalize()} {what} updated successfully")
        return command.new_value
