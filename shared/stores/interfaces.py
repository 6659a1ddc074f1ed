"""Store interfaces (repository pattern) shared by every list view.

Stores must be swappable and raise domain errors, never ORM exceptions.
"""

from abc import ABC, abstractmethod
from typing import Any

from shared.domain import EntityId, ListQuery, Page


class FlagStore(ABC):
    """Interface for single boolean field writes."""

    @abstractmethod
    def set_flag(self, entity_id: EntityId, field: str, value: bool) -> None:
        """Store ``value`` in ``field`` of one row.

        Raises:
            InvalidToggleFieldError: If ``field`` is not a toggleable flag.
            NotFoundError: If no row has ``entity_id``.
        """
        ...


class StatusStore(ABC):
    """Interface for workflow status writes."""

    @abstractmethod
    def set_status(self, entity_id: EntityId, status: str) -> None:
        """Store ``status`` on one row.

        Raises:
            NotFoundError: If no row has ``entity_id``.
        """
        ...


class EntityStore(FlagStore, StatusStore):
    """Interface for the generic list/delete/toggle/status operations."""

    @abstractmethod
    def list_page(self, query: ListQuery) -> Page[Any]:
        """Return one page of rows matching the query, plus the filtered count."""
        ...

    @abstractmethod
    def delete(self, entity_id: EntityId) -> None:
        """Delete one row.

        Raises:
            NotFoundError: If no row has ``entity_id``.
        """
        ...
