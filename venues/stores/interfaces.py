"""Store interfaces (repository pattern) for club, venue and live show writes."""

from abc import ABC, abstractmethod
from typing import Any

from shared.domain import EntityId
from venues.domain import ListingCommand


class ListingStore(ABC):
    """Writes for one registered club, venue or live show table.

    Rows come back as the storage layer holds them; handlers render them
    with the entity's registered serializer.
    """

    @abstractmethod
    def current_image(self, listing_id: EntityId) -> str | None:
        """Return the row's image URL.

        Raises:
            NotFoundError: If the row does not exist.
        """
        ...

    @abstractmethod
    def create_listing(self, command: ListingCommand, image_url: str | None) -> Any:
        ...

    @abstractmethod
    def update_listing(
        self, listing_id: EntityId, command: ListingCommand, image_url: str | None
    ) -> Any | None:
        """Overwrite one row; None if it does not exist."""
        ...

    @abstractmethod
    def delete_listing(self, listing_id: EntityId) -> bool:
        ...
