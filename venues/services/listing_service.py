"""Create, edit and delete clubs, venue listings and live shows.

Each kind keeps one image, a club logo or a listing photo, managed
through ImageUploads.
"""

import logging

from shared.cache import QueryInvalidator
from shared.domain.errors import DomainError, NotFoundError, ValidationError
from shared.notifications import Notifier
from shared.registry import EntityDefinition
from shared.services.entity_service import parse_entity_id
from shared.services.images import ImageSlot, ImageUploads
from shared.storage import ObjectStorage
from venues.domain import ListingCommand
from venues.stores.interfaces import ListingStore

logger = logging.getLogger(__name__)


class ListingService:
    def __init__(
        self,
        definition: EntityDefinition,
        slot: ImageSlot,
        store: ListingStore,
        storage: ObjectStorage,
        invalidator: QueryInvalidator,
        notifier: Notifier,
    ) -> None:
        self._definition = definition
        self._store = store
        self._images = ImageUploads.for_slot(storage, slot, notifier)
        self._invalidator = invalidator
        self._notifier = notifier

    @property
    def _label(self) -> str:
        return self._definition.label

    def _failed(self, action: str, err: DomainError) -> None:
        if isinstance(err, ValidationError):
            self._notifier.error(err.message)
        else:
            self._notifier.error(f"Failed to {action} {self._label}")

    def _saved(self, verb: str, listing_id) -> None:
        self._invalidator.invalidate_entity(self._definition.entity_type)
        logger.info("%s %s %s", verb.capitalize(), self._label, listing_id)

    def create(self, command: ListingCommand, image=None):
        stored = None
        try:
            stored = self._images.upload(image)
            row = self._store.create_listing(command, stored.url if stored else None)
        except DomainError as err:
            self._images.discard(stored)
            self._failed("create", err)
            raise
        self._saved("created", row.id)
        self._notifier.success(f"{self._label.capitalize()} created successfully!")
        return row

    def update(self, listing_id: str, command: ListingCommand, image=None):
        """Overwrite one row, replacing its image when a new one is given.

        Raises:
            InvalidIdError: If listing_id is not a valid UUID.
            NotFoundError: If the row does not exist.
            UploadRejectedError: If the image is too large or not an image.
        """
        parsed = parse_entity_id(listing_id, self._label)
        stored = None
        try:
            current = self._store.current_image(parsed)
            stored = self._images.upload(image)
            row = self._store.update_listing(parsed, command, stored.url if stored else current)
            if row is None:
                raise NotFoundError(self._label, listing_id)
        except DomainError as err:
            self._images.discard(stored)
            self._failed("update", err)
            raise
        self._images.replace(stored, current)
        self._saved("updated", parsed)
        self._notifier.success(f"{self._label.capitalize()} updated successfully!")
        return row

    def delete(self, listing_id: str) -> None:
        parsed = parse_entity_id(listing_id, self._label)
        try:
            current = self._store.current_image(parsed)
            if not self._store.delete_listing(parsed):
                raise NotFoundError(self._label, listing_id)
        except DomainError as err:
            self._failed("delete", err)
            raise
        self._images.remove(current)
        self._saved("deleted", parsed)
        self._notifier.success(f"{self._label.capitalize()} deleted successfully")
