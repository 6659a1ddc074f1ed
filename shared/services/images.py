"""Image uploads that go with a row write.

A new image is stored before its row is written and discarded again if the
write fails. The old image is removed only after the row points at the new
one.
"""

import logging
from dataclasses import dataclass

from shared.domain.errors import StoreError
from shared.notifications import Notifier
from shared.storage import ObjectStorage, StoredFile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageSlot:
    """The column and bucket folder holding one kind of row's image."""

    column: str
    bucket: str
    folder: str = ""
    noun: str = "image"


class ImageUploads:
    """Upload, discard and replace images in one bucket folder."""

    def __init__(
        self,
        storage: ObjectStorage,
        bucket: str,
        notifier: Notifier,
        folder: str = "",
        noun: str = "image",
    ) -> None:
        self._storage = storage
        self._bucket = bucket
        self._notifier = notifier
        self._folder = folder
        self._noun = noun

    @classmethod
    def for_slot(cls, storage: ObjectStorage, slot: ImageSlot, notifier: Notifier) -> "ImageUploads":
        return cls(storage, slot.bucket, notifier, slot.folder, slot.noun)

    def upload(self, file) -> StoredFile | None:
        if file is None:
            return None
        return self._storage.store(file, self._bucket, self._folder)

    def discard(self, stored: StoredFile | None) -> None:
        """Remove a file whose row was never written; failures are only logged."""
        if stored is None:
            return
        try:
            self._storage.delete(self._bucket, stored.path)
        except StoreError:
            logger.warning("Could not remove orphaned %s %s", self._noun, stored.path)

    def remove(self, url: str | None) -> None:
        path = self._storage.path_from_url(self._bucket, url or "")
        if path is None:
            return
        try:
            self._storage.delete(self._bucket, path)
        except StoreError:
            logger.warning("Could not remove %s %s", self._noun, path)
            self._notifier.info(f"The previous {self._noun} could not be removed")

    def replace(self, stored: StoredFile | None, old_url: str | None) -> None:
        """Remove ``old_url`` once ``stored`` has taken its place."""
        if stored is not None and old_url:
            self.remove(old_url)
