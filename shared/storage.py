"""Object storage for cover images, logos and podcast art.

Files live under ``<bucket>/<folder>/<millis>-<random>.<ext>`` in a Django
storage backend; callers keep the public URL and, for replacement flows,
derive the bucket-relative path back from it.
"""

import logging
import mimetypes
import os
import secrets
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass

from django.conf import settings
from django.core.files.storage import Storage, default_storage

from shared.domain.errors import StoreError, UploadRejectedError

logger = logging.getLogger(__name__)

EVENT_IMAGES = "event-images"
CLUB_LOGOS = "club-logos"
VENUE_IMAGES = "venue-images"
PODCAST_COVERS = "podcast-cover-images"


@dataclass(frozen=True)
class StoredFile:
    url: str
    path: str


class ObjectStorage(ABC):
    """Interface for storing uploaded files and resolving public URLs."""

    @abstractmethod
    def store(self, file, bucket: str, folder: str = "") -> StoredFile:
        """Persist ``file`` and return its public URL and bucket-relative path."""
        ...

    @abstractmethod
    def delete(self, bucket: str, path: str) -> bool:
        """Remove a stored file. Returns False when nothing was there."""
        ...

    @abstractmethod
    def path_from_url(self, bucket: str, url: str) -> str | None:
        """Recover the bucket-relative path of a URL returned by ``store``."""
        ...


class DjangoObjectStorage(ObjectStorage):
    """ObjectStorage backed by a Django ``Storage`` (default_storage by default)."""

    def __init__(
        self,
        storage: Storage | None = None,
        max_size_mb: int | None = None,
        allowed_types: list[str] | None = None,
    ) -> None:
        self._storage = storage if storage is not None else default_storage
        self._max_size_mb = max_size_mb if max_size_mb is not None else settings.UPLOAD_MAX_SIZE_MB
        self._allowed_types = allowed_types or settings.UPLOAD_ALLOWED_CONTENT_TYPES

    def validate(self, file) -> None:
        if file.size > self._max_size_mb * 1024 * 1024:
            raise UploadRejectedError(f"File size must be less than {self._max_size_mb}MB")
        content_type = getattr(file, "content_type", None)
        if content_type not in self._allowed_types:
            raise UploadRejectedError(f"File type {content_type} is not supported")

    def _file_name(self, file) -> str:
        ext = os.path.splitext(file.name or "")[1].lstrip(".").lower()
        if not ext:
            guessed = mimetypes.guess_extension(getattr(file, "content_type", "") or "")
            ext = (guessed or ".bin").lstrip(".")
        return f"{int(time.time() * 1000)}-{secrets.token_hex(6)}.{ext}"

    def store(self, file, bucket: str, folder: str = "") -> StoredFile:
        self.validate(file)
        relative = "/".join(part for part in (folder.strip("/"), self._file_name(file)) if part)
        try:
            saved = self._storage.save(f"{bucket}/{relative}", file)
        except OSError as err:
            logger.exception("Upload to bucket %s failed", bucket)
            raise StoreError("upload file") from err
        logger.info("Stored %s in bucket %s", relative, bucket)
        return StoredFile(url=self._storage.url(saved), path=saved[len(bucket) + 1 :])

    def delete(self, bucket: str, path: str) -> bool:
        full_path = f"{bucket}/{path}"
        try:
            if not self._storage.exists(full_path):
                return False
            self._storage.delete(full_path)
        except OSError as err:
            logger.exception("Deleting %s failed", full_path)
            raise StoreError("delete file") from err
        logger.info("Deleted %s", full_path)
        return True

    def path_from_url(self, bucket: str, url: str) -> str | None:
        marker = f"/{bucket}/"
        if not url or marker not in url:
            return None
        return url.split(marker, 1)[1] or None
