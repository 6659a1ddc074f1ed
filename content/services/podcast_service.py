"""Podcasts and their cover images."""

import logging

from content.domain import Podcast, PodcastCommand
from content.stores.interfaces import PodcastStore
from shared.cache import QueryInvalidator
from shared.domain import EntityType
from shared.domain.errors import DomainError, NotFoundError, ValidationError
from shared.notifications import Notifier
from shared.services.entity_service import parse_entity_id
from shared.services.images import ImageUploads
from shared.storage import PODCAST_COVERS, ObjectStorage

logger = logging.getLogger(__name__)


class PodcastService:
    def __init__(
        self,
        store: PodcastStore,
        storage: ObjectStorage,
        invalidator: QueryInvalidator,
        notifier: Notifier,
    ) -> None:
        self._store = store
        self._covers = ImageUploads(storage, PODCAST_COVERS, notifier, noun="cover image")
        self._invalidator = invalidator
        self._notifier = notifier

    def _failed(self, action: str, err: DomainError) -> None:
        if isinstance(err, ValidationError):
            self._notifier.error(err.message)
        else:
            self._notifier.error(f"Failed to {action} podcast")

    def create(self, command: PodcastCommand, cover=None) -> Podcast:
        stored = None
        try:
            stored = self._covers.upload(cover)
            podcast = self._store.create_podcast(command, stored.url if stored else None)
        except DomainError as err:
            self._covers.discard(stored)
            self._failed("create", err)
            raise
        self._invalidator.invalidate_entity(EntityType.PODCAST)
        logger.info("Created podcast %s", podcast.id)
        self._notifier.success("Podcast created successfully!")
        return podcast

    def update(self, podcast_id: str, command: PodcastCommand, cover=None) -> Podcast:
        """Overwrite a podcast, replacing its cover when a new one is given.

        Raises:
            InvalidIdError: If podcast_id is not a valid UUID.
            NotFoundError: If the podcast does not exist.
            UploadRejectedError: If the cover is too large or not an image.
        """
        parsed = parse_entity_id(podcast_id, "podcast")
        stored = None
        try:
            current = self._store.get_podcast(parsed)
            if current is None:
                raise NotFoundError("podcast", podcast_id)
            stored = self._covers.upload(cover)
            cover_url = stored.url if stored else current.cover_image
            podcast = self._store.update_podcast(parsed, command, cover_url)
            if podcast is None:
                raise NotFoundError("podcast", podcast_id)
        except DomainError as err:
            self._covers.discard(stored)
            self._failed("update", err)
            raise
        self._covers.replace(stored, current.cover_image)
        self._invalidator.invalidate_entity(EntityType.PODCAST)
        logger.info("Updated podcast %s", parsed)
        self._notifier.success("Podcast updated successfully!")
        return podcast

    def delete(self, podcast_id: str) -> None:
        parsed = parse_entity_id(podcast_id, "podcast")
        try:
            current = self._store.get_podcast(parsed)
            if current is None or not self._store.delete_podcast(parsed):
                raise NotFoundError("podcast", podcast_id)
        except DomainError as err:
            self._failed("delete", err)
            raise
        self._covers.remove(current.cover_image)
        self._invalidator.invalidate_entity(EntityType.PODCAST)
        logger.info("Deleted podcast %s", parsed)
        self._notifier.success("Podcast deleted successfully!")
