"""Store interfaces (repository pattern) for categories and podcasts."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from uuid import UUID

from content.domain import CategoryCommand, Podcast, PodcastCommand
from shared.domain import EntityId


class CategoryStore(ABC):
    @abstractmethod
    def create_category(self, command: CategoryCommand) -> UUID:
        ...

    @abstractmethod
    def update_category(self, category_id: EntityId, command: CategoryCommand) -> bool:
        """Overwrite one category; False if it does not exist."""
        ...

    @abstractmethod
    def category_names(self) -> set[str]:
        ...

    @abstractmethod
    def create_categories(self, commands: Sequence[CategoryCommand]) -> int:
        """Insert several categories in one statement."""
        ...


class PodcastStore(ABC):
    @abstractmethod
    def get_podcast(self, podcast_id: EntityId) -> Podcast | None:
        ...

    @abstractmethod
    def create_podcast(self, command: PodcastCommand, cover_image: str | None) -> Podcast:
        ...

    @abstractmethod
    def update_podcast(
        self, podcast_id: EntityId, command: PodcastCommand, cover_image: str | None
    ) -> Podcast | None:
        ...

    @abstractmethod
    def delete_podcast(self, podcast_id: EntityId) -> bool:
        ...
