"""Django ORM implementation of the CategoryStore and PodcastStore."""

from collections.abc import Sequence
from dataclasses import asdict
from uuid import UUID

from content import models as orm
from content.domain import CategoryCommand, Podcast, PodcastCategory, PodcastCommand, PodcastStatus
from content.stores.interfaces import CategoryStore, PodcastStore
from shared.domain import EntityId
from shared.stores.django_store import translate_database_errors


class DjangoCategoryStore(CategoryStore):
    def create_category(self, command: CategoryCommand) -> UUID:
        with translate_database_errors("create category"):
            return orm.Category.objects.create(**asdict(command)).id

    def update_category(self, category_id: EntityId, command: CategoryCommand) -> bool:
        with translate_database_errors("update category"):
            category = orm.Category.objects.filter(pk=category_id.value).first()
            if category is None:
                return False
            for column, value in asdict(command).items():
                setattr(category, column, value)
            category.save()
        return True

    def category_names(self) -> set[str]:
        with translate_database_errors("load categories"):
            return set(orm.Category.objects.values_list("name", flat=True))

    def create_categories(self, commands: Sequence[CategoryCommand]) -> int:
        with translate_database_errors("add default categories"):
            created = orm.Category.objects.bulk_create(
                [orm.Category(**asdict(command)) for command in commands]
            )
        return len(created)


def podcast_to_domain(podcast: orm.Podcast) -> Podcast:
    return Podcast(
        id=podcast.id,
        title=podcast.title,
        description=podcast.description,
        youtube_url=podcast.youtube_url,
        thumbnail_url=podcast.thumbnail_url,
        cover_image=podcast.cover_image,
        duration=podcast.duration,
        published_at=podcast.published_at,
        category=PodcastCategory(podcast.category),
        tags=tuple(podcast.tags or ()),
        is_featured=podcast.is_featured,
        view_count=podcast.view_count,
        status=PodcastStatus(podcast.status),
        created_at=podcast.created_at,
        updated_at=podcast.updated_at,
    )


def _podcast_columns(command: PodcastCommand, cover_image: str | None) -> dict:
    return {
        "title": command.title.strip(),
        "description": command.description,
        "youtube_url": command.youtube_url,
        "thumbnail_url": command.thumbnail_url,
        "cover_image": cover_image,
        "duration": command.duration,
        "published_at": command.published_at,
        "category": command.category.value,
        "tags": list(command.tags),
        "is_featured": command.is_featured,
        "status": command.status.value,
    }


class DjangoPodcastStore(PodcastStore):
    def get_podcast(self, podcast_id: EntityId) -> Podcast | None:
        with translate_database_errors("load podcast"):
            podcast = orm.Podcast.objects.filter(pk=podcast_id.value).first()
        return podcast_to_domain(podcast) if podcast is not None else None

    def create_podcast(self, command: PodcastCommand, cover_image: str | None) -> Podcast:
        with translate_database_errors("create podcast"):
            podcast = orm.Podcast.objects.create(**_podcast_columns(command, cover_image))
        return podcast_to_domain(podcast)

    def update_podcast(
        self, podcast_id: EntityId, command: PodcastCommand, cover_image: str | None
    ) -> Podcast | None:
        with translate_database_errors("update podcast"):
            podcast = orm.Podcast.objects.filter(pk=podcast_id.value).first()
            if podcast is None:
                return None
            for column, value in _podcast_columns(command, cover_image).items():
                setattr(podcast, column, value)
            podcast.save()
        return podcast_to_domain(podcast)

    def delete_podcast(self, podcast_id: EntityId) -> bool:
        with translate_database_errors("delete podcast"):
            deleted, _ = orm.Podcast.objects.filter(pk=podcast_id.value).delete()
        return deleted > 0
