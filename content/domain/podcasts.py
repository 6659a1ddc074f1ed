"""Podcasts: YouTube videos with optional cover art."""

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID

from content.domain.errors import InvalidYoutubeUrlError
from shared.domain.errors import MissingRequiredFieldError

YOUTUBE_URL = re.compile(r"^https?://(www\.)?(youtube\.com/watch\?v=|youtu\.be/)[a-zA-Z0-9_-]+")


class PodcastCategory(Enum):
    PODCAST = "podcast"
    INTERVIEW = "interview"
    TUTORIAL = "tutorial"
    DISCUSSION = "discussion"


class PodcastStatus(Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


def is_youtube_url(url: str) -> bool:
    return YOUTUBE_URL.match(url or "") is not None


def parse_tags(text: str) -> tuple[str, ...]:
    """Comma-separated tags, trimmed, empties dropped."""
    return tuple(tag.strip() for tag in (text or "").split(",") if tag.strip())


@dataclass(frozen=True)
class Podcast:
    id: UUID
    title: str
    description: str | None
    youtube_url: str
    thumbnail_url: str | None
    cover_image: str | None
    duration: str | None
    published_at: datetime | None
    category: PodcastCategory
    tags: tuple[str, ...]
    is_featured: bool
    view_count: int
    status: PodcastStatus
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PodcastCommand:
    title: str
    youtube_url: str
    description: str | None = None
    thumbnail_url: str | None = None
    duration: str | None = None
    published_at: datetime | None = None
    category: PodcastCategory = PodcastCategory.PODCAST
    tags: tuple[str, ...] = ()
    is_featured: bool = False
    status: PodcastStatus = PodcastStatus.PUBLISHED

    def __post_init__(self) -> None:
        if not self.title.strip():
            raise MissingRequiredFieldError(("title",))
        if not is_youtube_url(self.youtube_url):
            raise InvalidYoutubeUrlError()
