from content.domain.categories import (
    DEFAULT_CATEGORIES,
    CategoryCommand,
    missing_defaults,
    to_slug,
)
from content.domain.podcasts import (
    Podcast,
    PodcastCategory,
    PodcastCommand,
    PodcastStatus,
    is_youtube_url,
    parse_tags,
)

__all__ = [
    "DEFAULT_CATEGORIES",
    "CategoryCommand",
    "missing_defaults",
    "to_slug",
    "Podcast",
    "PodcastCategory",
    "PodcastCommand",
    "PodcastStatus",
    "is_youtube_url",
    "parse_tags",
]
