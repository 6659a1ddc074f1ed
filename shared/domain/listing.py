"""List query and page primitives shared by every admin list view.

Pages are 1-based everywhere. Changing the search term or a filter always
returns a query positioned on the first page.
"""

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from typing import Generic, Self, TypeVar

T = TypeVar("T")
U = TypeVar("U")

FIRST_PAGE = 1
PAGE_SIZES = (10, 20, 50, 100)
DEFAULT_PAGE_SIZE = PAGE_SIZES[0]

# Filter value meaning "no filter", as sent by the admin UI selects.
ALL = "all"


@dataclass(frozen=True)
class ListQuery:
    """Search term, discrete filters and page window for one list request."""

    search: str = ""
    filters: tuple[tuple[str, str], ...] = ()
    page: int = FIRST_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < FIRST_PAGE:
            raise ValueError(f"Page must be >= {FIRST_PAGE}")
        if self.page_size not in PAGE_SIZES:
            raise ValueError(f"Page size must be one of {PAGE_SIZES}")
        object.__setattr__(self, "search", self.search.strip())
        object.__setattr__(
            self,
            "filters",
            tuple(sorted((k, v) for k, v in self.filters if v and v != ALL)),
        )

    @classmethod
    def build(
        cls,
        search: str = "",
        filters: Mapping[str, str] | None = None,
        page: int = FIRST_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> Self:
        return cls(
            search=search,
            filters=tuple((filters or {}).items()),
            page=page,
            page_size=page_size,
        )

    @property
    def offset(self) -> int:
        return (self.page - FIRST_PAGE) * self.page_size

    @property
    def filter_map(self) -> dict[str, str]:
        return dict(self.filters)

    def with_search(self, search: str) -> Self:
        return replace(self, search=search, page=FIRST_PAGE)

    def with_filter(self, name: str, value: str) -> Self:
        filters = self.filter_map
        filters[name] = value
        return replace(self, filters=tuple(filters.items()), page=FIRST_PAGE)

    def with_page(self, page: int) -> Self:
        return replace(self, page=page)

    def cache_parts(self) -> tuple[str, ...]:
        """Stable key fragments identifying this exact request."""
        parts = [f"q={self.search.lower()}", f"p={self.page}", f"s={self.page_size}"]
        parts.extend(f"{name}={value}" for name, value in self.filters)
        return tuple(parts)


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of rows plus the total count matching the filter."""

    rows: tuple[T, ...]
    total_count: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.total_count else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        return Page(
            rows=tuple(fn(row) for row in self.rows),
            total_count=self.total_count,
            page=self.page,
            page_size=self.page_size,
        )
