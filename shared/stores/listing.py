"""Search, filter, order and slice a queryset into a ``Page``."""

from dataclasses import dataclass

from django.db.models import Q, QuerySet
from django.db.models.expressions import OrderBy

from shared.domain import ListQuery, Page
from shared.domain.errors import InvalidFilterError
from shared.stores.filters import FilterSpec


@dataclass(frozen=True)
class ListConfig:
    """How one entity answers the shared list contract."""

    search_fields: tuple[str, ...]
    filters: tuple[FilterSpec, ...] = ()
    ordering: tuple[str | OrderBy, ...] = ("-created_at",)

    @property
    def filter_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.filters)

    def apply(self, queryset: QuerySet, query: ListQuery) -> QuerySet:
        specs = {spec.name: spec for spec in self.filters}
        for name, value in query.filters:
            spec = specs.get(name)
            if spec is None:
                raise InvalidFilterError(name, value)
            queryset = queryset.filter(spec.to_q(value))

        if query.search and self.search_fields:
            condition = Q()
            for field in self.search_fields:
                condition |= Q(**{f"{field}__icontains": query.search})
            queryset = queryset.filter(condition)

        # pk keeps pages disjoint when the primary ordering ties
        return queryset.order_by(*self.ordering, "pk")


def paginate(queryset: QuerySet, query: ListQuery, config: ListConfig) -> Page:
    filtered = config.apply(queryset, query)
    total = filtered.count()
    rows = tuple(filtered[query.offset : query.offset + query.page_size])
    return Page(rows=rows, total_count=total, page=query.page, page_size=query.page_size)
