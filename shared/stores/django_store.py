"""Django ORM implementation of the generic EntityStore."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from django.db import DatabaseError, IntegrityError
from django.utils import timezone

from shared.domain import EntityId, ListQuery, Page
from shared.domain.errors import InvalidToggleFieldError, NotFoundError, StoreError
from shared.registry import EntityDefinition
from shared.stores.interfaces import EntityStore
from shared.stores.listing import paginate

logger = logging.getLogger(__name__)


@contextmanager
def translate_database_errors(action: str) -> Iterator[None]:
    """Re-raise ORM failures as StoreError naming the failed action."""
    try:
        yield
    except IntegrityError as err:
        logger.warning("Integrity violation while trying to %s: %s", action, err)
        raise StoreError(action, integrity=True) from err
    except DatabaseError as err:
        logger.exception("Database failure while trying to %s", action)
        raise StoreError(action) from err


def touch_fields(model) -> dict:
    """``updated_at`` for queryset.update(), which skips auto_now."""
    field_names = {f.name for f in model._meta.get_fields()}
    return {"updated_at": timezone.now()} if "updated_at" in field_names else {}


class DjangoEntityStore(EntityStore):
    """Registry-driven store for any list entity."""

    def __init__(self, definition: EntityDefinition) -> None:
        self._definition = definition

    def _queryset(self):
        queryset = self._definition.model.objects.all()
        if self._definition.select_related:
            queryset = queryset.select_related(*self._definition.select_related)
        return queryset

    def list_page(self, query: ListQuery) -> Page:
        with translate_database_errors(f"load {self._definition.slug}"):
            return paginate(self._queryset(), query, self._definition.listing)

    def set_flag(self, entity_id: EntityId, field: str, value: bool) -> None:
        if field not in self._definition.toggles:
            raise InvalidToggleFieldError(field)
        model = self._definition.model
        with translate_database_errors(f"update {self._definition.label}"):
            updated = model.objects.filter(pk=entity_id.value).update(
                **{field: value}, **touch_fields(model)
            )
        if not updated:
            raise NotFoundError(self._definition.label, str(entity_id))

    def set_status(self, entity_id: EntityId, status: str) -> None:
        model = self._definition.model
        with translate_database_errors(f"update {self._definition.label} status"):
            updated = model.objects.filter(pk=entity_id.value).update(
                status=status, **touch_fields(model)
            )
        if not updated:
            raise NotFoundError(self._definition.label, str(entity_id))

    def delete(self, entity_id: EntityId) -> None:
        with translate_database_errors(f"delete {self._definition.label}"):
            deleted, _ = self._definition.model.objects.filter(pk=entity_id.value).delete()
        if not deleted:
            raise NotFoundError(self._definition.label, str(entity_id))
