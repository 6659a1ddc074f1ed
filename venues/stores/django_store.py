"""Django ORM implementation of the ListingStore."""

from dataclasses import asdict

from shared.domain import EntityId
from shared.domain.errors import NotFoundError
from shared.registry import EntityDefinition
from shared.stores.django_store import translate_database_errors
from venues.domain import ListingCommand
from venues.stores.interfaces import ListingStore


class DjangoListingStore(ListingStore):
    def __init__(self, definition: EntityDefinition, image_column: str) -> None:
        self._definition = definition
        self._image_column = image_column

    def _columns(self, command: ListingCommand, image_url: str | None) -> dict:
        columns = {
            name: value.strip() if isinstance(value, str) else value
            for name, value in asdict(command).items()
        }
        columns[self._image_column] = image_url
        return columns

    def current_image(self, listing_id: EntityId) -> str | None:
        with translate_database_errors(f"load {self._definition.label}"):
            row = (
                self._definition.model.objects.filter(pk=listing_id.value)
                .values(self._image_column)
                .first()
            )
        if row is None:
            raise NotFoundError(self._definition.label, str(listing_id))
        return row[self._image_column]

    def create_listing(self, command: ListingCommand, image_url: str | None):
        with translate_database_errors(f"create {self._definition.label}"):
            return self._definition.model.objects.create(**self._columns(command, image_url))

    def update_listing(self, listing_id: EntityId, command: ListingCommand, image_url: str | None):
        with translate_database_errors(f"update {self._definition.label}"):
            row = self._definition.model.objects.filter(pk=listing_id.value).first()
            if row is None:
                return None
            for column, value in self._columns(command, image_url).items():
                setattr(row, column, value)
            row.save()
        return row

    def delete_listing(self, listing_id: EntityId) -> bool:
        with translate_database_errors(f"delete {self._definition.label}"):
            deleted, _ = self._definition.model.objects.filter(pk=listing_id.value).delete()
        return deleted > 0
