"""Domain primitives shared by the admin modules."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID

from shared.domain.cache_keys import EntityType


@dataclass(frozen=True)
class EntityId:
    """Unique identifier for any persisted admin entity."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ToggleCommand:
    """Flip one boolean field of one entity.

    ``observed`` is the value the caller last saw. The stored value becomes
    ``not observed`` without re-reading the row, so two admins toggling the
    same stale value both write the same result (last write wins).
    """

    entity_type: EntityType
    label: str
    entity_id: EntityId
    field: str
    observed: bool

    @property
    def new_value(self) -> bool:
        return not self.observed
