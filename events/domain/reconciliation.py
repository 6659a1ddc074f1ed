"""Turn an edited list of draft zones into the writes that produce it.

Zones are matched to persisted rows by ``db_id`` only. A row the user merely
edited becomes an update of the same zone, never a delete plus an insert, so
bookings that reference the zone keep pointing at it.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from events.domain.drafts import DraftZone, ZoneFields, invalid_fields, to_fields
from events.domain.errors import (
    DuplicateZoneError,
    InvalidZoneFieldsError,
    NoValidZonesError,
    UnknownZoneError,
)
from events.domain.value_objects import ZoneId


@dataclass(frozen=True)
class ZoneUpdate:
    zone_id: ZoneId
    fields: ZoneFields


@dataclass(frozen=True)
class ZoneInsert:
    local_id: str
    fields: ZoneFields


ZoneWrite = ZoneUpdate | ZoneInsert


@dataclass(frozen=True)
class ZonePlan:
    """Deletes run first as one batch; writes follow in the user's row order."""

    deletes: tuple[ZoneId, ...]
    writes: tuple[ZoneWrite, ...]

    @property
    def updates(self) -> tuple[ZoneUpdate, ...]:
        return tuple(w for w in self.writes if isinstance(w, ZoneUpdate))

    @property
    def inserts(self) -> tuple[ZoneInsert, ...]:
        return tuple(w for w in self.writes if isinstance(w, ZoneInsert))

    @property
    def step_count(self) -> int:
        return (1 if self.deletes else 0) + len(self.writes)


def validate_drafts(current: Sequence[DraftZone]) -> list[tuple[DraftZone, ZoneFields]]:
    """Parse every filled-in row.

    Raises:
        NoValidZonesError: If no row parses.
        InvalidZoneFieldsError: If any filled-in row does not parse.
    """
    valid: list[tuple[DraftZone, ZoneFields]] = []
    problems: dict[str, tuple[str, ...]] = {}
    for draft in current:
        if draft.is_blank:
            continue
        fields = to_fields(draft)
        if fields is None:
            problems[draft.local_id] = invalid_fields(draft)
        else:
            valid.append((draft, fields))

    if not valid:
        raise NoValidZonesError()
    if problems:
        raise InvalidZoneFieldsError(problems)
    return valid


def plan_zone_changes(original: Sequence[DraftZone], current: Sequence[DraftZone]) -> ZonePlan:
    """Compute the delete/update/insert plan for one event.

    Raises:
        NoValidZonesError: If the edit leaves no usable zone.
        InvalidZoneFieldsError: If a filled-in row has a bad name, price or capacity.
        UnknownZoneError: If a row claims a zone the event did not have.
        DuplicateZoneError: If two rows claim the same zone.
    """
    valid = validate_drafts(current)

    original_ids = [draft.db_id for draft in original if draft.db_id is not None]
    known = set(original_ids)
    kept: set[ZoneId] = set()
    writes: list[ZoneWrite] = []

    for draft, fields in valid:
        zone_id = draft.identity
        if zone_id is None:
            writes.append(ZoneInsert(local_id=draft.local_id, fields=fields))
            continue
        if zone_id not in known:
            raise UnknownZoneError(str(zone_id))
        if zone_id in kept:
            raise DuplicateZoneError(str(zone_id))
        kept.add(zone_id)
        writes.append(ZoneUpdate(zone_id=zone_id, fields=fields))

    deletes = tuple(dict.fromkeys(zone_id for zone_id in original_ids if zone_id not in kept))
    return ZonePlan(deletes=deletes, writes=tuple(writes))
