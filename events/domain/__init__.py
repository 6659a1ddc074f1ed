from events.domain.drafts import DraftZone, ZoneFields
from events.domain.models import ClubOption, Event, EventCommand, EventStats, EventStatus, Zone
from events.domain.reconciliation import ZoneInsert, ZonePlan, ZoneUpdate, plan_zone_changes
from events.domain.value_objects import Capacity, EventId, Money, ZoneId

__all__ = [
    "ClubOption",
    "Event",
    "EventCommand",
    "EventStats",
    "EventStatus",
    "Zone",
    "DraftZone",
    "ZoneFields",
    "ZonePlan",
    "ZoneUpdate",
    "ZoneInsert",
    "plan_zone_changes",
    "EventId",
    "ZoneId",
    "Money",
    "Capacity",
]
