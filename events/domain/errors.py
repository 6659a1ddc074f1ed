"""Domain errors for the events module."""

from shared.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidIdError,
    NotFoundError,
    StoreError,
    ValidationError,
)

INVALID_ZONES_MESSAGE = "Please ensure all zones have valid price and capacity values"


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__("event", event_id)
        self.event_id = event_id


class InvalidEventIdError(InvalidIdError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__("event")


class InvalidEventScheduleError(ValidationError):
    """Raised when an event ends before it starts."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="End date must not be before start date",
        )


class NoValidZonesError(ValidationError):
    """Raised when an edit session would leave the event without usable zones."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_VALID_ZONES,
            message="Please add at least one zone for the event",
        )


class InvalidZoneFieldsError(ValidationError):
    """Raised when a filled-in zone row has an unusable name, price or capacity.

    ``problems`` maps each offending draft's local id to the fields at fault.
    """

    def __init__(self, problems: dict[str, tuple[str, ...]]) -> None:
        fields = sorted({field for row in problems.values() for field in row})
        super().__init__(
            code=ErrorCode.INVALID_ZONE_FIELDS,
            message=f"{INVALID_ZONES_MESSAGE} (invalid: {', '.join(fields)})",
        )
        self.problems = problems
        self.details = {local_id: list(row) for local_id, row in problems.items()}


class UnknownZoneError(ValidationError):
    """Raised when a draft claims a zone that does not belong to the event."""

    def __init__(self, zone_id: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_ZONE,
            message="Zone does not belong to this event",
        )
        self.zone_id = zone_id


class DuplicateZoneError(ValidationError):
    """Raised when two drafts claim the same persisted zone."""

    def __init__(self, zone_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_ZONE,
            message="The same zone appears more than once",
        )
        self.zone_id = zone_id


class PartialSequenceFailureError(StoreError):
    """Raised when a zone write fails after earlier writes already landed.

    The event's zones may match neither the original nor the intended set;
    callers should reload and re-diff rather than replay the remaining steps.
    """

    def __init__(self, completed: int, total: int) -> None:
        DomainError.__init__(
            self,
            code=ErrorCode.PARTIAL_SEQUENCE_FAILURE,
            message="Failed to update event zones; some changes were saved",
        )
        self.action = "update event zones"
        self.integrity = False
        self.completed = completed
        self.total = total
