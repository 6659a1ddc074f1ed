"""Domain error codes shared by every admin module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_ID = "INVALID_ID"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    INVALID_FILTER = "INVALID_FILTER"
    INVALID_TOGGLE_FIELD = "INVALID_TOGGLE_FIELD"
    INVALID_STATUS = "INVALID_STATUS"
    UPLOAD_REJECTED = "UPLOAD_REJECTED"
    NO_VALID_ZONES = "NO_VALID_ZONES"
    INVALID_ZONE_FIELDS = "INVALID_ZONE_FIELDS"
    UNKNOWN_ZONE = "UNKNOWN_ZONE"
    DUPLICATE_ZONE = "DUPLICATE_ZONE"
    STORE_FAILURE = "STORE_FAILURE"
    INTEGRITY_VIOLATION = "INTEGRITY_VIOLATION"
    PARTIAL_SEQUENCE_FAILURE = "PARTIAL_SEQUENCE_FAILURE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised before any write when input cannot be accepted."""


class NotFoundError(DomainError):
    """Raised when an entity is not found."""

    def __init__(self, label: str, entity_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message=f"{label.capitalize()} not found",
        )
        self.entity_id = entity_id


class InvalidIdError(ValidationError):
    """Raised when an identifier is not a valid UUID."""

    def __init__(self, label: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID,
            message=f"Invalid {label} ID format",
        )


class MissingRequiredFieldError(ValidationError):
    """Raised when a form is submitted without its required fields."""

    def __init__(self, fields: tuple[str, ...]) -> None:
        super().__init__(
            code=ErrorCode.MISSING_REQUIRED_FIELD,
            message="Please fill in all required fields: " + ", ".join(fields),
        )
        self.fields = fields


class InvalidFilterError(ValidationError):
    """Raised when a list filter name or value is not recognised."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_FILTER,
            message=f"Unsupported value {value!r} for filter {name!r}",
        )


class InvalidToggleFieldError(ValidationError):
    """Raised when a toggle targets a field that is not a boolean flag."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TOGGLE_FIELD,
            message=f"Field {field!r} cannot be toggled",
        )


class InvalidStatusError(ValidationError):
    """Raised when a status change names a value outside the entity's workflow."""

    def __init__(self, status: str, allowed: tuple[str, ...]) -> None:
        super().__init__(
            code=ErrorCode.INVALID_STATUS,
            message=f"Invalid status {status!r}; expected one of: " + ", ".join(allowed),
        )


class UploadRejectedError(ValidationError):
    """Raised when an uploaded file is too large or of the wrong type."""

    def __init__(self, reason: str) -> None:
        super().__init__(code=ErrorCode.UPLOAD_REJECTED, message=reason)


class StoreError(DomainError):
    """Raised when the underlying store rejects a query or mutation."""

    def __init__(self, action: str, integrity: bool = False) -> None:
        super().__init__(
            code=ErrorCode.INTEGRITY_VIOLATION if integrity else ErrorCode.STORE_FAILURE,
            message=f"Failed to {action}",
        )
        self.action = action
        self.integrity = integrity
