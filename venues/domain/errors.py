"""Domain errors for the venues module."""

from shared.domain.errors import ErrorCode, ValidationError


class InvalidRatingError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="Rating must be between 0 and 5",
        )


class InvalidTicketPriceError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="Ticket price cannot be negative",
        )
