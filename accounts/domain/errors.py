"""Domain errors for the accounts module."""

from shared.domain.errors import ErrorCode, NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: str) -> None:
        super().__init__("user", user_id)


class ZeroPointsAdjustmentError(ValidationError):
    """Raised when an adjustment would not change the balance."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="Points to add or deduct must not be zero",
        )
