"""Domain errors for the content module."""

from shared.domain.errors import ErrorCode, ValidationError


class InvalidSortOrderError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="Sort order must be a valid number",
        )


class InvalidYoutubeUrlError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="Please enter a valid YouTube URL",
        )
