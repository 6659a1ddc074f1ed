"""Map domain errors to HTTP responses.

Only the error code and the user-safe message leave the process; store
details stay in the log.
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.errors import DomainError, ErrorCode, NotFoundError, StoreError

STATUS_BY_CODE = {
    ErrorCode.PARTIAL_SEQUENCE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTEGRITY_VIOLATION: status.HTTP_409_CONFLICT,
    ErrorCode.STORE_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(error: DomainError) -> int:
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, StoreError):
        return STATUS_BY_CODE.get(error.code, status.HTTP_503_SERVICE_UNAVAILABLE)
    return status.HTTP_400_BAD_REQUEST


def error_payload(error: DomainError) -> dict:
    payload = {"code": error.code.value, "message": error.message}
    details = getattr(error, "details", None)
    if details:
        payload["details"] = details
    return payload


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        notifier = getattr(context.get("view"), "notifier", None)
        messages = notifier.as_payload() if notifier is not None else []
        return Response(
            {"error": error_payload(exc), "messages": messages},
            status=status_for(exc),
        )
    return exception_handler(exc, context)
