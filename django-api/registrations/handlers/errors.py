"""Maps domain errors to HTTP responses.

Only the error code and the user-safe message reach the client.
"""

from rest_framework import status
from rest_framework.response import Response

from events.domain.errors import DomainError, ErrorCode
from registrations.domain.errors import RegistrationErrorCode

STATUS_BY_CODE = {
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.STORAGE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    RegistrationErrorCode.ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    RegistrationErrorCode.NOT_REGISTERED: status.HTTP_400_BAD_REQUEST,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST),
    )
