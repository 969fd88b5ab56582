from typing import Any

from fastapi import status

ERROR_CODES: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "bad_request",
    status.HTTP_401_UNAUTHORIZED: "unauthorized",
    status.HTTP_403_FORBIDDEN: "forbidden",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_409_CONFLICT: "conflict",
    status.HTTP_422_UNPROCESSABLE_CONTENT: "unprocessable_entity",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "internal_server_error",
}

TICKET_NOT_FOUND = "ticket_not_found"
PATH_NOT_FOUND = "path_not_found"


class HttpError(Exception):
    """An error that maps 1:1 onto an HTTP error response."""

    def __init__(
        self,
        status_code: int,
        code: str | None,
        message: str,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code or ERROR_CODES.get(status_code, "unknown_error")
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(HttpError):
    def __init__(
        self,
        message: str = "Validation error",
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, "bad_request", message, details)


class NotFoundError(HttpError):
    def __init__(self, code: str = "not_found", message: str = "Resource not found") -> None:
        super().__init__(status.HTTP_404_NOT_FOUND, code, message)


class UnauthorizedError(HttpError):
    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(status.HTTP_401_UNAUTHORIZED, "unauthorized", message)


class InternalError(HttpError):
    def __init__(self, message: str = "Unexpected server error") -> None:
        super().__init__(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_server_error",
            message,
        )
