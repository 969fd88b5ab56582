import pytest

from ticketing.core.errors import (
    HttpError,
    InternalError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)


@pytest.mark.parametrize(
    ("error", "status_code", "code"),
    [
        (ValidationError(), 400, "bad_request"),
        (UnauthorizedError(), 401, "unauthorized"),
        (NotFoundError(), 404, "not_found"),
        (NotFoundError("ticket_not_found", "Ticket not found"), 404, "ticket_not_found"),
        (InternalError(), 500, "internal_server_error"),
    ],
)
def test_error_status_and_code(error: HttpError, status_code: int, code: str) -> None:
    assert error.status_code == status_code
    assert error.code == code


def test_http_error_falls_back_to_status_code_default() -> None:
    assert HttpError(409, None, "Conflict").code == "conflict"
    assert HttpError(418, None, "Teapot").code == "unknown_error"


def test_validation_error_carries_details() -> None:
    details = [{"field": "title", "message": "Title is required", "code": "REQUIRED"}]

    error = ValidationError("Validation failed for CreateTicket", details)

    assert str(error) == "Validation failed for CreateTicket"
    assert error.details == details
