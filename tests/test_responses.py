import json
from datetime import UTC, datetime
from uuid import UUID

from tests.helpers.fakes import REPORTER_ID
from ticketing.core import responses
from ticketing.models.entities import TicketPriority, TicketStatus, TicketType
from ticketing.models.schemas.ticket import TicketRead

CORS_HEADERS = {
    "Access-Control-Allow-Origin",
    "Access-Control-Allow-Headers",
    "Access-Control-Allow-Methods",
}


def test_success_serializes_ticket_with_camel_case_keys() -> None:
    created_at = datetime(2026, 10, 19, 9, 30, tzinfo=UTC)
    ticket = TicketRead(
        id=UUID("1b2c3d4e-5678-90ab-cdef-1234567890ab"),
        title="Bug",
        description="desc",
        status=TicketStatus.NEW,
        reporter_id=UUID(REPORTER_ID),
        priority=TicketPriority.MEDIUM,
        type=TicketType.INCIDENT,
        created_at=created_at,
        updated_at=created_at,
    )

    response = responses.created(ticket)

    assert response.status_code == 201
    assert response.headers["Content-Type"] == "application/json"
    assert CORS_HEADERS <= set(response.headers)
    body = json.loads(response.body)
    assert body["id"] == "1b2c3d4e-5678-90ab-cdef-1234567890ab"
    assert body["reporterId"] == REPORTER_ID
    assert body["assignedToId"] is None
    assert body["status"] == "NEW"
    assert datetime.fromisoformat(body["createdAt"]) == created_at
    assert body["createdAt"] == body["updatedAt"]


def test_ok_serializes_lists() -> None:
    response = responses.ok([])

    assert response.status_code == 200
    assert response.body == "[]"


def test_no_content_has_empty_body_and_no_content_type() -> None:
    response = responses.no_content()

    assert response.status_code == 204
    assert response.body == ""
    assert "Content-Type" not in response.headers
    assert CORS_HEADERS <= set(response.headers)


def test_cors_preflight() -> None:
    response = responses.cors_preflight()

    assert response.status_code == 200
    assert response.body == ""
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Methods"] == "GET,POST,PUT,DELETE,PATCH,OPTIONS"
    assert response.headers["Access-Control-Max-Age"] == "86400"
    assert "Content-Type" not in response.headers


def test_error_omits_details_when_absent() -> None:
    response = responses.not_found("Ticket not found", code="ticket_not_found")

    assert response.status_code == 404
    assert json.loads(response.body) == {
        "code": "ticket_not_found",
        "message": "Ticket not found",
    }


def test_error_includes_details() -> None:
    details = [{"field": "title", "message": "Title is required", "code": "TOO_SMALL"}]

    response = responses.bad_request("Validation failed for CreateTicket", details)

    assert response.status_code == 400
    assert json.loads(response.body) == {
        "code": "bad_request",
        "message": "Validation failed for CreateTicket",
        "details": details,
    }


def test_internal_error_is_generic() -> None:
    response = responses.internal_error()

    assert response.status_code == 500
    assert json.loads(response.body) == {
        "code": "internal_server_error",
        "message": "Unexpected server error",
    }


def test_unauthorized() -> None:
    response = responses.unauthorized("Missing bearer token")

    assert response.status_code == 401
    assert json.loads(response.body)["code"] == "unauthorized"
