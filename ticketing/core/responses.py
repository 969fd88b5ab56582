"""Every outward-facing response envelope is built here."""

import json
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder

from ticketing.core.config import get_settings
from ticketing.models.http import HttpResponse
from ticketing.models.schemas.error import ErrorResponse


def _cors_headers() -> dict[str, str]:
    return dict(get_settings().cors_headers)


def _json_headers() -> dict[str, str]:
    return {"Content-Type": "application/json", **_cors_headers()}


def success(status_code: int, body: Any) -> HttpResponse:
    return HttpResponse(
        status_code=status_code,
        headers=_json_headers(),
        body=json.dumps(jsonable_encoder(body, by_alias=True)),
    )


def ok(body: Any) -> HttpResponse:
    return success(status.HTTP_200_OK, body)


def created(body: Any) -> HttpResponse:
    return success(status.HTTP_201_CREATED, body)


def no_content() -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_204_NO_CONTENT, headers=_cors_headers(), body="")


def error(
    status_code: int,
    code: str,
    message: str,
    details: list[dict[str, Any]] | None = None,
) -> HttpResponse:
    payload = ErrorResponse.model_validate({"code": code, "message": message, "details": details})
    return HttpResponse(
        status_code=status_code,
        headers=_json_headers(),
        body=payload.model_dump_json(exclude_none=True),
    )


def bad_request(
    message: str = "Bad Request",
    details: list[dict[str, Any]] | None = None,
) -> HttpResponse:
    return error(status.HTTP_400_BAD_REQUEST, "bad_request", message, details)


def unauthorized(message: str = "Unauthorized") -> HttpResponse:
    return error(status.HTTP_401_UNAUTHORIZED, "unauthorized", message)


def not_found(message: str = "Resource not found", code: str = "not_found") -> HttpResponse:
    return error(status.HTTP_404_NOT_FOUND, code, message)


def internal_error(message: str = "Unexpected server error") -> HttpResponse:
    return error(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_server_error", message)


def cors_preflight() -> HttpResponse:
    headers = _cors_headers()
    headers["Access-Control-Max-Age"] = str(get_settings().cors_max_age)
    return HttpResponse(status_code=status.HTTP_200_OK, headers=headers, body="")
