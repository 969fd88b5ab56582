"""API Gateway (REST, proxy integration) entry point."""

import asyncio
import base64
import binascii
import logging
from typing import Any

from ticketing.api.dependencies import build_ticket_router
from ticketing.core import responses
from ticketing.core.config import get_settings
from ticketing.core.errors import HttpError, ValidationError
from ticketing.core.logging import configure_logging
from ticketing.models.http import HttpRequest, HttpResponse

configure_logging(get_settings().log_level)
logger = logging.getLogger(__name__)


def to_http_request(event: dict[str, Any]) -> HttpRequest:
    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        try:
            # Left as bytes; UTF-8 decoding happens during body validation.
            body = base64.b64decode(body, validate=True)
        except binascii.Error as exc:
            raise ValidationError("Request body must be valid base64") from exc
    return HttpRequest(
        method=event.get("httpMethod", ""),
        path=event.get("path", ""),
        path_params=event.get("pathParameters"),
        query_params=event.get("queryStringParameters"),
        headers=event.get("headers") or {},
        body=body,
    )


def lambda_handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    try:
        request = to_http_request(event)
    except HttpError as exc:
        logger.warning("Rejected API Gateway event: %s", exc.message)
        response: HttpResponse = responses.error(exc.status_code, exc.code, exc.message)
    else:
        router = build_ticket_router()
        response = asyncio.run(router.dispatch(request))
    return {
        "statusCode": response.status_code,
        "headers": response.headers,
        "body": response.body,
    }
