"""Route matching and the single error boundary for every request."""

import logging
from dataclasses import dataclass, replace

from ticketing.api.handlers import TicketHandlers
from ticketing.core import responses
from ticketing.core.errors import PATH_NOT_FOUND, HttpError, NotFoundError
from ticketing.models.http import HttpRequest, HttpResponse
from ticketing.models.schemas.ticket import (
    CreateTicketRequest,
    PatchTicketRequest,
    TicketIdParam,
    UpdateTicketRequest,
)
from ticketing.validation.middleware import (
    Handler,
    validate_body,
    validate_path_params,
    validate_request,
    with_validation,
)

logger = logging.getLogger(__name__)

RESOURCE = "tickets"


@dataclass(frozen=True, slots=True)
class Route:
    name: str
    method: str
    with_id: bool
    handler: Handler[HttpResponse]

    def matches(self, method: str, segments: list[str]) -> bool:
        if method != self.method or not segments or segments[0] != RESOURCE:
            return False
        return len(segments) == (2 if self.with_id else 1)


def normalize_path(path: str, prefix: str = "") -> str:
    prefix = prefix.rstrip("/")
    if prefix and (path == prefix or path.startswith(f"{prefix}/")):
        path = path[len(prefix) :]
    return "/" + path.strip("/")


def build_routes(handlers: TicketHandlers) -> tuple[Route, ...]:
    validate_ticket_id = validate_path_params(TicketIdParam, "TicketId")
    return (
        Route(
            "create_ticket",
            "POST",
            with_id=False,
            handler=with_validation(
                validate_body(CreateTicketRequest, "CreateTicket"),
                handlers.create_ticket,
            ),
        ),
        Route("list_tickets", "GET", with_id=False, handler=handlers.list_tickets),
        Route(
            "get_ticket",
            "GET",
            with_id=True,
            handler=with_validation(validate_ticket_id, handlers.get_ticket),
        ),
        Route(
            "update_ticket",
            "PUT",
            with_id=True,
            handler=with_validation(
                validate_request(
                    "UpdateTicket",
                    path_params=TicketIdParam,
                    body=UpdateTicketRequest,
                ),
                handlers.update_ticket,
            ),
        ),
        Route(
            "patch_ticket",
            "PATCH",
            with_id=True,
            handler=with_validation(
                validate_request(
                    "PatchTicket",
                    path_params=TicketIdParam,
                    body=PatchTicketRequest,
                ),
                handlers.patch_ticket,
            ),
        ),
        Route(
            "delete_ticket",
            "DELETE",
            with_id=True,
            handler=with_validation(validate_ticket_id, handlers.delete_ticket),
        ),
    )


class TicketRouter:
    def __init__(self, handlers: TicketHandlers, api_prefix: str = "") -> None:
        self.routes = build_routes(handlers)
        self.api_prefix = api_prefix

    def resolve(self, request: HttpRequest) -> tuple[Route, HttpRequest]:
        """Return the first matching route and the request with its ``id`` parameter."""
        method = request.method.upper()
        segments = normalize_path(request.path, self.api_prefix).strip("/").split("/")
        for route in self.routes:
            if not route.matches(method, segments):
                continue
            if not route.with_id:
                return route, request
            ticket_id = (request.path_params or {}).get("id", segments[1])
            return route, replace(request, path_params={"id": ticket_id})

        raise NotFoundError(PATH_NOT_FOUND, f"No route for {method} {request.path}")

    async def dispatch(self, request: HttpRequest) -> HttpResponse:
        logger.info(
            "Request received: method=%s path=%s has_body=%s",
            request.method,
            request.path,
            bool(request.body),
        )
        try:
            if request.method.upper() == "OPTIONS":
                return responses.cors_preflight()

            route, request = self.resolve(request)
            logger.debug("Matched route %s", route.name)
            return await route.handler(request)
        except HttpError as exc:
            logger.info("Request failed: status=%s code=%s", exc.status_code, exc.code)
            return responses.error(exc.status_code, exc.code, exc.message, exc.details)
        except Exception:
            logger.exception("Unhandled error for %s %s", request.method, request.path)
            return responses.internal_error()
