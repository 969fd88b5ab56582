import logging

from ticketing.core import responses
from ticketing.core.errors import TICKET_NOT_FOUND, NotFoundError
from ticketing.models.http import HttpRequest, HttpResponse
from ticketing.models.schemas.ticket import CreateTicketRequest, TicketIdParam
from ticketing.services.ticket_store import TicketStore
from ticketing.validation.middleware import ValidatedRequest

logger = logging.getLogger(__name__)


class TicketHandlers:
    """Business handlers. Each receives input that has already been validated."""

    def __init__(self, store: TicketStore) -> None:
        self.store = store

    async def create_ticket(self, payload: CreateTicketRequest, _: HttpRequest) -> HttpResponse:
        ticket = await self.store.create(payload)
        return responses.created(ticket)

    async def list_tickets(self, _: HttpRequest) -> HttpResponse:
        tickets = await self.store.list_all()
        return responses.ok(tickets)

    async def get_ticket(self, params: TicketIdParam, _: HttpRequest) -> HttpResponse:
        ticket = await self.store.get_by_id(params.id)
        if ticket is None:
            raise NotFoundError(TICKET_NOT_FOUND, f"Ticket {params.id} not found")
        return responses.ok(ticket)

    async def update_ticket(self, validated: ValidatedRequest, _: HttpRequest) -> HttpResponse:
        ticket_id = validated.path_params.id
        logger.debug("Replacing ticket %s", ticket_id)
        ticket = await self.store.update(ticket_id, validated.body)
        return responses.ok(ticket)

    async def patch_ticket(self, validated: ValidatedRequest, _: HttpRequest) -> HttpResponse:
        ticket_id = validated.path_params.id
        logger.debug("Patching ticket %s", ticket_id)
        ticket = await self.store.patch(ticket_id, validated.body)
        return responses.ok(ticket)

    async def delete_ticket(self, params: TicketIdParam, _: HttpRequest) -> HttpResponse:
        await self.store.delete(params.id)
        return responses.no_content()
