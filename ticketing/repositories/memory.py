from dataclasses import replace
from typing import Any
from uuid import UUID

from ticketing.models.entities import TicketEntity
from ticketing.repositories.base import ConditionalCheckFailedError


class InMemoryTicketRepository:
    """Dict-backed store for local runs and tests.

    Each check-and-mutate runs with no ``await`` in between, so it is atomic
    with respect to other coroutines on the same event loop.
    """

    def __init__(self, tickets: list[TicketEntity] | None = None) -> None:
        self.items: dict[UUID, TicketEntity] = {ticket.id: ticket for ticket in tickets or []}

    async def put(self, ticket: TicketEntity) -> TicketEntity:
        self.items[ticket.id] = ticket
        return ticket

    async def get(self, ticket_id: UUID) -> TicketEntity | None:
        return self.items.get(ticket_id)

    async def scan(self) -> list[TicketEntity]:
        return list(self.items.values())

    async def update_if_exists(self, ticket_id: UUID, changes: dict[str, Any]) -> TicketEntity:
        current = self.items.get(ticket_id)
        if current is None:
            raise ConditionalCheckFailedError(ticket_id)
        updated = replace(current, **changes)
        self.items[ticket_id] = updated
        return updated

    async def delete_if_exists(self, ticket_id: UUID) -> None:
        if self.items.pop(ticket_id, None) is None:
            raise ConditionalCheckFailedError(ticket_id)
