from typing import Any, Protocol
from uuid import UUID

from ticketing.models.entities import TicketEntity


class ConditionalCheckFailedError(Exception):
    """The record a conditional write expected to exist was not there."""

    def __init__(self, ticket_id: UUID) -> None:
        self.ticket_id = ticket_id
        super().__init__(f"Condition 'ticket {ticket_id} exists' failed")


class TicketRepository(Protocol):
    async def put(self, ticket: TicketEntity) -> TicketEntity: ...

    async def get(self, ticket_id: UUID) -> TicketEntity | None: ...

    async def scan(self) -> list[TicketEntity]: ...

    async def update_if_exists(self, ticket_id: UUID, changes: dict[str, Any]) -> TicketEntity:
        """Apply ``changes`` atomically if the ticket exists.

        Raises ``ConditionalCheckFailedError`` otherwise; never inserts.
        """
        ...

    async def delete_if_exists(self, ticket_id: UUID) -> None: ...
