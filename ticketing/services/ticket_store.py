import logging
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from ticketing.core.errors import TICKET_NOT_FOUND, NotFoundError
from ticketing.models.entities import MUTABLE_FIELDS, TicketEntity
from ticketing.models.schemas.ticket import (
    CreateTicketRequest,
    PatchTicketRequest,
    TicketRead,
    UpdateTicketRequest,
)
from ticketing.repositories.base import ConditionalCheckFailedError, TicketRepository

logger = logging.getLogger(__name__)


class TicketStore:
    """Ticket persistence on top of a single-table backend.

    Updates and deletes are conditional writes: the backend checks that the
    ticket exists in the same atomic operation that mutates it. A failed
    condition surfaces as ``NotFoundError`` and never creates a record.
    """

    def __init__(self, repository: TicketRepository) -> None:
        self.repository = repository

    async def create(self, payload: CreateTicketRequest) -> TicketRead:
        now = datetime.now(UTC)
        ticket = TicketEntity(
            id=uuid4(),
            title=payload.title,
            description=payload.description,
            status=payload.status,
            reporter_id=payload.reporter_id,
            assigned_to_id=payload.assigned_to_id,
            priority=payload.priority,
            type=payload.type,
            created_at=now,
            updated_at=now,
        )
        created = await self.repository.put(ticket)
        logger.info("Created ticket %s", created.id)
        return self._to_ticket_read(created)

    async def get_by_id(self, ticket_id: UUID) -> TicketRead | None:
        ticket = await self.repository.get(ticket_id)
        if ticket is None:
            return None
        return self._to_ticket_read(ticket)

    async def list_all(self) -> list[TicketRead]:
        tickets = await self.repository.scan()
        return [self._to_ticket_read(ticket) for ticket in tickets]

    async def update(self, ticket_id: UUID, payload: UpdateTicketRequest) -> TicketRead:
        changes = {field: getattr(payload, field) for field in MUTABLE_FIELDS}
        updated = await self._update_if_exists(ticket_id, changes)
        logger.info("Updated ticket %s", ticket_id)
        return updated

    async def patch(self, ticket_id: UUID, payload: PatchTicketRequest) -> TicketRead:
        updated = await self._update_if_exists(ticket_id, payload.changes())
        logger.info("Patched ticket %s fields=%s", ticket_id, sorted(payload.model_fields_set))
        return updated

    async def delete(self, ticket_id: UUID) -> None:
        try:
            await self.repository.delete_if_exists(ticket_id)
        except ConditionalCheckFailedError as exc:
            self._raise_ticket_not_found(ticket_id, exc)
        logger.info("Deleted ticket %s", ticket_id)

    async def _update_if_exists(self, ticket_id: UUID, changes: dict[str, Any]) -> TicketRead:
        changes["updated_at"] = datetime.now(UTC)
        try:
            ticket = await self.repository.update_if_exists(ticket_id, changes)
        except ConditionalCheckFailedError as exc:
            self._raise_ticket_not_found(ticket_id, exc)
        return self._to_ticket_read(ticket)

    def _to_ticket_read(self, ticket: TicketEntity) -> TicketRead:
        return TicketRead.model_validate(ticket)

    def _raise_ticket_not_found(self, ticket_id: UUID, exc: Exception) -> None:
        logger.warning("Ticket %s not found", ticket_id)
        raise NotFoundError(TICKET_NOT_FOUND, f"Ticket {ticket_id} not found") from exc
