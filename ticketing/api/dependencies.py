from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ticketing.api.handlers import TicketHandlers
from ticketing.api.router import TicketRouter
from ticketing.core.config import Settings, get_settings
from ticketing.repositories import InMemoryTicketRepository, PostgresTicketRepository
from ticketing.repositories.base import TicketRepository
from ticketing.services.ticket_store import TicketStore


@lru_cache
def _memory_repository() -> InMemoryTicketRepository:
    return InMemoryTicketRepository()


def get_ticket_repository(
    settings: Annotated[Settings, Depends(get_settings)],
) -> TicketRepository:
    if settings.storage_backend == "memory":
        return _memory_repository()
    return PostgresTicketRepository(
        database_url=settings.database_url,
        table=settings.tickets_table,
    )


def get_ticket_store(
    repository: Annotated[TicketRepository, Depends(get_ticket_repository)],
) -> TicketStore:
    return TicketStore(repository=repository)


def get_ticket_router(
    store: Annotated[TicketStore, Depends(get_ticket_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TicketRouter:
    return TicketRouter(TicketHandlers(store), api_prefix=settings.api_prefix)


def build_ticket_router(settings: Settings | None = None) -> TicketRouter:
    """Wire the router outside FastAPI's dependency injection."""
    settings = settings or get_settings()
    store = get_ticket_store(get_ticket_repository(settings))
    return get_ticket_router(store, settings)
