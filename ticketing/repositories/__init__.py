"""Ticket storage backends."""

from ticketing.repositories.base import ConditionalCheckFailedError, TicketRepository
from ticketing.repositories.memory import InMemoryTicketRepository
from ticketing.repositories.postgres import PostgresTicketRepository

__all__ = [
    "ConditionalCheckFailedError",
    "InMemoryTicketRepository",
    "PostgresTicketRepository",
    "TicketRepository",
]
