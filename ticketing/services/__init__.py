"""Business services."""

from ticketing.services.ticket_store import TicketStore

__all__ = ["TicketStore"]
