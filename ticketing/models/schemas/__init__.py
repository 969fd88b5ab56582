"""Pydantic schema definitions."""

from ticketing.models.schemas.error import ErrorDetail, ErrorResponse
from ticketing.models.schemas.ticket import (
    CreateTicketRequest,
    PatchTicketRequest,
    TicketIdParam,
    TicketRead,
    UpdateTicketRequest,
)

__all__ = [
    "CreateTicketRequest",
    "ErrorDetail",
    "ErrorResponse",
    "PatchTicketRequest",
    "TicketIdParam",
    "TicketRead",
    "UpdateTicketRequest",
]
