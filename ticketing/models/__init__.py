"""Domain models and API schemas."""

from pydantic import BaseModel, ConfigDict

from ticketing.models.entities import TicketEntity, TicketPriority, TicketStatus, TicketType


def to_camel(value: str) -> str:
    parts = value.split("_")
    return parts[0] + "".join(part[:1].upper() + part[1:] for part in parts[1:])


class CamelCaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


__all__ = [
    "CamelCaseModel",
    "TicketEntity",
    "TicketPriority",
    "TicketStatus",
    "TicketType",
    "to_camel",
]
