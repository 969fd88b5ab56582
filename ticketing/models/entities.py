from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class TicketStatus(StrEnum):
    NEW = "NEW"
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"


class TicketPriority(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class TicketType(StrEnum):
    INCIDENT = "INCIDENT"
    SERVICE_REQUEST = "SERVICE_REQUEST"
    QUESTION = "QUESTION"


# Fields a client may change after creation.
MUTABLE_FIELDS = (
    "title",
    "description",
    "status",
    "reporter_id",
    "assigned_to_id",
    "priority",
    "type",
)


@dataclass(slots=True)
class TicketEntity:
    id: UUID
    title: str
    description: str
    status: TicketStatus
    reporter_id: UUID
    assigned_to_id: UUID | None
    priority: TicketPriority
    type: TicketType
    created_at: datetime
    updated_at: datetime
