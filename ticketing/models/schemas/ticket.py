import re
from datetime import datetime
from typing import Annotated, Any, ClassVar
from uuid import UUID

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    StringConstraints,
    field_validator,
    model_validator,
)
from pydantic_core import PydanticCustomError

from ticketing.models import CamelCaseModel, to_camel
from ticketing.models.entities import TicketPriority, TicketStatus, TicketType

TITLE_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 250

Title = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=TITLE_MAX_LENGTH),
]
Description = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=DESCRIPTION_MAX_LENGTH),
]

# 8-4-4-4-12 hex only; no braces, urn prefix or unhyphenated form.
CANONICAL_UUID = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)


def _require_canonical_uuid(value: Any) -> Any:
    if isinstance(value, str) and not CANONICAL_UUID.fullmatch(value):
        raise PydanticCustomError("uuid_parsing", "Input should be a valid UUID")
    return value


TicketUUID = Annotated[UUID, BeforeValidator(_require_canonical_uuid)]


class StrictRequest(BaseModel):
    """Request payload: camelCase keys only, unknown keys rejected."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    # (field path, violation code) -> client-facing message
    error_messages: ClassVar[dict[tuple[str, str], str]] = {
        ("title", "TOO_SMALL"): "Title is required",
        ("title", "TOO_BIG"): f"Title must be less than {TITLE_MAX_LENGTH} characters",
        ("description", "TOO_SMALL"): "Description is required",
        ("description", "TOO_BIG"): (
            f"Description must be less than {DESCRIPTION_MAX_LENGTH} characters"
        ),
        ("reporterId", "INVALID_UUID"): "Reporter ID must be a valid UUID",
        ("assignedToId", "INVALID_UUID"): "Assigned user ID must be a valid UUID",
    }


class CreateTicketRequest(StrictRequest):
    title: Title
    description: Description
    reporter_id: TicketUUID
    status: TicketStatus = TicketStatus.NEW
    assigned_to_id: TicketUUID | None = None
    priority: TicketPriority = TicketPriority.MEDIUM
    type: TicketType = TicketType.INCIDENT


class UpdateTicketRequest(StrictRequest):
    title: Title
    description: Description
    status: TicketStatus
    reporter_id: TicketUUID
    assigned_to_id: TicketUUID | None = None
    priority: TicketPriority
    type: TicketType


class PatchTicketRequest(StrictRequest):
    title: Title | None = None
    description: Description | None = None
    status: TicketStatus | None = None
    reporter_id: TicketUUID | None = None
    assigned_to_id: TicketUUID | None = None
    priority: TicketPriority | None = None
    type: TicketType | None = None

    @field_validator(
        "title",
        "description",
        "status",
        "reporter_id",
        "priority",
        "type",
        mode="before",
    )
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        # Only assignedToId may be cleared with an explicit null.
        if value is None:
            raise PydanticCustomError("null_not_allowed", "Field cannot be null")
        return value

    @model_validator(mode="after")
    def require_at_least_one_field(self) -> "PatchTicketRequest":
        if not self.model_fields_set:
            raise PydanticCustomError(
                "empty_payload",
                "At least one field must be provided for PATCH operation",
            )
        return self

    def changes(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.model_fields_set}


class TicketIdParam(StrictRequest):
    id: TicketUUID

    error_messages: ClassVar[dict[tuple[str, str], str]] = {
        ("id", "INVALID_UUID"): "Invalid ID format",
    }


class TicketRead(CamelCaseModel):
    id: UUID
    title: str
    description: str
    status: TicketStatus
    reporter_id: UUID
    assigned_to_id: UUID | None = None
    priority: TicketPriority
    type: TicketType
    created_at: datetime
    updated_at: datetime
