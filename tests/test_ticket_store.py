import asyncio
from uuid import UUID

import pytest

from tests.helpers.fakes import (
    ASSIGNEE_ID,
    REPORTER_ID,
    UNKNOWN_ID,
    RecordingTicketRepository,
    create_payload,
    update_payload,
)
from ticketing.core.errors import NotFoundError
from ticketing.models.entities import TicketPriority, TicketStatus, TicketType
from ticketing.models.schemas.ticket import (
    CreateTicketRequest,
    PatchTicketRequest,
    TicketRead,
    UpdateTicketRequest,
)
from ticketing.repositories.base import ConditionalCheckFailedError
from ticketing.services.ticket_store import TicketStore

pytestmark = pytest.mark.anyio


async def _create(store: TicketStore, **overrides: object) -> TicketRead:
    return await store.create(CreateTicketRequest.model_validate(create_payload(**overrides)))


async def test_create_assigns_id_and_timestamps(store: TicketStore) -> None:
    ticket = await _create(store)

    assert isinstance(ticket.id, UUID)
    assert ticket.status is TicketStatus.NEW
    assert ticket.priority is TicketPriority.MEDIUM
    assert ticket.type is TicketType.INCIDENT
    assert ticket.reporter_id == UUID(REPORTER_ID)
    assert ticket.created_at == ticket.updated_at
    assert ticket.created_at.tzinfo is not None


async def test_create_generates_unique_ids(store: TicketStore) -> None:
    first = await _create(store)
    second = await _create(store)

    assert first.id != second.id


async def test_get_by_id_round_trip(store: TicketStore) -> None:
    created = await _create(store, priority="HIGH", assignedToId=ASSIGNEE_ID)

    loaded = await store.get_by_id(created.id)

    assert loaded == created


async def test_get_by_id_returns_none_when_absent(store: TicketStore) -> None:
    assert await store.get_by_id(UUID(UNKNOWN_ID)) is None


async def test_list_all(store: TicketStore) -> None:
    assert await store.list_all() == []

    first = await _create(store, title="First")
    second = await _create(store, title="Second")

    tickets = await store.list_all()
    assert {ticket.id for ticket in tickets} == {first.id, second.id}


async def test_update_replaces_every_mutable_field(store: TicketStore) -> None:
    created = await _create(store)

    updated = await store.update(
        created.id,
        UpdateTicketRequest.model_validate(update_payload()),
    )

    assert updated.id == created.id
    assert updated.title == "Login outage"
    assert updated.description == "SSO callback fails for every user"
    assert updated.status is TicketStatus.IN_PROGRESS
    assert updated.priority is TicketPriority.CRITICAL
    assert updated.assigned_to_id == UUID(ASSIGNEE_ID)
    assert updated.created_at == created.created_at
    assert updated.updated_at >= created.updated_at
    assert await store.get_by_id(created.id) == updated


async def test_update_without_assignee_clears_it(store: TicketStore) -> None:
    created = await _create(store, assignedToId=ASSIGNEE_ID)
    payload = update_payload()
    del payload["assignedToId"]

    updated = await store.update(created.id, UpdateTicketRequest.model_validate(payload))

    assert updated.assigned_to_id is None


async def test_patch_changes_only_supplied_fields(store: TicketStore) -> None:
    created = await _create(store, assignedToId=ASSIGNEE_ID)

    patched = await store.patch(
        created.id,
        PatchTicketRequest.model_validate({"status": "RESOLVED"}),
    )

    assert patched.status is TicketStatus.RESOLVED
    assert patched.title == created.title
    assert patched.description == created.description
    assert patched.assigned_to_id == UUID(ASSIGNEE_ID)
    assert patched.created_at == created.created_at
    assert patched.updated_at >= created.updated_at


async def test_patch_can_clear_assignee(store: TicketStore) -> None:
    created = await _create(store, assignedToId=ASSIGNEE_ID)

    patched = await store.patch(
        created.id,
        PatchTicketRequest.model_validate({"assignedToId": None}),
    )

    assert patched.assigned_to_id is None
    assert patched.status is TicketStatus.NEW


@pytest.mark.parametrize("operation", ["update", "patch", "delete"])
async def test_mutating_unknown_id_raises_not_found_and_creates_nothing(
    store: TicketStore,
    repository: RecordingTicketRepository,
    operation: str,
) -> None:
    ticket_id = UUID(UNKNOWN_ID)

    with pytest.raises(NotFoundError) as exc_info:
        if operation == "update":
            await store.update(ticket_id, UpdateTicketRequest.model_validate(update_payload()))
        elif operation == "patch":
            await store.patch(ticket_id, PatchTicketRequest.model_validate({"status": "CLOSED"}))
        else:
            await store.delete(ticket_id)

    assert exc_info.value.status_code == 404
    assert exc_info.value.code == "ticket_not_found"
    assert isinstance(exc_info.value.__cause__, ConditionalCheckFailedError)
    assert repository.items == {}
    assert "get" not in repository.calls


async def test_delete_removes_ticket(store: TicketStore) -> None:
    created = await _create(store)

    await store.delete(created.id)

    assert await store.get_by_id(created.id) is None
    with pytest.raises(NotFoundError):
        await store.delete(created.id)


async def test_update_after_delete_is_not_found(store: TicketStore) -> None:
    created = await _create(store)
    await store.delete(created.id)

    with pytest.raises(NotFoundError):
        await store.patch(created.id, PatchTicketRequest.model_validate({"title": "Back"}))
    assert await store.list_all() == []


async def test_concurrent_deletes_have_exactly_one_winner(store: TicketStore) -> None:
    created = await _create(store)

    results = await asyncio.gather(
        *(store.delete(created.id) for _ in range(5)),
        return_exceptions=True,
    )

    failures = [result for result in results if isinstance(result, NotFoundError)]
    assert results.count(None) == 1
    assert len(failures) == 4
