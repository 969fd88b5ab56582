from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from enum import Enum
from typing import Any
from uuid import UUID

from psycopg import AsyncConnection, sql

from ticketing.core.database import get_connection
from ticketing.models.entities import (
    MUTABLE_FIELDS,
    TicketEntity,
    TicketPriority,
    TicketStatus,
    TicketType,
)
from ticketing.repositories.base import ConditionalCheckFailedError

COLUMNS = (
    "id",
    "title",
    "description",
    "status",
    "reporter_id",
    "assigned_to_id",
    "priority",
    "type",
    "created_at",
    "updated_at",
)
UPDATABLE_COLUMNS = frozenset((*MUTABLE_FIELDS, "updated_at"))


def _to_ticket_entity(row: dict[str, Any]) -> TicketEntity:
    return TicketEntity(
        id=row["id"],
        title=row["title"],
        description=row["description"],
        status=TicketStatus(row["status"]),
        reporter_id=row["reporter_id"],
        assigned_to_id=row["assigned_to_id"],
        priority=TicketPriority(row["priority"]),
        type=TicketType(row["type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _to_db_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


class PostgresTicketRepository:
    def __init__(self, database_url: str | None = None, table: str = "tickets") -> None:
        self.database_url = database_url
        self.table = sql.Identifier(table)
        self._returning = sql.SQL(", ").join(map(sql.Identifier, COLUMNS))

    @asynccontextmanager
    async def _use_connection(
        self, connection: AsyncConnection | None
    ) -> AsyncIterator[AsyncConnection]:
        if connection is not None:
            yield connection
            return
        async with get_connection(self.database_url) as managed:
            yield managed

    async def put(
        self, ticket: TicketEntity, connection: AsyncConnection | None = None
    ) -> TicketEntity:
        query = sql.SQL(
            "INSERT INTO {table} ({columns}) VALUES ({values}) RETURNING {columns}"
        ).format(
            table=self.table,
            columns=self._returning,
            values=sql.SQL(", ").join(sql.Placeholder() * len(COLUMNS)),
        )
        params = [_to_db_value(getattr(ticket, column)) for column in COLUMNS]
        async with self._use_connection(connection) as active_connection:
            async with active_connection.cursor() as cursor:
                await cursor.execute(query, params)
                row = await cursor.fetchone()
        if row is None:
            raise RuntimeError("Failed to create ticket.")
        return _to_ticket_entity(row)

    async def get(
        self, ticket_id: UUID, connection: AsyncConnection | None = None
    ) -> TicketEntity | None:
        query = sql.SQL("SELECT {columns} FROM {table} WHERE id = %s").format(
            columns=self._returning,
            table=self.table,
        )
        async with self._use_connection(connection) as active_connection:
            async with active_connection.cursor() as cursor:
                await cursor.execute(query, (ticket_id,))
                row = await cursor.fetchone()
        if row is None:
            return None
        return _to_ticket_entity(row)

    async def scan(self, connection: AsyncConnection | None = None) -> list[TicketEntity]:
        query = sql.SQL("SELECT {columns} FROM {table}").format(
            columns=self._returning,
            table=self.table,
        )
        async with self._use_connection(connection) as active_connection:
            async with active_connection.cursor() as cursor:
                await cursor.execute(query)
                rows = await cursor.fetchall()
        return [_to_ticket_entity(row) for row in rows]

    async def update_if_exists(
        self,
        ticket_id: UUID,
        changes: dict[str, Any],
        connection: AsyncConnection | None = None,
    ) -> TicketEntity:
        unknown = set(changes) - UPDATABLE_COLUMNS
        if unknown:
            raise ValueError(f"Columns cannot be updated: {sorted(unknown)}")

        # A single UPDATE ... WHERE id matches no row when the ticket is gone,
        # so the existence check and the write cannot interleave.
        assignments = sql.SQL(", ").join(
            sql.SQL("{} = %s").format(sql.Identifier(column)) for column in changes
        )
        query = sql.SQL(
            "UPDATE {table} SET {assignments} WHERE id = %s RETURNING {columns}"
        ).format(
            table=self.table,
            assignments=assignments,
            columns=self._returning,
        )
        params = [*(_to_db_value(value) for value in changes.values()), ticket_id]
        async with self._use_connection(connection) as active_connection:
            async with active_connection.cursor() as cursor:
                await cursor.execute(query, params)
                row = await cursor.fetchone()
        if row is None:
            raise ConditionalCheckFailedError(ticket_id)
        return _to_ticket_entity(row)

    async def delete_if_exists(
        self, ticket_id: UUID, connection: AsyncConnection | None = None
    ) -> None:
        query = sql.SQL("DELETE FROM {table} WHERE id = %s").format(table=self.table)
        async with self._use_connection(connection) as active_connection:
            async with active_connection.cursor() as cursor:
                await cursor.execute(query, (ticket_id,))
                deleted = cursor.rowcount > 0
        if not deleted:
            raise ConditionalCheckFailedError(ticket_id)
