from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg import AsyncConnection
from psycopg.rows import dict_row

from ticketing.core.config import get_settings


def get_database_url() -> str:
    return get_settings().database_url


@asynccontextmanager
async def get_connection(database_url: str | None = None) -> AsyncIterator[AsyncConnection]:
    url = database_url or get_database_url()
    async with await AsyncConnection.connect(url, row_factory=dict_row) as connection:
        yield connection
