import asyncio
import os
from typing import Any, Callable

from fastapi.testclient import TestClient
import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine

from test.shared.utils import bearer, register_user


@pytest.fixture
def registered_user(client: TestClient, clean_database: None) -> dict[str, Any]:
    """Fresh user for the current test: ``{'user': {...}, 'token': '...'}``"""
    return register_user(client)


@pytest.fixture
def auth_headers(registered_user: dict[str, Any]) -> dict[str, str]:
    return bearer(registered_user['token'])


@pytest.fixture
def execute_sql_statement() -> Callable[..., list[dict[str, Any]] | None]:
    def _execute(
        statement: str, params: dict[str, Any] | None = None, fetch: bool = False
    ) -> list[dict[str, Any]] | None:
        async def _run() -> list[dict[str, Any]] | None:
            engine = create_async_engine(os.environ['DATABASE_URL'])
            try:
                async with engine.begin() as conn:
                    result = await conn.execute(text(statement), params or {})
                    if fetch:
                        return [dict(row._mapping) for row in result]
                    return None
            finally:
                await engine.dispose()

        return asyncio.run(_run())

    return _execute
