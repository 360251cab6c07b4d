"""
Test Configuration and Fixtures

This module provides:
- Test environment (SQLite test database, test log directory) set before app imports
- Session-scoped TestClient running the test lifespan
- Per-test table cleanup for integration tests

Architecture:
- Unit tests (marked ``unit``): no HTTP client, no database
- Integration tests: real app, real SQLite database, tables emptied before each test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time (src.platform.config.core_setting.settings)
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    db_path = Path(tempfile.gettempdir()) / f'inventory_test_{worker_id}.db'
    os.environ['TEST_DB_PATH'] = str(db_path)
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_path}'
    os.environ['ENVIRONMENT'] = 'test'
    os.environ['RATE_LIMIT_ENABLED'] = 'false'
    os.environ.setdefault('SECRET_KEY', 'test_secret_key_for_inventory_api')

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_sessionstart(session: pytest.Session) -> None:
    Path(os.environ['TEST_DB_PATH']).unlink(missing_ok=True)


def pytest_sessionfinish(session: pytest.Session, exitstatus: int) -> None:
    Path(os.environ['TEST_DB_PATH']).unlink(missing_ok=True)


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.append('clean_database')


# =============================================================================
# Database Cleanup
# =============================================================================
async def _clean_all_tables() -> None:
    from src.platform.database.orm_db_setting import Base
    import src.service.inventory.driven_adapter.model  # noqa: F401

    engine = create_async_engine(os.environ['DATABASE_URL'])
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
            for table in reversed(Base.metadata.sorted_tables):
                await conn.execute(table.delete())
    finally:
        await engine.dispose()


@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    await _clean_all_tables()
    yield


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[Any, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clear_client_headers(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    # Skip for unit tests - they don't use the HTTP client
    if 'unit' in [m.name for m in request.node.iter_markers()]:
        yield
        return
    client = request.getfixturevalue('client')
    client.headers.pop('Authorization', None)
    yield
    client.headers.pop('Authorization', None)
