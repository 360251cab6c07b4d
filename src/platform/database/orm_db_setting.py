"""
SQLAlchemy async engine and session management

This module provides:
1. AsyncEngineManager: creates the engine lazily and rebinds it when the event loop changes
2. Base: declarative base for all ORM models
3. Database: the injectable store handle (one per container), with bounded sessions
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

import anyio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import Settings, settings as default_settings
from src.platform.exception.exceptions import StoreTimeoutError
from src.platform.logging.loguru_io import Logger


# =============================================================================
# Event-loop-aware Engine Manager
# =============================================================================


class AsyncEngineManager:
    """
    Manages a SQLAlchemy async engine with event loop awareness.

    Ensures the engine is always bound to the current event loop to prevent
    "Task got Future attached to a different loop" errors (test clients and
    pytest-asyncio run separate loops).
    """

    def __init__(self, *, url: str, engine_options: dict[str, Any]) -> None:
        self._url = url
        self._engine_options = engine_options
        self._engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop running, create engine without loop tracking
            if self._engine is None:
                self._engine = self._create_engine()
            return self._engine

        if self._loop is not current_loop:
            if self._engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, replacing engine...')
                self._session_maker = None
            Logger.base.info(f'🔗 [DB] Creating engine for event loop {id(current_loop)}')
            self._engine = self._create_engine()
            self._loop = current_loop

        return self._engine  # type: ignore[return-value]

    def get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine()
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_maker

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        self._loop = None

    def _create_engine(self) -> AsyncEngine:
        return create_async_engine(self._url, echo=False, future=True, **self._engine_options)


def engine_options_for(config: Settings) -> dict[str, Any]:
    """Pool configuration; SQLite drivers manage their own connections."""
    if config.is_sqlite:
        return {}
    return {
        'pool_size': config.DB_POOL_SIZE,
        'max_overflow': config.DB_POOL_MAX_OVERFLOW,
        'pool_timeout': config.DB_POOL_TIMEOUT,
        'pool_recycle': config.DB_POOL_RECYCLE,
        'pool_pre_ping': config.DB_POOL_PRE_PING,
    }


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


# =============================================================================
# Database Class (DI provider)
# =============================================================================


class Database:
    """
    Store handle provided by the DI container.

    Every session is bounded by ``DB_OPERATION_TIMEOUT``; a session that outlives it
    is cancelled and surfaces as StoreTimeoutError instead of hanging the request.
    """

    def __init__(self, config: Settings | None = None) -> None:
        self._config = config or default_settings
        self._engine_manager = AsyncEngineManager(
            url=self._config.DATABASE_URL,
            engine_options=engine_options_for(self._config),
        )
        self._operation_timeout = self._config.DB_OPERATION_TIMEOUT

    @property
    def engine(self) -> AsyncEngine:
        return self._engine_manager.get_engine()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session context manager; rolls back on exception."""
        session_maker = self._engine_manager.get_session_maker()
        try:
            with anyio.fail_after(self._operation_timeout):
                async with session_maker() as session:
                    yield session
        except TimeoutError as e:
            Logger.base.error(
                f'⏱️ [DB] Session exceeded {self._operation_timeout}s and was cancelled'
            )
            raise StoreTimeoutError() from e

    async def ping(self) -> None:
        async with self.session() as session:
            await session.execute(text('SELECT 1'))

    async def create_tables(self) -> None:
        """Create database tables if they don't exist"""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)

    async def dispose(self) -> None:
        await self._engine_manager.dispose()
