"""
Production FastAPI Application
"""

import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Inventory API] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Inventory API] Dependency injection wired')

    # Connect-or-exit: the API is useless without its store
    database = container.database()
    try:
        await database.ping()
    except Exception as e:
        Logger.base.critical(f'❌ [Inventory API] Database connection failed: {e}')
        await database.dispose()
        sys.exit(1)
    Logger.base.info('🗄️  [Inventory API] Database connected')

    await database.create_tables()
    Logger.base.info('📐 [Inventory API] Database tables ensured')

    Logger.base.info('✅ [Inventory API] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Inventory API] Shutting down...')

    await database.dispose()
    Logger.base.info('🗄️  [Inventory API] Database disconnected')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Inventory API] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)


@app.get('/', include_in_schema=False)
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
