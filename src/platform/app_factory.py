"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

import time
from collections.abc import Awaitable, Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from slowapi.middleware import SlowAPIMiddleware

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import AUTH_BASE, HEALTH, PRODUCT_BASE
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_config import status_code_level
from src.platform.middleware.rate_limiter import create_limiter
from src.platform.middleware.security_headers import add_security_headers
from src.service.inventory.driving_adapter.http_controller.auth_controller import (
    router as auth_router,
)
from src.service.inventory.driving_adapter.http_controller.product_controller import (
    router as product_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Product inventory management with JWT authentication',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    title = f'{settings.PROJECT_NAME}{title_suffix}'

    app = FastAPI(
        title=title,
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Rate limiting (innermost middleware)
    app.state.limiter = create_limiter(settings)
    app.add_middleware(SlowAPIMiddleware)  # type: ignore

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    app.middleware('http')(add_security_headers)
    app.middleware('http')(log_access)

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(auth_router, prefix=AUTH_BASE, tags=['auth'])
    app.include_router(product_router, prefix=PRODUCT_BASE, tags=['products'])

    # Register common endpoints
    _register_common_endpoints(app)

    return app


async def log_access(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """HTTP access log: ``METHOD path -> status (ms)``"""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000

    Logger.base.log(
        status_code_level(response.status_code),
        f'{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)',
    )
    return response


def _register_common_endpoints(app: FastAPI) -> None:
    @app.get(HEALTH)
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}
