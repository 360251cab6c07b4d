from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from secure import Secure


secure_headers = Secure.with_default_headers()

# Swagger UI and ReDoc load their assets from a CDN, which the default CSP forbids
DOCS_PATHS = frozenset({'/docs', '/docs/oauth2-redirect', '/redoc'})


async def add_security_headers(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    response = await call_next(request)
    if request.url.path not in DOCS_PATHS:
        secure_headers.set_headers(response)
    return response
