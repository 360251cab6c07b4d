"""
Default request rate limit

One fixed window per client address, applied to every route by SlowAPIMiddleware.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from src.platform.config.core_setting import Settings


def create_limiter(config: Settings) -> Limiter:
    return Limiter(
        key_func=get_remote_address,
        default_limits=[config.RATE_LIMIT_DEFAULT],
        enabled=config.RATE_LIMIT_ENABLED,
    )
