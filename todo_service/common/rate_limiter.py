from fastapi import FastAPI
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from todo_service.common.exceptions import rate_limit_exception_handler


def create_rate_limiter(rate_limit: str, storage_uri: str) -> Limiter:
    return Limiter(
        key_func=get_remote_address,
        application_limits=[rate_limit],
        storage_uri=storage_uri,
    )


def setup_rate_limiter(app: FastAPI, rate_limit: str, storage_uri: str) -> Limiter:
    limiter = create_rate_limiter(rate_limit, storage_uri)
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)  # type: ignore
    return limiter
