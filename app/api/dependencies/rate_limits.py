"""Per-client request limiting with slowapi.

The site runs behind a load balancer, so clients are keyed by the first
``X-Forwarded-For`` hop and only fall back to the socket peer address.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from infrastructure.logging import get_module_logger

logger = get_module_logger()


def client_address(request: Request) -> str:
    first_hop = request.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    return first_hop or get_remote_address(request)


limiter = Limiter(key_func=client_address)


async def rate_limit_handler(request: Request, exc: Exception):
    """Answer 429 with a JSON message; other exceptions are not handled here."""
    if not isinstance(exc, RateLimitExceeded):
        return None
    logger.warning(
        "rate_limit_exceeded",
        path=request.url.path,
        client=client_address(request),
        limit=str(exc.detail),
    )
    return JSONResponse(status_code=429, content={"message": "Rate limit exceeded"})


def setup_rate_limiter(app: FastAPI) -> None:
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter() -> Limiter:
    return limiter
