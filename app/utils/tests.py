"""Helpers for building small FastAPI apps in tests."""

from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple, Type, Union

import httpx
from fastapi import APIRouter, FastAPI

from api.dependencies.rate_limits import setup_rate_limiter

MiddlewareSpec = Tuple[Type[Any], Dict[str, Any]]


def create_test_app(
    routers: Union[APIRouter, Iterable[APIRouter]],
    middlewares: Optional[Sequence[MiddlewareSpec]] = None,
    dependency_overrides: Optional[Dict[Callable, Callable]] = None,
) -> FastAPI:
    """Bare app with the rate limiter, the given middleware and routers.

    Middlewares are ``(class, kwargs)`` pairs added innermost first.

    Example:
        app = create_test_app(
            pages_router,
            middlewares=[(NoIndexMiddleware, {"settings_provider": lambda: settings})],
            dependency_overrides={get_settings: lambda: settings},
        )
    """
    app = FastAPI()
    setup_rate_limiter(app)

    for middleware_class, options in middlewares or ():
        app.add_middleware(middleware_class, **options)

    for router in [routers] if isinstance(routers, APIRouter) else routers:
        app.include_router(router)

    app.dependency_overrides.update(dependency_overrides or {})
    return app


async def rate_limiting_helper(
    app: FastAPI,
    endpoint: str,
    request_limit: int,
    method: str = "get",
    expected_status: int = 200,
    headers: Optional[dict] = None,
) -> None:
    """Send ``request_limit`` allowed requests, then assert the next is a 429."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        send = getattr(client, method.lower())

        for attempt in range(1, request_limit + 1):
            response = await send(endpoint, headers=headers or {})
            assert (
                response.status_code == expected_status
            ), f"Request {attempt} failed with status {response.status_code}"

        blocked = await send(endpoint, headers=headers or {})
        assert blocked.status_code == 429, "Expected rate limiting to trigger"
        assert blocked.json() == {"message": "Rate limit exceeded"}
