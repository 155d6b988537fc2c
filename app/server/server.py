"""Server module: the assembled site application and its middleware stack."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.logging import get_module_logger
from infrastructure.services import get_settings
from server.lifespan import lifespan
from server.middleware import (
    CanonicalHostMiddleware,
    LocaleMiddleware,
    NoIndexMiddleware,
    RequestContextMiddleware,
)

logger = get_module_logger()
settings = get_settings()

handler = FastAPI(title=settings.site.SITE_NAME, lifespan=lifespan)
setup_rate_limiter(handler)

# Added innermost first; RequestContextMiddleware wraps the rest.
handler.add_middleware(LocaleMiddleware)
handler.add_middleware(NoIndexMiddleware)
handler.add_middleware(CanonicalHostMiddleware)
handler.add_middleware(RequestContextMiddleware)

allow_origins = ["*"] if settings.is_production else settings.server.allowed_origins
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

handler.include_router(api_router)
