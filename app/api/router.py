from fastapi import APIRouter

from api.routes.i18n import router as i18n_router
from api.routes.pages import router as pages_router
from api.routes.robots import router as robots_router
from api.routes.sitemap import router as sitemap_router
from api.routes.system import router as system_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(robots_router)
api_router.include_router(sitemap_router)
api_router.include_router(i18n_router, prefix="/api/v1")
# Catch-all page route goes last.
api_router.include_router(pages_router)
