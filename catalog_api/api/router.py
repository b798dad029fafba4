from fastapi import APIRouter
from catalog_api.api.routes import health, catalog, sanmar

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["Health"])
api_router.include_router(catalog.router, prefix="/catalog", tags=["Catalog"])
api_router.include_router(sanmar.router, prefix="/sanmar", tags=["SanMar"])
