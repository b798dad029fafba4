from fastapi import APIRouter
from catalog_api.config import settings
from catalog_api.models import CatalogResponse
from catalog_api.services.catalog_service import fetch_catalog

router = APIRouter()

@router.get("/", response_model=CatalogResponse)
async def get_catalog(supplier: str | None = None, query: str = ""):
    result = await fetch_catalog(supplier or settings.DEFAULT_SUPPLIER, query)
    return result
