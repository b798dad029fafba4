from fastapi import APIRouter
from catalog_api.models import SanMarItemsResponse
from catalog_api.sanmar.fetch_products import fetch_sanmar_products

router = APIRouter()

@router.get("/", response_model=SanMarItemsResponse)
async def get_sanmar_products(style: str = "", partnumber: str = "", styleid: str = ""):
    items = await fetch_sanmar_products(style, partnumber, styleid)
    return {"count": len(items), "items": items}
