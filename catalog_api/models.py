from pydantic import BaseModel
from typing import List


class CanonicalProduct(BaseModel):
    sku: str = ""
    brandName: str = ""
    styleName: str = ""
    colorName: str = ""
    sizeName: str = ""
    title: str = ""
    price: float = 0
    imageFront: str = ""
    imageBack: str = ""
    provider: str = ""


class CatalogProduct(BaseModel):
    brand: str = ""
    style: str = ""
    color: str = ""
    size: str = ""
    price: float = 0
    imageFront: str = ""
    imageBack: str = ""
    sku: str = ""
    provider: str = ""


class CatalogResponse(BaseModel):
    provider: str
    count: int
    products: List[CatalogProduct] = []


class SanMarItemsResponse(BaseModel):
    count: int
    items: List[CanonicalProduct] = []
