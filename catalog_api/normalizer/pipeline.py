import logging
from typing import Any, Mapping

from pydantic import BaseModel

from catalog_api.models import CanonicalProduct
from catalog_api.normalizer.dedup import dedupe
from catalog_api.normalizer.locator import locate_products
from catalog_api.normalizer.mapper import SANMAR_ALIASES, AliasTable, as_number, as_text, map_record
from catalog_api.normalizer.tree import RawNode

logger = logging.getLogger(__name__)

# public field -> source keys, first present wins
PUBLIC_FIELDS: dict[str, tuple[str, ...]] = {
    "brand": ("brand", "brandName"),
    "style": ("style", "styleName"),
    "color": ("color", "colorName"),
    "size": ("size", "sizeName"),
    "imageFront": ("imageFront", "colorFrontImage"),
    "imageBack": ("imageBack", "colorBackImage"),
    "sku": ("sku", "productId"),
}
PRICE_KEYS = ("price", "customerPrice", "retailPrice")


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def _first_present(p: Mapping, keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = p.get(key)
        if _is_present(value):
            return value
    return None


def normalize_product(p: Mapping | BaseModel) -> dict:
    """
    Collapse either vendor's record shape into the public catalog shape.

    Works on raw S&S records (customerPrice / colorFrontImage ...), on
    CanonicalProduct and on its own output. Never raises.
    """
    if isinstance(p, BaseModel):
        p = p.model_dump()

    out = {field: as_text(_first_present(p, keys)) for field, keys in PUBLIC_FIELDS.items()}

    price = as_number(_first_present(p, PRICE_KEYS))
    out["price"] = price if price is not None else 0

    provider = as_text(p.get("provider"))
    if not provider:
        provider = "sns" if _is_present(p.get("customerPrice")) else "sanmar"
    out["provider"] = provider

    return out


def normalize_response(
    tree: RawNode,
    provider: str,
    aliases: AliasTable = SANMAR_ALIASES,
    path: str | None = None,
) -> list[CanonicalProduct]:
    """Locate raw records in a decoded response, map them and drop (sku, size) repeats."""
    raw_records = locate_products(tree, path=path)

    mapped = []
    for record in raw_records:
        product = map_record(record, aliases)
        product.provider = provider
        mapped.append(product)

    products = dedupe(mapped)
    logger.info(
        f"Normalized {provider} response: {len(raw_records)} raw records → {len(products)} products"
    )
    return products
