import logging
from typing import Awaitable, Callable

from catalog_api.errors import CatalogError
from catalog_api.normalizer.pipeline import normalize_product
from catalog_api.sanmar.fetch_products import fetch_sanmar_products
from catalog_api.sns.fetch_products import fetch_sns_products

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Awaitable[list]]

DEFAULT_FETCHERS: dict[str, Fetcher] = {
    "sns": fetch_sns_products,
    "sanmar": fetch_sanmar_products,
}
FALLBACK = {"sns": "sanmar", "sanmar": "sns"}


class InvalidSupplier(CatalogError):
    pass


async def fetch_catalog(supplier: str, query: str = "", fetchers: dict[str, Fetcher] | None = None) -> dict:
    """
    Query one supplier and return the unified catalog payload.

    If the chosen supplier returns nothing, the other one is asked once.
    Upstream errors are not retried and propagate to the caller.
    """
    fetchers = fetchers or DEFAULT_FETCHERS
    if supplier not in FALLBACK:
        raise InvalidSupplier("Invalid supplier", payload={"supplier": supplier})

    source = supplier
    raw = await fetchers[source](query)

    if not raw:
        fallback = FALLBACK[supplier]
        logger.info(f"No results from {supplier} — falling back to {fallback}")
        source = fallback
        raw = await fetchers[source](query)

    products = [normalize_product(p) for p in raw]
    logger.info(f"✔ Catalog query {query!r} → {len(products)} products from {source}")
    return {"provider": source, "count": len(products), "products": products}
