from typing import Iterable

from catalog_api.models import CanonicalProduct


def identity(product: CanonicalProduct) -> tuple[str, str]:
    return (product.sku, product.sizeName)


def dedupe(products: Iterable[CanonicalProduct]) -> list[CanonicalProduct]:
    """Keep the first record for each (sku, sizeName); later repeats are dropped."""
    seen: set[tuple[str, str]] = set()
    out: list[CanonicalProduct] = []
    for product in products:
        key = identity(product)
        if key in seen:
            continue
        seen.add(key)
        out.append(product)
    return out
