import logging

from catalog_api.normalizer.tree import NodeKind, RawNode, as_sequence, node_kind, walk

logger = logging.getLogger(__name__)

# ----------------------------
# Key predicates (all over lower-cased keys)
# ----------------------------

DIRECT_PRODUCT_SUFFIXES = ("products", "product")
BUCKET_FRAGMENTS = ("product", "item")
# SOAP wrappers such as getProductsResponse / return carry the word "product"
# but hold the envelope, not a product.
WRAPPER_SUFFIXES = ("response", "result", "request", "return")
PRODUCTISH_KEYS = ("sku", "partnumber", "stylenumber", "productname", "brand", "brandname")


def _norm(key: str | None) -> str:
    return (key or "").strip().lower()


def is_direct_products_key(key: str | None) -> bool:
    k = _norm(key)
    return any(k.endswith(suffix) for suffix in DIRECT_PRODUCT_SUFFIXES)


def is_bucket_key(key: str | None) -> bool:
    k = _norm(key)
    if not k or any(k.endswith(suffix) for suffix in WRAPPER_SUFFIXES):
        return False
    return any(fragment in k for fragment in BUCKET_FRAGMENTS)


def is_productish(node: RawNode) -> bool:
    if node_kind(node) is not NodeKind.MAPPING:
        return False
    return any(_norm(k) in PRODUCTISH_KEYS for k in node)


def _mappings(nodes) -> list[dict]:
    return [n for n in nodes if node_kind(n) is NodeKind.MAPPING]


# ----------------------------
# Strategies
# ----------------------------

def find_direct_products(body: RawNode) -> list[dict]:
    found: list[list[dict]] = []

    def visit(node, key):
        if found or node_kind(node) is not NodeKind.MAPPING:
            return
        if is_direct_products_key(key) and "Product" in node:
            found.append(_mappings(as_sequence(node["Product"])))

    walk(body, visit)
    return found[0] if found else []


def find_keyed_buckets(body: RawNode) -> list[dict]:
    records: list[dict] = []
    taken: set[int] = set()

    def visit(node, key):
        if not is_bucket_key(key):
            return
        kind = node_kind(node)
        if kind is NodeKind.SEQUENCE:
            for element in _mappings(node):
                if id(element) not in taken:
                    taken.add(id(element))
                    records.append(element)
        elif kind is NodeKind.MAPPING and id(node) not in taken:
            taken.add(id(node))
            records.append(node)

    walk(body, visit)
    return records


def sniff_products(body: RawNode) -> list[dict]:
    records: list[dict] = []

    def visit(node, key):
        if node_kind(node) is NodeKind.SEQUENCE:
            records.extend(n for n in node if is_productish(n))

    walk(body, visit)
    return records


def resolve_path(body: RawNode, path: str) -> RawNode | None:
    """Follow a dot-separated path through mappings. Returns None if any hop is missing."""
    node = body
    for part in (p for p in path.split(".") if p):
        if node_kind(node) is not NodeKind.MAPPING or part not in node:
            return None
        node = node[part]
    return node


def locate_products(body: RawNode, path: str | None = None) -> list[dict]:
    """
    Find the raw product records inside a decoded response body.

    An explicit `path` wins when it resolves. Otherwise the strategies run
    from most to least specific and the first non-empty result is returned:
    direct `...Products/Product` containers, product/item keyed buckets, then
    sequences of product-looking mappings. No match is an empty list.
    """
    if path:
        target = resolve_path(body, path)
        if target is not None:
            logger.debug("Product path override %r resolved", path)
            return _mappings(as_sequence(target))
        logger.warning("Product path override %r not found in response; falling back to heuristics", path)

    strategies = (
        ("direct", find_direct_products),
        ("bucket", find_keyed_buckets),
        ("sniff", sniff_products),
    )
    for name, strategy in strategies:
        records = strategy(body)
        if records:
            logger.debug("Located %d product records via %s strategy", len(records), name)
            return records

    return []
