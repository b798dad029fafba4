import math
from typing import Mapping

from catalog_api.models import CanonicalProduct
from catalog_api.normalizer.tree import NodeKind, node_kind

AliasTable = dict[str, tuple[str, ...]]

# ----------------------------
# Alias tables
# ----------------------------
# Spellings are exactly as observed in the upstream payloads. Order is priority.

SANMAR_ALIASES: AliasTable = {
    "sku": (
        "SKU", "Sku", "PartNumber", "PartNo", "StyleNumber", "StyleNo",
        "ItemNumber", "ItemNo", "Id", "ID",
    ),
    "brandName": ("BrandName", "Brand", "brandName", "brand", "Mill", "MillName"),
    "styleName": ("StyleName", "Style", "styleName", "style", "ProductName", "productName", "Name"),
    "colorName": ("ColorName", "Color", "colorName", "color", "CatalogColor", "catalogColor"),
    "sizeName": ("SizeName", "Size", "sizeName", "size"),
    "title": (
        "Title", "ProductTitle", "productTitle", "title",
        "ProductDescription", "productDescription", "Description", "description",
    ),
    "price": (
        "Price", "price", "PiecePrice", "piecePrice", "CustomerPrice", "customerPrice",
        "CasePrice", "casePrice", "SalePrice", "RetailPrice", "retailPrice",
    ),
    "imageFront": (
        "ImageFront", "FrontImage", "ColorFrontImage", "colorFrontImage",
        "FrontModel", "frontModel", "FrontFlat", "frontFlat", "ProductImage", "productImage",
    ),
    "imageBack": (
        "ImageBack", "BackImage", "ColorBackImage", "colorBackImage",
        "BackModel", "backModel", "BackFlat", "backFlat",
    ),
}

SNS_ALIASES: AliasTable = {
    "sku": ("sku", "gtin", "skuID_Master", "styleID"),
    "brandName": ("brandName",),
    "styleName": ("styleName", "title"),
    "colorName": ("colorName",),
    "sizeName": ("sizeName",),
    "title": ("title", "description"),
    "price": ("customerPrice", "piecePrice", "salePrice", "mapPrice"),
    "imageFront": ("colorFrontImage", "colorOnModelFrontImage", "colorSideImage"),
    "imageBack": ("colorBackImage", "colorOnModelBackImage"),
}

TEXT_FIELDS = ("sku", "brandName", "styleName", "colorName", "sizeName", "title", "imageFront", "imageBack")
IMAGE_KEY_FRAGMENT = "image"
URL_PREFIXES = ("http://", "https://")


# ----------------------------
# Coercion helpers
# ----------------------------

def leaf_value(value):
    # <Price xsi:type="xsd:decimal">4.18</Price> decodes to {"@_type": ..., "#text": "4.18"}
    if node_kind(value) is NodeKind.MAPPING and "#text" in value:
        return value["#text"]
    return value


def as_text(value) -> str:
    """Scalar (or attributed leaf) -> stripped string; containers and None -> ""."""
    value = leaf_value(value)
    if value is None or node_kind(value) is not NodeKind.SCALAR:
        return ""
    return str(value).strip()


def as_number(value) -> float | None:
    """Parse a finite float, tolerating "$1,234.50". Returns None when not numeric."""
    value = leaf_value(value)
    if value is None or isinstance(value, bool) or node_kind(value) is not NodeKind.SCALAR:
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    else:
        s = str(value).strip().replace(",", "").lstrip("$").strip()
        if not s:
            return None
        try:
            number = float(s)
        except ValueError:
            return None
    return number if math.isfinite(number) else None


def first_text(record: Mapping, aliases: tuple[str, ...]) -> str:
    for alias in aliases:
        text = as_text(record.get(alias))
        if text:
            return text
    return ""


def first_number(record: Mapping, aliases: tuple[str, ...]) -> float:
    # A present-but-malformed higher priority alias is skipped, not zeroed.
    for alias in aliases:
        number = as_number(record.get(alias))
        if number is not None:
            return number
    return 0.0


def sniff_image_url(record: Mapping) -> str:
    for key, value in record.items():
        value = leaf_value(value)
        if IMAGE_KEY_FRAGMENT in str(key).lower() and isinstance(value, str):
            url = value.strip()
            if url.startswith(URL_PREFIXES):
                return url
    return ""


# ----------------------------
# Mapper
# ----------------------------

def map_record(record: Mapping, aliases: AliasTable = SANMAR_ALIASES) -> CanonicalProduct:
    """
    Map one raw vendor record onto CanonicalProduct.

    Each field takes the first non-empty alias from the vendor's table.
    `provider` is left empty; the caller knows which vendor answered.
    """
    fields = {name: first_text(record, aliases.get(name, ())) for name in TEXT_FIELDS}

    if not fields["title"]:
        fields["title"] = fields["styleName"]
    if not fields["imageFront"]:
        fields["imageFront"] = sniff_image_url(record)

    return CanonicalProduct(
        **fields,
        price=first_number(record, aliases.get("price", ())),
    )
