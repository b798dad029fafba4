import sys, os, json

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(ROOT)

from catalog_api.normalizer.mapper import SANMAR_ALIASES, SNS_ALIASES
from catalog_api.normalizer.pipeline import normalize_product, normalize_response
from catalog_api.normalizer.tree import tree_from_json, tree_from_xml

# Usage: python scripts/normalize_saved_response.py <saved.xml|saved.json> [dot.path.override]
# Handy for checking a captured upstream payload against the locator before
# setting SANMAR_PRODUCT_PATH.

def main():
    if len(sys.argv) < 2:
        print("usage: normalize_saved_response.py FILE [PATH]")
        sys.exit(1)

    filename = sys.argv[1]
    path = sys.argv[2] if len(sys.argv) > 2 else None

    with open(filename, "rb") as f:
        raw = f.read()

    if filename.endswith(".json"):
        tree, provider, aliases = tree_from_json(raw), "sns", SNS_ALIASES
    else:
        tree, provider, aliases = tree_from_xml(raw), "sanmar", SANMAR_ALIASES

    products = normalize_response(tree, provider, aliases, path=path)
    print(f"Located {len(products)} products")
    print(json.dumps([normalize_product(p) for p in products], indent=2))

if __name__ == "__main__":
    main()
