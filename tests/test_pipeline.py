from catalog_api.models import CanonicalProduct
from catalog_api.normalizer.mapper import SNS_ALIASES
from catalog_api.normalizer.pipeline import normalize_product, normalize_response
from catalog_api.normalizer.tree import tree_from_xml


def test_cross_vendor_records_share_public_shape():
    sns = normalize_product({"customerPrice": 9.99, "colorFrontImage": "http://x/a.jpg"})
    sanmar = normalize_product({"price": 9.99, "imageFront": "http://x/a.jpg"})

    assert sns["provider"] == "sns"
    assert sanmar["provider"] == "sanmar"
    assert {k: v for k, v in sns.items() if k != "provider"} == {k: v for k, v in sanmar.items() if k != "provider"}
    assert set(sns) == {"brand", "style", "color", "size", "price", "imageFront", "imageBack", "sku", "provider"}
    assert sns["price"] == 9.99
    assert sns["imageFront"] == "http://x/a.jpg"


def test_normalize_product_resolution_order():
    out = normalize_product({
        "brand": "",
        "brandName": "Gildan",
        "styleName": "2000",
        "colorName": "White",
        "size": "M",
        "sizeName": "L",
        "retailPrice": "3.50",
        "productId": 17130,
        "colorBackImage": "http://x/b.jpg",
    })

    assert out == {
        "brand": "Gildan",
        "style": "2000",
        "color": "White",
        "size": "M",
        "price": 3.5,
        "imageFront": "",
        "imageBack": "http://x/b.jpg",
        "sku": "17130",
        "provider": "sanmar",
    }


def test_explicit_provider_wins():
    assert normalize_product({"customerPrice": 1, "provider": "sanmar"})["provider"] == "sanmar"


def test_normalize_product_is_total():
    out = normalize_product({})

    assert out["price"] == 0
    assert out["sku"] == ""
    assert normalize_product({"price": "free", "brand": ["x"]})["price"] == 0


def test_normalize_product_is_a_fixed_point():
    canonical = CanonicalProduct(sku="PC54-BLK-L", brandName="Port & Company", sizeName="L", price=4.18, provider="sanmar")

    once = normalize_product(canonical)

    assert normalize_product(once) == once
    assert once["brand"] == "Port & Company"


def test_normalize_response_end_to_end(sanmar_items_xml):
    products = normalize_response(tree_from_xml(sanmar_items_xml), "sanmar")

    assert [(p.sku, p.sizeName) for p in products] == [("PC54-BLK-L", "L"), ("PC54-BLK-XL", "XL")]
    first = products[0]
    assert first.provider == "sanmar"
    assert first.brandName == "Port & Company"
    assert first.colorName == "Black"
    assert first.price == 4.18
    assert first.imageFront.endswith("model_front.jpg")
    assert first.imageBack.endswith("model_back.jpg")
    assert products[1].imageFront == ""


def test_normalize_response_dedupes():
    tree = {"Items": [{"SKU": "A", "Size": "S", "Price": 1}, {"SKU": "A", "Size": "S", "Price": 2}]}

    products = normalize_response(tree, "sanmar")

    assert len(products) == 1
    assert products[0].price == 1


def test_scenario_c_no_products():
    assert normalize_response({"Envelope": {"Body": {"message": "No data"}}}, "sanmar") == []


def test_sns_list_payload(sns_products):
    products = normalize_response(sns_products, "sns", SNS_ALIASES)

    assert [p.sizeName for p in products] == ["S", "M"]
    assert all(p.provider == "sns" for p in products)


RPC_ENCODED_XML = """<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/"
    xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
    xmlns:xsd="http://www.w3.org/2001/XMLSchema">
  <soapenv:Body>
    <getProductsResponse>
      <return>
        <items>
          <SKU xsi:type="xsd:string">PC54-BLK-L</SKU>
          <Size xsi:type="xsd:string">L</Size>
          <Price xsi:type="xsd:decimal">4.18</Price>
        </items>
      </return>
    </getProductsResponse>
  </soapenv:Body>
</soapenv:Envelope>
"""


def test_normalize_response_reads_xsi_typed_leaves():
    products = normalize_response(tree_from_xml(RPC_ENCODED_XML), "sanmar")

    assert [(p.sku, p.sizeName, p.price) for p in products] == [("PC54-BLK-L", "L", 4.18)]


def test_oversized_integer_price_does_not_abort_batch():
    tree = [
        {"sku": "B1", "sizeName": "S", "customerPrice": 10 ** 400, "piecePrice": 2.5},
        {"sku": "B2", "sizeName": "M", "customerPrice": 3},
    ]

    products = normalize_response(tree, "sns", SNS_ALIASES)

    assert [p.price for p in products] == [2.5, 3]
    assert normalize_product({"price": 10 ** 400})["price"] == 0
