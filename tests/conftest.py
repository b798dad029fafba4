"""Pytest fixtures: captured-style upstream payloads."""

import pytest


SANMAR_ITEMS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<S:Envelope xmlns:S="http://schemas.xmlsoap.org/soap/envelope/">
  <S:Body>
    <ns2:getProductsResponse xmlns:ns2="http://webservices.sanmar.com/">
      <return>
        <errorOccured>false</errorOccured>
        <message>Success</message>
        <items>
          <SKU>PC54-BLK-L</SKU>
          <Style>PC54</Style>
          <BrandName>Port &amp; Company</BrandName>
          <Color>Black</Color>
          <Size>L</Size>
          <Price>4.18</Price>
          <FrontModel>https://cdn.sanmar.com/PC54_black_model_front.jpg</FrontModel>
          <BackModel>https://cdn.sanmar.com/PC54_black_model_back.jpg</BackModel>
        </items>
        <items>
          <SKU>PC54-BLK-XL</SKU>
          <Style>PC54</Style>
          <BrandName>Port &amp; Company</BrandName>
          <Color>Black</Color>
          <Size>XL</Size>
          <Price>4.18</Price>
        </items>
      </return>
    </ns2:getProductsResponse>
  </S:Body>
</S:Envelope>
"""

SANMAR_FAULT_XML = """<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/">
  <soapenv:Body>
    <soapenv:Fault>
      <faultcode>soapenv:Server</faultcode>
      <faultstring>Invalid credentials</faultstring>
    </soapenv:Fault>
  </soapenv:Body>
</soapenv:Envelope>
"""


@pytest.fixture
def sanmar_items_xml():
    return SANMAR_ITEMS_XML


@pytest.fixture
def sanmar_fault_xml():
    return SANMAR_FAULT_XML


@pytest.fixture
def sns_products():
    return [
        {
            "sku": "B00760004",
            "brandName": "Gildan",
            "styleName": "2000",
            "colorName": "White",
            "sizeName": "S",
            "customerPrice": 2.34,
            "colorFrontImage": "Images/Color/17130_f_fm.jpg",
            "colorBackImage": "Images/Color/17130_b_fm.jpg",
        },
        {
            "sku": "B00760005",
            "brandName": "Gildan",
            "styleName": "2000",
            "colorName": "White",
            "sizeName": "M",
            "customerPrice": 2.34,
        },
    ]
