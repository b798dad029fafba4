import logging
from xml.sax.saxutils import escape

import requests

from catalog_api.config import settings
from catalog_api.errors import (
    MalformedResponse,
    MissingCredentials,
    UpstreamFault,
    UpstreamUnavailable,
    snippet,
)
from catalog_api.normalizer.tree import NodeKind, RawNode, node_kind, tree_from_xml, walk

logger = logging.getLogger(__name__)

PRODUCT_INFO_PATH = "/SanMarWebService/SanMarProductInfoServicePort"
SOAP_ACTION = "getProducts"

XML_QUOTES = {'"': "&quot;", "'": "&apos;"}


def escape_xml(value) -> str:
    return escape(str(value), XML_QUOTES)


def find_fault(tree: RawNode) -> dict | None:
    """Return the first SOAP Fault block (1.1 or 1.2 layout) as {code, message}, if any."""
    faults: list[dict] = []

    def visit(node, key):
        if not faults and key == "Fault" and node_kind(node) is NodeKind.MAPPING:
            faults.append(node)

    walk(tree, visit)
    if not faults:
        return None

    fault = faults[0]
    code = fault.get("faultcode") or fault.get("Code") or ""
    message = fault.get("faultstring") or fault.get("Reason") or ""
    # SOAP 1.2 nests Code/Value and Reason/Text
    if isinstance(code, dict):
        code = code.get("Value", "")
    if isinstance(message, dict):
        message = message.get("Text", "")
    return {"code": str(code), "message": str(message)}


class SanMarClient:
    def __init__(self, customer_number=None, username=None, password=None, wsdl_base=None, timeout=None):
        # Use provided params or fall back to settings
        self.customer_number = customer_number or settings.SANMAR_CUSTOMER_NUMBER
        self.username = username or settings.SANMAR_USERNAME
        self.password = password or settings.SANMAR_PASSWORD
        self.timeout = timeout or settings.UPSTREAM_TIMEOUT_SECONDS

        base = (wsdl_base or settings.SANMAR_WSDL_BASE).rstrip("/")
        self.endpoint = f"{base}{PRODUCT_INFO_PATH}"

    def build_envelope(self, style: str = "", partnumber: str = "", styleid: str = "") -> str:
        filters = []
        if style:
            filters.append(f"<filterStyle>{escape_xml(style)}</filterStyle>")
        if partnumber:
            filters.append(f"<filterPartNumber>{escape_xml(partnumber)}</filterPartNumber>")
        if styleid:
            filters.append(f"<filterStyleID>{escape_xml(styleid)}</filterStyleID>")
        filter_block = f"<FilterStyleArray>{''.join(filters)}</FilterStyleArray>" if filters else ""

        return f"""<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/" xmlns:ws="http://webservices.sanmar.com/">
  <soapenv:Header/>
  <soapenv:Body>
    <ws:getProducts>
      <ws:requestBean>
        <ws:sanMarCustomerNumber>{escape_xml(self.customer_number or '')}</ws:sanMarCustomerNumber>
        <ws:sanMarUserName>{escape_xml(self.username or '')}</ws:sanMarUserName>
        <ws:sanMarUserPassword>{escape_xml(self.password or '')}</ws:sanMarUserPassword>
        {filter_block}
      </ws:requestBean>
    </ws:getProducts>
  </soapenv:Body>
</soapenv:Envelope>"""

    def get_products(self, style: str = "", partnumber: str = "", styleid: str = "") -> RawNode:
        """
        POST a getProducts request and return the decoded response tree.

        Raises UpstreamFault for SOAP faults (whatever the HTTP status),
        UpstreamUnavailable for transport errors, timeouts and other non-2xx
        answers, and MalformedResponse when a 2xx body is not XML.
        """
        if not (self.customer_number and self.username and self.password):
            raise MissingCredentials("Missing SanMar credentials env vars.")

        headers = {
            "Content-Type": "text/xml; charset=utf-8",
            "SOAPAction": SOAP_ACTION,
        }
        request_xml = self.build_envelope(style, partnumber, styleid)

        try:
            resp = requests.post(self.endpoint, headers=headers, data=request_xml.encode("utf-8"), timeout=self.timeout)
        except requests.Timeout as e:
            logger.error(f"SanMar request timed out after {self.timeout}s")
            raise UpstreamUnavailable("SanMar request timed out", payload={"timeout": self.timeout}, timed_out=True) from e
        except requests.RequestException as e:
            logger.error(f"SanMar request failed: {e}")
            raise UpstreamUnavailable("SanMar fetch failed", payload={"error": str(e)}) from e

        try:
            tree = tree_from_xml(resp.text)
        except MalformedResponse:
            if resp.ok:
                raise
            tree = None

        fault = find_fault(tree) if tree is not None else None
        if fault:
            logger.error(f"SanMar SOAP fault (status {resp.status_code}): {fault['code']} {fault['message']}")
            raise UpstreamFault(f"SanMar fault: {fault['message'] or fault['code']}", payload={"status": resp.status_code, **fault})

        if not resp.ok:
            logger.error(f"SanMar API Error (status {resp.status_code}): {snippet(resp.text, 500)}")
            # Keep some of the body to help debug
            raise UpstreamUnavailable(
                "SanMar fetch failed",
                payload={"status": resp.status_code, "body": snippet(resp.text)},
            )

        return tree
