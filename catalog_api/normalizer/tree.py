import json
import xml.etree.ElementTree as ET
from enum import Enum
from typing import Any, Callable

from catalog_api.errors import MalformedResponse, snippet

# A decoded upstream document: dict (mapping), list/tuple (sequence) or scalar.
RawNode = Any
Visitor = Callable[[RawNode, str | None], None]


class NodeKind(Enum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


def node_kind(node: RawNode) -> NodeKind:
    if isinstance(node, dict):
        return NodeKind.MAPPING
    if isinstance(node, (list, tuple)):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def as_sequence(node: RawNode) -> list:
    """
    XML decoding cannot tell "one child" from "a list of one child", so a
    repeated element may arrive as a bare mapping. Always hand back a list.
    """
    if node is None:
        return []
    if node_kind(node) is NodeKind.SEQUENCE:
        return list(node)
    return [node]


def walk(node: RawNode, visitor: Visitor, key: str | None = None) -> None:
    """
    Depth-first, pre-order traversal.

    Sequence elements are visited under the sequence's own key; mapping values
    under their own keys. The tree must be acyclic.
    """
    visitor(node, key)

    kind = node_kind(node)
    if kind is NodeKind.SEQUENCE:
        for element in node:
            walk(element, visitor, key)
    elif kind is NodeKind.MAPPING:
        for child_key, child in node.items():
            walk(child, visitor, child_key)


# ----------------------------
# Payload decoding
# ----------------------------

def local_name(tag: str) -> str:
    # "{http://webservices.sanmar.com/}items" -> "items", "ns2:items" -> "items"
    if tag.startswith("{"):
        tag = tag.split("}", 1)[1]
    return tag.rsplit(":", 1)[-1]


def _element_to_node(elem: ET.Element) -> RawNode:
    children = list(elem)
    text = (elem.text or "").strip()

    if not children and not elem.attrib:
        return text

    node: dict[str, RawNode] = {}
    for name, value in elem.attrib.items():
        node[f"@_{local_name(name)}"] = value

    for child in children:
        key = local_name(child.tag)
        value = _element_to_node(child)
        if key in node:
            existing = node[key]
            if isinstance(existing, list):
                existing.append(value)
            else:
                node[key] = [existing, value]
        else:
            node[key] = value

    if text:
        node["#text"] = text
    return node


def tree_from_xml(text: str | bytes) -> RawNode:
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise MalformedResponse(
            f"Upstream XML could not be parsed: {e}",
            payload={"body": snippet(text)},
        ) from e
    return {local_name(root.tag): _element_to_node(root)}


def tree_from_json(text: str | bytes) -> RawNode:
    try:
        return json.loads(text)
    except (ValueError, TypeError) as e:
        raise MalformedResponse(
            f"Upstream JSON could not be parsed: {e}",
            payload={"body": snippet(text)},
        ) from e
