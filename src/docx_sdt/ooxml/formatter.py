"""
OOXML Formatter
================
Turns content nodes into markup fragments and fragments into
WordprocessingML via ElementTree.

Fragment shape (one key per record, the element name)::

    {"w:tag": {"_attr": {"w:val": "CustomerName"}}}      attributes only
    {"w:richText": {}}                                   empty element
    {"w:p": [{"w:r": [...]}, ...]}                       ordered children
    {"w:t": [{"_attr": {"xml:space": "preserve"}}, "Hi"]} attributes + text
    {"w:text": {"w:multiLine": {...}, "w:maxLength": {...}}}  keyed children

Usage::

    from docx_sdt import Formatter, Paragraph, RunContentControl, TextRun

    control = RunContentControl(tag="Name", children=[TextRun("[Name]")])
    fragment = Formatter().format(control)
    print(to_xml(fragment))
    print(render_body([Paragraph([control])]))
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any, Iterable
from xml.etree.ElementTree import Element, SubElement, tostring

from ..models.content import Fragment, SerializationContext, XmlComponent

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Namespaces
# ---------------------------------------------------------------------------

NS = {
    "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
    "w14": "http://schemas.microsoft.com/office/word/2010/wordml",
}
XML_NS = "http://www.w3.org/XML/1998/namespace"

for _prefix, _uri in NS.items():
    ET.register_namespace(_prefix, _uri)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'

ATTRIBUTES_KEY = "_attr"


class Formatter:
    """Materializes a node tree into its nested markup fragment."""

    def format(
        self, node: XmlComponent, context: SerializationContext | None = None
    ) -> Fragment | None:
        return node.prep_for_xml(context or SerializationContext())


def qualify(name: str) -> str:
    """``w:tag`` -> ``{namespace-uri}tag``; unprefixed names are returned as is."""
    prefix, sep, local = name.partition(":")
    if not sep:
        return name
    if prefix == "xml":
        return f"{{{XML_NS}}}{local}"
    try:
        return f"{{{NS[prefix]}}}{local}"
    except KeyError:
        raise ValueError(f"Unknown namespace prefix '{prefix}' in '{name}'") from None


def to_element(fragment: Fragment) -> Element:
    """Build an Element from a single-record fragment."""
    if not isinstance(fragment, dict) or len(fragment) != 1:
        raise ValueError(f"Expected a single-record fragment, got {fragment!r}")
    name, body = next(iter(fragment.items()))
    element = Element(qualify(name))
    _fill(element, body)
    return element


def _fill(element: Element, body: Any) -> None:
    if body is None:
        return
    if isinstance(body, dict):
        for key, value in body.items():
            if key == ATTRIBUTES_KEY:
                _set_attributes(element, value)
            else:
                _append(element, {key: value})
    elif isinstance(body, (list, tuple)):
        for item in body:
            if isinstance(item, dict) and ATTRIBUTES_KEY in item and len(item) == 1:
                _set_attributes(element, item[ATTRIBUTES_KEY])
            elif isinstance(item, dict):
                _append(element, item)
            else:
                _append_text(element, str(item))
    else:
        _append_text(element, str(body))


def _append(parent: Element, fragment: Fragment) -> None:
    parent.append(to_element(fragment))


def _set_attributes(element: Element, attrs: dict[str, Any]) -> None:
    for key, value in attrs.items():
        if value is not None:
            element.set(qualify(key), str(value))


def _append_text(element: Element, text: str) -> None:
    if len(element):
        last = element[-1]
        last.tail = (last.tail or "") + text
    else:
        element.text = (element.text or "") + text


def to_xml(fragment: Fragment) -> str:
    """Serialize a fragment to an XML string (namespace declarations on the root)."""
    return tostring(to_element(fragment), encoding="unicode")


def render_body(
    nodes: Iterable[XmlComponent], context: SerializationContext | None = None
) -> str:
    """
    Wrap top-level block nodes in ``w:document``/``w:body`` and serialize.

    Produces the main document part only; packaging it into a .docx is up
    to the caller.
    """
    formatter = Formatter()
    context = context or SerializationContext()
    root = Element(qualify("w:document"))
    body = SubElement(root, qualify("w:body"))
    count = 0
    for node in nodes:
        fragment = formatter.format(node, context)
        if fragment is not None:
            body.append(to_element(fragment))
            count += 1
    logger.debug("Rendered %d top-level node(s)", count)
    return XML_DECLARATION + tostring(root, encoding="unicode")
