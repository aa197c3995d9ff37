"""
Document Content – Core Model
==============================
The serializable node contract and the ordinary document content that
content controls wrap or are wrapped by: text runs, paragraphs and tables.

Every node implements ``prep_for_xml(context)`` and returns a nested
markup fragment (or ``None`` to be dropped by its parent). Fragments use
the record shape consumed by :mod:`docx_sdt.ooxml.formatter`::

    {"w:p": [{"w:r": [{"w:t": [{"_attr": {"xml:space": "preserve"}}, "Hello"]}]}]}

Two marker classes split nodes into the content sets a container accepts:
:class:`InlineContent` (legal inside a paragraph) and :class:`BlockContent`
(legal in a document body, a table cell or a block-level control).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Sequence

Fragment = dict[str, Any]


class ContentKind(Enum):
    """
    Closed classification of every node that can appear in a content list.

    The nesting rule of plain text controls is expressed over this set,
    not over class names.
    """
    PLAIN_INLINE_CONTROL = "plainInlineControl"
    RICH_INLINE_CONTROL = "richInlineControl"
    LEGAL_NESTING_CONTROL = "legalNestingControl"
    DROPDOWN_CONTROL = "dropdownControl"
    DATE_CONTROL = "dateControl"
    CHECKBOX_CONTROL = "checkboxControl"
    BLOCK_CONTROL = "blockControl"
    OTHER_CONTENT = "otherContent"


@dataclass
class SerializationContext:
    """Opaque state handed unchanged from a parent to its children."""


class XmlComponent:
    """Base of every node that can be materialized as a markup fragment."""

    kind: ContentKind = ContentKind.OTHER_CONTENT

    def prep_for_xml(self, context: SerializationContext) -> Fragment | None:
        raise NotImplementedError


class InlineContent(XmlComponent):
    """Marker: legal inside a paragraph or a run-level control."""


class BlockContent(XmlComponent):
    """Marker: legal in a document body, a table cell or a block-level control."""


def content_kind(node: Any) -> ContentKind:
    if isinstance(node, XmlComponent):
        return node.kind
    return ContentKind.OTHER_CONTENT


def prepare_children(
    children: Iterable[XmlComponent], context: SerializationContext
) -> list[Fragment]:
    """Materialize ``children`` in order, dropping those that yield nothing."""
    prepared = (child.prep_for_xml(context) for child in children)
    return [fragment for fragment in prepared if fragment is not None]


# ---------------------------------------------------------------------------
# Inline content
# ---------------------------------------------------------------------------


class TextRun(InlineContent):
    """A run of text with optional direct formatting (w:r)."""

    def __init__(
        self,
        text: str = "",
        *,
        bold: bool = False,
        italic: bool = False,
        color: str | None = None,
        size: int | None = None,
    ) -> None:
        self._text = text
        self._bold = bold
        self._italic = italic
        self._color = color
        self._size = size

    @property
    def text(self) -> str:
        return self._text

    def prep_for_xml(self, context: SerializationContext) -> Fragment:
        run: list[Any] = []
        props: list[Fragment] = []
        if self._bold:
            props.append({"w:b": {}})
        if self._italic:
            props.append({"w:i": {}})
        if self._color:
            props.append({"w:color": {"_attr": {"w:val": self._color}}})
        if self._size:
            props.append({"w:sz": {"_attr": {"w:val": str(self._size)}}})
        if props:
            run.append({"w:rPr": props})
        run.append({"w:t": [{"_attr": {"xml:space": "preserve"}}, self._text]})
        return {"w:r": run}

    def __repr__(self) -> str:
        return f"TextRun({self._text!r})"


# ---------------------------------------------------------------------------
# Block content
# ---------------------------------------------------------------------------


class Paragraph(BlockContent):
    """A paragraph (w:p). A plain string becomes a single text run."""

    def __init__(self, children: str | Sequence[InlineContent] = ()) -> None:
        if isinstance(children, str):
            children = [TextRun(children)] if children else []
        self._children = tuple(children)

    @property
    def children(self) -> tuple[InlineContent, ...]:
        return self._children

    def prep_for_xml(self, context: SerializationContext) -> Fragment:
        return {"w:p": prepare_children(self._children, context)}

    def __repr__(self) -> str:
        return f"Paragraph({len(self._children)} child(ren))"


class TableCell(XmlComponent):
    """A table cell (w:tc). Word requires at least one paragraph per cell."""

    def __init__(self, children: str | Sequence[BlockContent] = ()) -> None:
        if isinstance(children, str):
            children = [Paragraph(children)]
        self._children = tuple(children) or (Paragraph(),)

    @property
    def children(self) -> tuple[BlockContent, ...]:
        return self._children

    def prep_for_xml(self, context: SerializationContext) -> Fragment:
        return {"w:tc": prepare_children(self._children, context)}


class TableRow(XmlComponent):
    """A table row (w:tr)."""

    def __init__(self, cells: Sequence[TableCell]) -> None:
        self._cells = tuple(cells)

    @property
    def cells(self) -> tuple[TableCell, ...]:
        return self._cells

    def prep_for_xml(self, context: SerializationContext) -> Fragment:
        return {"w:tr": prepare_children(self._cells, context)}


class Table(BlockContent):
    """A table (w:tbl)."""

    def __init__(self, rows: Sequence[TableRow]) -> None:
        self._rows = tuple(rows)

    @property
    def rows(self) -> tuple[TableRow, ...]:
        return self._rows

    def prep_for_xml(self, context: SerializationContext) -> Fragment:
        return {"w:tbl": prepare_children(self._rows, context)}

    def __repr__(self) -> str:
        return f"Table({len(self._rows)} row(s))"
