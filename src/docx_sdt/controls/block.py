"""
Block Content Control
======================
Block-level rich text control sitting next to paragraphs and tables in a
document body, a table cell, or another block control.

Word allows any nesting at block level, so there is no nesting gate and
the payload is always ``w:richText``.

Example::

    BlockContentControl(
        tag="CustomerAddress",
        title="Customer Address",
        children=[
            Paragraph("Customer Name"),
            Paragraph("123 Main Street"),
        ],
    )
"""

from __future__ import annotations

from typing import Any, Sequence

from ..models.content import BlockContent, ContentKind, Fragment
from .base import ContentControl, as_children


class BlockContentControl(ContentControl, BlockContent):
    """Rich text control holding paragraphs, tables and nested block controls."""

    kind = ContentKind.BLOCK_CONTROL
    _tag_example = "tag='CustomerAddress', children=[Paragraph('Section content')]"

    def __init__(
        self, *, children: Sequence[BlockContent] | None = None, **properties: Any
    ) -> None:
        self._children = as_children(children)
        super().__init__(**properties)

    def _validate_payload(self) -> None:
        self._require_children(
            "Paragraph or Table element",
            "tag='MySection', children=[Paragraph('Section content')]",
        )
        self._require_block_children()

    def _payload_properties(self) -> list[Fragment]:
        return [{"w:richText": {}}]
