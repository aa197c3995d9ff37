"""
Inline Rich Text Content Control
=================================
Run-level control that is always rich text (``w:richText``) and never
checks nesting. Use it as the parent whenever inline controls have to be
nested, without reasoning about the ``rich_text`` flag of
RunContentControl.

Example::

    InlineRichTextContentControl(
        tag="Address",
        children=[
            TextRun("Street: "),
            RunContentControl(tag="Street", children=[TextRun("[Street]")]),
        ],
    )
"""

from __future__ import annotations

from typing import Any, Sequence

from ..models.content import ContentKind, Fragment, InlineContent
from .base import ContentControl, as_children


class InlineRichTextContentControl(ContentControl, InlineContent):
    """Rich text control at run level. ``children`` may be empty."""

    kind = ContentKind.LEGAL_NESTING_CONTROL
    _tag_example = "tag='CustomerName', children=[...]"

    def __init__(self, *, children: Sequence[InlineContent] = (), **properties: Any) -> None:
        self._children = as_children(children)
        super().__init__(**properties)

    def _validate_payload(self) -> None:
        self._require_inline_children()

    def _payload_properties(self) -> list[Fragment]:
        return [{"w:richText": {}}]
