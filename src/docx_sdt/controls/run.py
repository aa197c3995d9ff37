"""
Run Content Control
====================
Inline (run-level) content control living inside a paragraph next to
text runs.

The mode is fixed at construction:

- plain text (default) – emits ``w:text``. Word forbids structured
  document tags inside a plain text control, so any content control
  child raises NestingViolationError.
- rich text (``rich_text=True``) – emits ``w:richText`` and accepts
  any inline content, nested controls included, to any depth.

Example::

    Paragraph([
        TextRun("Customer: "),
        RunContentControl(tag="CustomerName", title="Customer Name",
                          children=[TextRun("[Name]")]),
    ])
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..errors import NestingViolationError
from ..models.content import ContentKind, Fragment, InlineContent, content_kind
from ..models.properties import DefaultStyle, coerce_model
from .base import ContentControl, as_children, text_element, validate_max_length

# Content a plain text control may never contain.
PLAIN_TEXT_FORBIDDEN_KINDS = frozenset({
    ContentKind.PLAIN_INLINE_CONTROL,
    ContentKind.RICH_INLINE_CONTROL,
    ContentKind.LEGAL_NESTING_CONTROL,
    ContentKind.DROPDOWN_CONTROL,
    ContentKind.DATE_CONTROL,
    ContentKind.CHECKBOX_CONTROL,
})


class RunContentControl(ContentControl, InlineContent):
    """
    Plain or rich text content control at run level.

    Options, in addition to the common ones of ContentControl:

    children:      inline content, at least one element
    rich_text:     allow nested content controls (default False)
    multi_line:    allow line breaks (plain text mode only)
    max_length:    character limit (plain text mode only)
    default_style: DefaultStyle or mapping, emitted as w:rPr
    """

    _tag_example = "tag='CustomerName', children=[TextRun('Default text')]"

    def __init__(
        self,
        *,
        children: Sequence[InlineContent] | None = None,
        rich_text: bool = False,
        multi_line: bool | None = None,
        max_length: int | None = None,
        default_style: DefaultStyle | Mapping[str, Any] | None = None,
        **properties: Any,
    ) -> None:
        self._children = as_children(children)
        self._rich_text = bool(rich_text)
        self._multi_line = multi_line
        self._max_length = max_length
        self._default_style = default_style
        super().__init__(**properties)

    @property
    def kind(self) -> ContentKind:
        if self._rich_text:
            return ContentKind.RICH_INLINE_CONTROL
        return ContentKind.PLAIN_INLINE_CONTROL

    @property
    def rich_text(self) -> bool:
        return self._rich_text

    @property
    def multi_line(self) -> bool | None:
        return self._multi_line

    @property
    def max_length(self) -> int | None:
        return self._max_length

    @property
    def default_style(self) -> DefaultStyle | None:
        return self._default_style

    def _validate_payload(self) -> None:
        self._require_children(
            "TextRun or nested inline content control",
            "tag='MyControl', children=[TextRun('Default text')]",
        )
        self._require_inline_children()
        validate_max_length(self.control_name, self._max_length)
        self._default_style = coerce_model(
            DefaultStyle, self._default_style, self.control_name, "default_style"
        )
        self._validate_nesting()

    def _validate_nesting(self) -> None:
        if self._rich_text:
            return

        for child in self._children:
            if content_kind(child) in PLAIN_TEXT_FORBIDDEN_KINDS:
                child_name = type(child).__name__
                raise NestingViolationError(
                    f"{self.control_name} nesting error: Cannot nest {child_name} inside a "
                    f"plain text {self.control_name}. "
                    "This violates the OOXML rules for structured document tags and will "
                    "cause Word to reject the document.\n\n"
                    "SOLUTIONS:\n"
                    f"1. Set rich_text=True in the parent control: "
                    f"{self.control_name}(rich_text=True, ...)\n"
                    "2. Use InlineRichTextContentControl instead for the parent control\n"
                    "3. Use BlockContentControl if you need paragraph-level nesting"
                )

    def _payload_properties(self) -> list[Fragment]:
        if self._rich_text:
            props: list[Fragment] = [{"w:richText": {}}]
        else:
            props = [text_element(self._multi_line, self._max_length)]
        if self._default_style:
            props.append({"w:rPr": self._default_style.to_run_properties()})
        return props
