"""
Checkbox Content Control
=========================
Inline checkbox written in the Word 2010 (``w14``) namespace. The state
is drawn from the checked/unchecked symbols, so the control normally has
no children.

Example::

    CheckboxContentControl(
        tag="Approved",
        checked=True,
        checked_symbol={"font": "Wingdings", "character": "☑"},
        unchecked_symbol={"font": "Wingdings", "character": "☐"},
    )
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..errors import ConfigurationError
from ..models.content import ContentKind, Fragment, InlineContent, XmlComponent
from ..models.properties import (
    DEFAULT_CHECKED_SYMBOL,
    DEFAULT_UNCHECKED_SYMBOL,
    CheckboxSymbol,
    coerce_model,
)
from .base import ContentControl, as_children


class CheckboxContentControl(ContentControl, InlineContent):
    """
    Checkbox with configurable state symbols (MS Gothic 2612 / 2610 by default).

    Children of any kind are accepted and written into w:sdtContent, but
    are reported (SDT-030).
    """

    kind = ContentKind.CHECKBOX_CONTROL
    _tag_example = "tag='Approved', children=[]"

    def __init__(
        self,
        *,
        checked: bool = False,
        checked_symbol: CheckboxSymbol | Mapping[str, Any] | None = None,
        unchecked_symbol: CheckboxSymbol | Mapping[str, Any] | None = None,
        children: Sequence[XmlComponent] = (),
        **properties: Any,
    ) -> None:
        self._checked = bool(checked)
        self._checked_symbol = checked_symbol
        self._unchecked_symbol = unchecked_symbol
        self._children = as_children(children)
        super().__init__(**properties)

    @property
    def checked(self) -> bool:
        return self._checked

    @property
    def checked_symbol(self) -> CheckboxSymbol:
        return self._checked_symbol

    @property
    def unchecked_symbol(self) -> CheckboxSymbol:
        return self._unchecked_symbol

    def _validate_payload(self) -> None:
        self._checked_symbol = self._resolve_symbol(
            self._checked_symbol, "checked_symbol", DEFAULT_CHECKED_SYMBOL, "☑"
        )
        self._unchecked_symbol = self._resolve_symbol(
            self._unchecked_symbol, "unchecked_symbol", DEFAULT_UNCHECKED_SYMBOL, "☐"
        )
        if self._children:
            self._diagnostics.warn(
                "SDT-030",
                self.control_name,
                "Checkbox controls typically don't use child elements. "
                "The checkbox state is represented by symbol elements, not TextRun children. "
                "Consider leaving 'children' empty.",
                "children",
            )

    def _resolve_symbol(
        self,
        value: CheckboxSymbol | Mapping[str, Any] | None,
        field: str,
        default: CheckboxSymbol,
        example: str,
    ) -> CheckboxSymbol:
        if value is None:
            return default
        symbol = coerce_model(CheckboxSymbol, value, self.control_name, field)
        if not symbol.is_complete():
            raise ConfigurationError(
                f"{self.control_name}: '{field}' must have both 'font' and 'character' properties. "
                f"Example: {field}=CheckboxSymbol(font='Wingdings', character='{example}')"
            )
        return symbol

    def _payload_properties(self) -> list[Fragment]:
        return [
            {
                "w14:checkbox": [
                    {"w14:checked": {"_attr": {"w14:val": "1" if self._checked else "0"}}},
                    {"w14:checkedState": self._checked_symbol.to_xml()},
                    {"w14:uncheckedState": self._unchecked_symbol.to_xml()},
                ],
            },
        ]
