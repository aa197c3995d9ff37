"""
Dropdown Content Control
=========================
Inline selection control offering a list of predefined options.

Two modes:

- ``dropDownList`` – users can only pick one of the list items.
- ``comboBox``     – users can pick an item or type their own text.

Example::

    DropdownContentControl(
        tag="TaskPriority",
        type="dropDownList",
        list_items=[
            {"displayText": "High Priority", "value": "high"},
            ListItem(display_text="Low Priority", value="low"),
            ("Medium Priority", "medium"),
        ],
        children=[TextRun("Medium Priority")],
    )

Duplicate item values are legal in WordprocessingML and only reported
(SDT-010). ``multi_line``, ``max_length`` and ``default_style`` are
accepted in both modes but only written for combo boxes.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence, Union

from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models.content import ContentKind, Fragment, InlineContent
from ..models.properties import (
    DefaultStyle,
    DropdownType,
    ListItem,
    coerce_enum,
    coerce_model,
)
from .base import ContentControl, as_children, text_element, validate_max_length

ListItemLike = Union[ListItem, Mapping[str, Any], tuple]


def _coerce_item(item: Any) -> ListItem | None:
    """ListItem for a well-typed entry, None for anything unusable."""
    if isinstance(item, ListItem):
        return item
    try:
        if isinstance(item, tuple) and len(item) == 2:
            return ListItem(display_text=item[0], value=item[1])
        if isinstance(item, Mapping):
            return ListItem.model_validate(dict(item))
    except ValidationError:
        return None
    return None


class DropdownContentControl(ContentControl, InlineContent):
    """
    Dropdown list or combo box control.

    Options, in addition to the common ones of ContentControl:

    type:          DropdownType, "dropDownList" or "comboBox" (required)
    list_items:    non-empty sequence of ListItem, mappings or (text, value) pairs
    children:      inline content showing the current selection, at least one
    multi_line:    combo box only
    max_length:    combo box only
    default_style: combo box only, emitted as w:rPr
    """

    kind = ContentKind.DROPDOWN_CONTROL
    _tag_example = "tag='Priority', type='dropDownList', list_items=[...], children=[...]"

    def __init__(
        self,
        *,
        type: DropdownType | str | None = None,
        list_items: Sequence[ListItemLike] | None = None,
        children: Sequence[InlineContent] | None = None,
        multi_line: bool | None = None,
        max_length: int | None = None,
        default_style: DefaultStyle | Mapping[str, Any] | None = None,
        **properties: Any,
    ) -> None:
        self._type = type
        self._list_items = list_items
        self._children = as_children(children)
        self._multi_line = multi_line
        self._max_length = max_length
        self._default_style = default_style
        super().__init__(**properties)

    @property
    def type(self) -> DropdownType:
        return self._type

    @property
    def list_items(self) -> tuple[ListItem, ...]:
        return self._list_items

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
        name = self.control_name

        if not self._type:
            raise ConfigurationError(
                f"{name}: 'type' is required and must be either 'dropDownList' or 'comboBox'. "
                "dropDownList restricts users to predefined options, while comboBox allows "
                "custom text entry. "
                f"Example: {name}(type='dropDownList', ...)"
            )
        self._type = coerce_enum(DropdownType, self._type, name, "type")

        if not self._list_items:
            raise ConfigurationError(
                f"{name}: 'list_items' is required and must contain at least one option. "
                "Dropdown controls need predefined options for users to select from. "
                f"Example: {name}(list_items=[ListItem(display_text='Option 1', value='opt1')], ...)"
            )

        items = [_coerce_item(item) for item in self._list_items]
        invalid = [item for item in items if item is None or not item.is_complete()]
        if invalid:
            raise ConfigurationError(
                f"{name}: All list_items must have non-empty 'display_text' and 'value' strings. "
                f"Found {len(invalid)} invalid item(s). "
                "Example: ListItem(display_text='High Priority', value='high')"
            )
        self._list_items = tuple(items)

        self._require_children(
            "TextRun element",
            "children=[TextRun('Select an option')]",
        )
        self._require_inline_children()
        validate_max_length(name, self._max_length)
        self._default_style = coerce_model(DefaultStyle, self._default_style, name, "default_style")

        seen: set[str] = set()
        duplicates: list[str] = []
        for item in self._list_items:
            if item.value in seen and item.value not in duplicates:
                duplicates.append(item.value)
            seen.add(item.value)
        if duplicates:
            self._diagnostics.warn(
                "SDT-010",
                name,
                f"Found duplicate values in list_items: {', '.join(duplicates)}. "
                "Duplicate values may cause unexpected behavior when processing selections.",
                "list_items",
            )

    def _payload_properties(self) -> list[Fragment]:
        items = [item.to_xml() for item in self._list_items]
        props: list[Fragment] = [{f"w:{self._type.value}": items}]
        if self._type != DropdownType.COMBO_BOX:
            return props
        if self._multi_line is not None or self._max_length is not None:
            props.append(text_element(self._multi_line, self._max_length))
        if self._default_style:
            props.append({"w:rPr": self._default_style.to_run_properties()})
        return props
