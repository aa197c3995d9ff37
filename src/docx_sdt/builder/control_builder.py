"""
Content Control Builder
========================
Fluent builder API for constructing content controls.

Provides one factory method per control variant and chainable setters
for the common properties (title, appearance, binding, locking ...) as
well as the variant-specific payload settings.

Example::

    from docx_sdt.builder.control_builder import ContentControlBuilder

    control = (
        ContentControlBuilder.dropdown("TaskPriority")
        .with_title("Priority")
        .add_item("High Priority", "high")
        .add_item("Low Priority", "low")
        .bind_to("/root/task/priority", "{12345678-1234-5678-9ABC-123456789012}")
        .lock_control()
        .build([TextRun("High Priority")])
    )
"""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Sequence

from ..controls.base import ContentControl
from ..controls.block import BlockContentControl
from ..controls.checkbox import CheckboxContentControl
from ..controls.date_picker import DatePickerContentControl
from ..controls.dropdown import DropdownContentControl
from ..controls.ids import IdGenerator
from ..controls.inline_rich_text import InlineRichTextContentControl
from ..controls.run import RunContentControl
from ..errors import ConfigurationError
from ..models.content import XmlComponent
from ..models.properties import (
    Appearance,
    CalendarType,
    CheckboxSymbol,
    DataBinding,
    DateStorageFormat,
    DefaultStyle,
    DropdownType,
    ListItem,
    Lock,
)
from ..validator.diagnostics import Diagnostics

_TEXT_CONTROLS = (RunContentControl, DropdownContentControl)


class ContentControlBuilder:
    """
    Fluent builder for content controls.

    Typically instantiated via the factory class methods
    (e.g. ContentControlBuilder.run("CustomerName")).
    """

    def __init__(self, control_class: type[ContentControl], tag: str, **options: Any) -> None:
        self._control_class = control_class
        self._tag = tag
        self._title: str | None = None
        self._appearance: Appearance | str | None = None
        self._color: str | None = None
        self._data_binding: DataBinding | None = None
        self._content_lock = False
        self._sdt_locked = False
        self._placeholder: str | None = None
        self._id_generator: IdGenerator | None = None
        self._diagnostics: Diagnostics | None = None
        self._options: dict[str, Any] = dict(options)
        self._list_items: list[ListItem | Mapping[str, Any]] = []

    # ------------------------------------------------------------------
    # Factory methods, one per control variant
    # ------------------------------------------------------------------

    @classmethod
    def run(cls, tag: str) -> "ContentControlBuilder":
        """Plain text control at run level."""
        return cls(RunContentControl, tag)

    @classmethod
    def rich_text(cls, tag: str) -> "ContentControlBuilder":
        """Inline rich text control; accepts nested inline controls."""
        return cls(InlineRichTextContentControl, tag)

    @classmethod
    def block(cls, tag: str) -> "ContentControlBuilder":
        """Block-level control around paragraphs and tables."""
        return cls(BlockContentControl, tag)

    @classmethod
    def dropdown(
        cls, tag: str, type: DropdownType | str = DropdownType.DROP_DOWN_LIST
    ) -> "ContentControlBuilder":
        """Restricted selection list (or combo box when ``type`` says so)."""
        return cls(DropdownContentControl, tag, type=type)

    @classmethod
    def combo_box(cls, tag: str) -> "ContentControlBuilder":
        """Selection list that also accepts free text."""
        return cls(DropdownContentControl, tag, type=DropdownType.COMBO_BOX)

    @classmethod
    def date_picker(cls, tag: str) -> "ContentControlBuilder":
        return cls(DatePickerContentControl, tag)

    @classmethod
    def checkbox(cls, tag: str) -> "ContentControlBuilder":
        return cls(CheckboxContentControl, tag)

    # ------------------------------------------------------------------
    # Common properties
    # ------------------------------------------------------------------

    def with_title(self, title: str) -> "ContentControlBuilder":
        """Display name shown in Word's Developer tools."""
        self._title = title
        return self

    def with_appearance(self, appearance: Appearance | str) -> "ContentControlBuilder":
        self._appearance = appearance
        return self

    def with_color(self, color: str) -> "ContentControlBuilder":
        """Border color as 6-digit hex without '#'."""
        self._color = color
        return self

    def bind_to(self, xpath: str, store_item_id: str) -> "ContentControlBuilder":
        """
        Bind the control to a custom XML part node.

        store_item_id is the braced GUID of the part; it is checked when
        the control is built.
        """
        self._data_binding = DataBinding(xpath=xpath, store_item_id=store_item_id)
        return self

    def lock_content(self) -> "ContentControlBuilder":
        """Content becomes read-only; the control can still be deleted."""
        self._content_lock = True
        return self

    def lock_control(self) -> "ContentControlBuilder":
        """The control cannot be deleted; its content stays editable."""
        self._sdt_locked = True
        return self

    def with_placeholder(self, placeholder: str) -> "ContentControlBuilder":
        self._placeholder = placeholder
        return self

    def with_id_generator(self, id_generator: IdGenerator) -> "ContentControlBuilder":
        self._id_generator = id_generator
        return self

    def with_diagnostics(self, diagnostics: Diagnostics) -> "ContentControlBuilder":
        self._diagnostics = diagnostics
        return self

    # ------------------------------------------------------------------
    # Variant settings
    # ------------------------------------------------------------------

    def _require(self, method: str, *classes: type[ContentControl]) -> None:
        if self._control_class not in classes:
            names = " or ".join(c.__name__ for c in classes)
            raise ConfigurationError(
                f"ContentControlBuilder.{method}() applies to {names}, "
                f"not {self._control_class.__name__}."
            )

    def rich(self) -> "ContentControlBuilder":
        """Switch a run-level control to rich text mode."""
        self._require("rich", RunContentControl)
        self._options["rich_text"] = True
        return self

    def multi_line(self, enabled: bool = True) -> "ContentControlBuilder":
        self._require("multi_line", *_TEXT_CONTROLS)
        self._options["multi_line"] = enabled
        return self

    def max_length(self, length: int) -> "ContentControlBuilder":
        self._require("max_length", *_TEXT_CONTROLS)
        self._options["max_length"] = length
        return self

    def with_default_style(
        self, style: DefaultStyle | Mapping[str, Any] | None = None, **fields: Any
    ) -> "ContentControlBuilder":
        """Run formatting for typed text, e.g. ``.with_default_style(bold=True)``."""
        self._require("with_default_style", *_TEXT_CONTROLS)
        self._options["default_style"] = style if style is not None else DefaultStyle(**fields)
        return self

    def with_items(
        self, items: Sequence[ListItem | Mapping[str, Any]]
    ) -> "ContentControlBuilder":
        """Replace the dropdown options."""
        self._require("with_items", DropdownContentControl)
        self._list_items = list(items)
        return self

    def add_item(self, display_text: str, value: str) -> "ContentControlBuilder":
        self._require("add_item", DropdownContentControl)
        self._list_items.append(ListItem(display_text=display_text, value=value))
        return self

    def date_settings(
        self,
        date_format: str | None = None,
        calendar_type: CalendarType | str | None = None,
        locale: str | None = None,
        default_date: date | None = None,
        store_mapped_data_as: DateStorageFormat | str | None = None,
    ) -> "ContentControlBuilder":
        """Date picker settings; arguments left as None keep their defaults."""
        self._require("date_settings", DatePickerContentControl)
        settings = {
            "date_format": date_format,
            "calendar_type": calendar_type,
            "locale": locale,
            "default_date": default_date,
            "store_mapped_data_as": store_mapped_data_as,
        }
        self._options.update({k: v for k, v in settings.items() if v is not None})
        return self

    def checked(self, checked: bool = True) -> "ContentControlBuilder":
        self._require("checked", CheckboxContentControl)
        self._options["checked"] = checked
        return self

    def symbols(
        self,
        checked: CheckboxSymbol | Mapping[str, Any] | None = None,
        unchecked: CheckboxSymbol | Mapping[str, Any] | None = None,
    ) -> "ContentControlBuilder":
        """Custom checked / unchecked symbols, e.g. {"font": "Wingdings", "character": "☑"}."""
        self._require("symbols", CheckboxContentControl)
        if checked is not None:
            self._options["checked_symbol"] = checked
        if unchecked is not None:
            self._options["unchecked_symbol"] = unchecked
        return self

    # --- Build ---

    def build(self, children: Sequence[XmlComponent] | None = None) -> ContentControl:
        """
        Construct and return the content control.

        Validation happens here, in the control's constructor; errors
        propagate unchanged.
        """
        options = dict(self._options)
        if self._list_items:
            options["list_items"] = list(self._list_items)
        if children is not None:
            options["children"] = children
        lock = None
        if self._content_lock or self._sdt_locked:
            lock = Lock(content_lock=self._content_lock, sdt_locked=self._sdt_locked)

        return self._control_class(
            tag=self._tag,
            title=self._title,
            appearance=self._appearance,
            color=self._color,
            data_binding=self._data_binding,
            lock=lock,
            placeholder=self._placeholder,
            id_generator=self._id_generator,
            diagnostics=self._diagnostics,
            **options,
        )
