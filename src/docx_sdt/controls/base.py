"""
Content Control – Shared Skeleton
==================================
Construction-time validation and the w:sdt serialization shared by all
seven content control variants.

Construction order, identical for every variant:

1. ``tag`` must be non-empty (ConfigurationError).
2. Variant payload checks (``_validate_payload``).
3. Data binding checks (FormatError).
4. A numeric ID is drawn from the ID generator.

Serialization emits::

    {"w:sdt": [
        {"w:sdtPr": [alias?, tag, id, appearance?, color?, dataBinding?,
                     lock?, showingPlcHdr?, <payload>, rPr?]},
        {"w:sdtContent": [<children>]},
    ]}
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Sequence

from ..errors import ConfigurationError
from ..models.content import (
    BlockContent,
    Fragment,
    InlineContent,
    SerializationContext,
    XmlComponent,
    prepare_children,
)
from ..models.properties import (
    MAX_TITLE_LENGTH,
    Appearance,
    DataBinding,
    Lock,
    coerce_enum,
    coerce_model,
)
from ..validator.diagnostics import Diagnostic, Diagnostics
from ..validator.guid import validate_data_binding
from .ids import IdGenerator, content_control_ids

_HEX_COLOR = re.compile(r"^[0-9A-Fa-f]{6}$")


class ContentControl(XmlComponent):
    """
    Base class of the content control variants.

    Common keyword options (all variants):

    tag:          machine-readable key (required)
    title:        display name, emitted as w:alias
    appearance:   Appearance or "boundingBox" | "tags" | "hidden"
    color:        6-digit hex border color, without "#"
    data_binding: DataBinding or mapping with xpath / store_item_id
    lock:         Lock or mapping with content_lock / sdt_locked
    placeholder:  presence emits w:showingPlcHdr
    id_generator: IdGenerator to draw the w:id from (shared default)
    diagnostics:  Diagnostics sink for non-fatal advisories
    """

    _tag_example = "tag='MyControl', children=[...]"

    def __init__(
        self,
        *,
        tag: str,
        title: str | None = None,
        appearance: Appearance | str | None = None,
        color: str | None = None,
        data_binding: DataBinding | Mapping[str, Any] | None = None,
        lock: Lock | Mapping[str, Any] | None = None,
        placeholder: str | None = None,
        id_generator: IdGenerator | None = None,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        name = self.control_name
        self._diagnostics = Diagnostics(forward_to_log=diagnostics is None, parent=diagnostics)

        self._validate_tag(tag)
        self._validate_title(title)
        self._validate_color(color)
        appearance = coerce_enum(Appearance, appearance, name, "appearance")
        lock = coerce_model(Lock, lock, name, "lock")

        self._validate_payload()

        data_binding = coerce_model(DataBinding, data_binding, name, "data_binding")
        if data_binding is not None:
            validate_data_binding(data_binding, name, self._diagnostics)

        self._tag = tag
        self._title = title
        self._id = (id_generator or content_control_ids).next()
        self._appearance = appearance
        self._color = color
        self._data_binding = data_binding
        self._lock = lock
        self._placeholder = placeholder

    # ------------------------------------------------------------------
    # Read-only fields
    # ------------------------------------------------------------------

    @property
    def control_name(self) -> str:
        return type(self).__name__

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def id(self) -> int:
        return self._id

    @property
    def appearance(self) -> Appearance | None:
        return self._appearance

    @property
    def color(self) -> str | None:
        return self._color

    @property
    def data_binding(self) -> DataBinding | None:
        return self._data_binding

    @property
    def lock(self) -> Lock | None:
        return self._lock

    @property
    def placeholder(self) -> str | None:
        return self._placeholder

    @property
    def children(self) -> tuple[XmlComponent, ...]:
        return self._children

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Diagnostics reported while this control was constructed."""
        return tuple(self._diagnostics)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _validate_tag(self, tag: str) -> None:
        if not isinstance(tag, str) or not tag.strip():
            raise ConfigurationError(
                f"{self.control_name}: 'tag' is required and cannot be empty. "
                "The tag serves as the unique identifier for the content control "
                "and is essential for programmatic access. "
                f"Example: {self.control_name}({self._tag_example})"
            )
        if any(c.isspace() for c in tag):
            self._diagnostics.warn(
                "SDT-001",
                self.control_name,
                f"Tag '{tag}' contains spaces, which may cause issues in some scenarios. "
                "Consider using camelCase or underscores instead "
                "(e.g., 'CustomerName' or 'customer_name').",
                "tag",
            )

    def _validate_title(self, title: str | None) -> None:
        if title and len(title) > MAX_TITLE_LENGTH:
            self._diagnostics.warn(
                "SDT-002",
                self.control_name,
                f"Title '{title[:50]}...' is longer than {MAX_TITLE_LENGTH} characters. "
                "Very long titles may not display properly in Word's Developer tools.",
                "title",
            )

    def _validate_color(self, color: str | None) -> None:
        if color is not None and not _HEX_COLOR.match(color):
            self._diagnostics.warn(
                "SDT-004",
                self.control_name,
                f"Color '{color}' is not a 6-digit hex value (e.g. '0066CC'). "
                "It is written unchanged.",
                "color",
            )

    def _validate_payload(self) -> None:
        """Variant-specific checks; runs after the tag check."""

    def _require_children(self, description: str, example: str) -> None:
        if not self._children:
            raise ConfigurationError(
                f"{self.control_name}: 'children' is required and must contain at least "
                f"one {description}. "
                "Content controls must have visible content to function properly in Word. "
                f"Example: {self.control_name}({example})"
            )

    def _require_inline_children(self) -> None:
        invalid = [c for c in self._children if not isinstance(c, InlineContent)]
        if invalid:
            raise ConfigurationError(
                f"{self.control_name}: All children must be inline content such as TextRun "
                "or inline content controls. "
                f"Found {len(invalid)} invalid child element(s). "
                f"{self.control_name} is an inline element and can only contain other inline "
                "elements. For paragraph or table content, use BlockContentControl instead."
            )

    def _require_block_children(self) -> None:
        invalid = [c for c in self._children if not isinstance(c, BlockContent)]
        if invalid:
            raise ConfigurationError(
                f"{self.control_name}: All children must be Paragraph, Table, or "
                "BlockContentControl instances. "
                f"Found {len(invalid)} invalid child element(s). "
                f"{self.control_name} is a block-level element and can only contain other "
                "block-level elements. For inline content within paragraphs, use "
                "RunContentControl instead."
            )

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def _common_properties(self) -> list[Fragment]:
        props: list[Fragment] = []
        if self._title:
            props.append({"w:alias": {"_attr": {"w:val": self._title}}})
        props.append({"w:tag": {"_attr": {"w:val": self._tag}}})
        props.append({"w:id": {"_attr": {"w:val": str(self._id)}}})
        if self._appearance:
            props.append({"w:appearance": {"_attr": {"w:val": self._appearance.value}}})
        if self._color:
            props.append({"w:color": {"_attr": {"w:val": self._color}}})
        if self._data_binding:
            props.append({"w:dataBinding": {"_attr": self._data_binding.to_xml_attrs()}})
        if self._lock:
            props.append({"w:lock": {"_attr": self._lock.to_xml_attrs()}})
        if self._placeholder:
            props.append({"w:showingPlcHdr": {}})
        return props

    def _payload_properties(self) -> list[Fragment]:
        raise NotImplementedError

    def prep_for_xml(self, context: SerializationContext) -> Fragment:
        sdt_pr = self._common_properties() + self._payload_properties()
        return {
            "w:sdt": [
                {"w:sdtPr": sdt_pr},
                {"w:sdtContent": prepare_children(self._children, context)},
            ],
        }

    def __repr__(self) -> str:
        return f"{self.control_name}(tag={self._tag!r}, id={self._id})"


def as_children(children: Sequence[XmlComponent] | None) -> tuple[XmlComponent, ...]:
    return tuple(children) if children is not None else ()


def text_element(multi_line: bool | None, max_length: int | None) -> Fragment:
    """w:text payload; the settings mapping is empty when neither option is set."""
    settings: Fragment = {}
    if multi_line is not None:
        settings["w:multiLine"] = {"_attr": {"w:val": "1" if multi_line else "0"}}
    if max_length is not None:
        settings["w:maxLength"] = {"_attr": {"w:val": str(max_length)}}
    return {"w:text": settings}


def validate_max_length(control_name: str, max_length: int | None) -> None:
    if max_length is None:
        return
    if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length < 1:
        raise ConfigurationError(
            f"{control_name}: 'max_length' must be a positive integer. "
            f"Received: {max_length!r}. Example: {control_name}(max_length=10, ...)"
        )
