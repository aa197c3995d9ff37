"""
Content Control Properties – Core Model
========================================
Typed configuration surface shared by every content control variant:
identity, display title, appearance, color, locking, placeholder and
data binding, plus the text, dropdown, date and checkbox payload settings.

Property sub-objects are frozen Pydantic models. Controls accept either a
model instance or a plain mapping; mappings may use the WordprocessingML
camelCase names (``storeItemId``, ``contentLock``, ``displayText`` ...).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import ConfigurationError


# ---------------------------------------------------------------------------
# Documented defaults
# ---------------------------------------------------------------------------

DEFAULT_DATE_FORMAT = "MM/dd/yyyy"
DEFAULT_LOCALE = "en-US"
MAX_TITLE_LENGTH = 255


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Appearance(str, Enum):
    """Visual appearance of the control in Word (w:appearance)."""
    BOUNDING_BOX = "boundingBox"
    TAGS = "tags"
    HIDDEN = "hidden"


class DropdownType(str, Enum):
    """
    Selection mode of a dropdown control.

    DROP_DOWN_LIST – users can only pick one of the list items.
    COMBO_BOX      – users can pick an item or type free text.
    """
    DROP_DOWN_LIST = "dropDownList"
    COMBO_BOX = "comboBox"


class CalendarType(str, Enum):
    """Calendar system used by the date picker (w:calendar)."""
    GREGORIAN = "gregorian"
    HIJRI = "hijri"
    HEBREW = "hebrew"
    TAIWAN = "taiwan"


class DateStorageFormat(str, Enum):
    """How a bound date is written back to the custom XML part."""
    TEXT = "text"
    DATE = "date"
    DATE_TIME = "dateTime"


# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------

class DataBinding(BaseModel):
    """
    Link between a control and a node of a custom XML part.

    Both fields may be left out here; a missing or empty one is a
    FormatError when the owning control is built.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    xpath: str | None = Field(None, description="XPath to the bound node, e.g. /root/customer/name")
    store_item_id: str | None = Field(
        None, alias="storeItemId",
        description="GUID of the custom XML part, e.g. {12345678-1234-1234-1234-123456789012}",
    )

    def to_xml_attrs(self) -> dict[str, str]:
        return {"w:xpath": self.xpath, "w:storeItemID": self.store_item_id}


class Lock(BaseModel):
    """
    Locking of a control.

    content_lock – content is read-only, the control stays selectable.
    sdt_locked   – the control cannot be deleted, content stays editable.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content_lock: bool = Field(False, alias="contentLock")
    sdt_locked: bool = Field(False, alias="sdtLocked")

    def to_xml_attrs(self) -> dict[str, str]:
        attrs: dict[str, str] = {}
        if self.content_lock:
            attrs["w:contentLocked"] = "1"
        if self.sdt_locked:
            attrs["w:sdtLocked"] = "1"
        return attrs


class DefaultStyle(BaseModel):
    """Run formatting applied to text typed into the control."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    bold: bool = False
    italic: bool = False
    color: str | None = Field(None, description="Hex color without '#'")
    font_size: int | None = Field(None, alias="fontSize", description="Size in half-points")
    font_family: str | None = Field(None, alias="fontFamily")

    def to_run_properties(self) -> list[dict[str, Any]]:
        props: list[dict[str, Any]] = []
        if self.bold:
            props.append({"w:b": {}})
        if self.italic:
            props.append({"w:i": {}})
        if self.color:
            props.append({"w:color": {"_attr": {"w:val": self.color}}})
        if self.font_size:
            props.append({"w:sz": {"_attr": {"w:val": str(self.font_size)}}})
        if self.font_family:
            props.append({"w:rFonts": {"_attr": {"w:ascii": self.font_family}}})
        return props


class ListItem(BaseModel):
    """One option of a dropdown or combo box."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    display_text: str | None = Field(None, alias="displayText")
    value: str | None = None

    def is_complete(self) -> bool:
        return bool(
            self.display_text and self.display_text.strip()
            and self.value and self.value.strip()
        )

    def to_xml(self) -> dict[str, Any]:
        return {
            "w:listItem": {
                "_attr": {"w:displayText": self.display_text, "w:value": self.value},
            },
        }


class CheckboxSymbol(BaseModel):
    """Font and character (hex code point or literal) drawn for a checkbox state."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    font: str | None = None
    character: str | None = None

    def is_complete(self) -> bool:
        return bool(self.font and self.character)

    def to_xml(self) -> list[dict[str, Any]]:
        return [
            {"w14:font": {"_attr": {"w14:val": self.font}}},
            {"w14:val": {"_attr": {"w14:val": self.character}}},
        ]


DEFAULT_CHECKED_SYMBOL = CheckboxSymbol(font="MS Gothic", character="2612")
DEFAULT_UNCHECKED_SYMBOL = CheckboxSymbol(font="MS Gothic", character="2610")


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------

M = TypeVar("M", bound=BaseModel)
E = TypeVar("E", bound=Enum)


def coerce_model(
    model: type[M],
    value: M | Mapping[str, Any] | None,
    context: str,
    field: str,
) -> M | None:
    """Turn a mapping into ``model``; re-raise Pydantic errors as ConfigurationError."""
    if value is None or isinstance(value, model):
        return value
    if not isinstance(value, Mapping):
        raise ConfigurationError(
            f"{context}: '{field}' must be a {model.__name__} or a mapping, "
            f"got {type(value).__name__}."
        )
    try:
        return model.model_validate(dict(value))
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(f"{context}: invalid '{field}' ({details}).") from e


def coerce_enum(
    enum: type[E],
    value: E | str | None,
    context: str,
    field: str,
) -> E | None:
    """Look ``value`` up in ``enum``; unknown values list the legal set."""
    if value is None or isinstance(value, enum):
        return value
    try:
        return enum(value)
    except ValueError:
        legal = ", ".join(m.value for m in enum)
        raise ConfigurationError(
            f"{context}: '{field}' must be one of: {legal}. "
            f"Received: '{value}'. "
            f"Example: {{ {field}: '{next(iter(enum)).value}' }}"
        ) from None
