"""
Definition Loader
==================
Builds a content tree from a JSON-style definition, so forms can be
described as data and checked or rendered from the command line.

Definition format::

    {
      "body": [
        {"type": "paragraph", "children": [
          {"type": "text", "text": "Customer: "},
          {"type": "run", "tag": "CustomerName", "title": "Customer Name",
           "children": [{"type": "text", "text": "[Name]"}]}
        ]},
        {"type": "block", "tag": "Terms", "children": [
          {"type": "paragraph", "text": "Payment due in 30 days."}
        ]},
        {"type": "table", "rows": [["Approved", [{"type": "paragraph", "children": [
          {"type": "checkbox", "tag": "Approved"}
        ]}]]]}
      ]
    }

Control options may use camelCase names (``dataBinding``, ``listItems``,
``storeMappedDataAs`` ...). ``defaultDate`` accepts an ISO-8601 string.
The dropdown mode is given as ``dropdownType`` since ``type`` names the
node.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable, Mapping

from ..controls.block import BlockContentControl
from ..controls.checkbox import CheckboxContentControl
from ..controls.date_picker import DatePickerContentControl
from ..controls.dropdown import DropdownContentControl
from ..controls.ids import IdGenerator
from ..controls.inline_rich_text import InlineRichTextContentControl
from ..controls.run import RunContentControl
from ..errors import ConfigurationError
from ..models.content import (
    Paragraph,
    Table,
    TableCell,
    TableRow,
    TextRun,
    XmlComponent,
)
from ..validator.diagnostics import Diagnostics

logger = logging.getLogger(__name__)

CONTROL_TYPES = {
    "run": RunContentControl,
    "richText": InlineRichTextContentControl,
    "block": BlockContentControl,
    "dropdown": DropdownContentControl,
    "datePicker": DatePickerContentControl,
    "checkbox": CheckboxContentControl,
}

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")

# Definition keys whose constructor option has another name.
_OPTION_NAMES = {"dropdown_type": "type"}


def snake_case(key: str) -> str:
    return _CAMEL.sub("_", key).lower()


def _parse_date(value: Any) -> date | Any:
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            raise ConfigurationError(
                f"DatePickerContentControl: 'default_date' must be an ISO-8601 date. "
                f"Received: '{value}'. Example: \"2024-12-31T00:00:00Z\""
            ) from None
    return value


class DefinitionLoader:
    """Turns definition mappings into nodes; one instance per definition."""

    def __init__(
        self,
        id_generator: IdGenerator | None = None,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        self._id_generator = id_generator
        self._diagnostics = diagnostics
        self._builders: dict[str, Callable[[Mapping[str, Any]], XmlComponent]] = {
            "paragraph": self._paragraph,
            "text": self._text,
            "table": self._table,
        }

    def load(self, data: Mapping[str, Any]) -> list[XmlComponent]:
        if not isinstance(data, Mapping) or not isinstance(data.get("body"), list):
            raise ConfigurationError(
                "Definition must be a mapping with a 'body' list. "
                'Example: {"body": [{"type": "paragraph", "text": "Hello"}]}'
            )
        nodes = self.nodes(data["body"])
        logger.debug("Loaded %d top-level node(s)", len(nodes))
        return nodes

    def nodes(self, items: Any) -> list[XmlComponent]:
        if items is None:
            return []
        if not isinstance(items, list):
            raise ConfigurationError(f"Expected a list of nodes, got {type(items).__name__}.")
        return [self.node(item) for item in items]

    def node(self, item: Any) -> XmlComponent:
        if not isinstance(item, Mapping):
            raise ConfigurationError(f"Expected a node mapping, got {item!r}.")
        node_type = item.get("type")
        if node_type in CONTROL_TYPES:
            return self._control(CONTROL_TYPES[node_type], item)
        if node_type in self._builders:
            return self._builders[node_type](item)
        legal = ", ".join([*self._builders, *CONTROL_TYPES])
        raise ConfigurationError(
            f"Unknown node type {node_type!r}. Expected one of: {legal}."
        )

    # ------------------------------------------------------------------
    # Ordinary content
    # ------------------------------------------------------------------

    def _text(self, item: Mapping[str, Any]) -> TextRun:
        return TextRun(
            item.get("text", ""),
            bold=item.get("bold", False),
            italic=item.get("italic", False),
            color=item.get("color"),
            size=item.get("size"),
        )

    def _paragraph(self, item: Mapping[str, Any]) -> Paragraph:
        if "children" in item:
            return Paragraph(self.nodes(item["children"]))
        return Paragraph(item.get("text", ""))

    def _table(self, item: Mapping[str, Any]) -> Table:
        rows = []
        for row in item.get("rows", []):
            cells = []
            for cell in row:
                cells.append(TableCell(cell if isinstance(cell, str) else self.nodes(cell)))
            rows.append(TableRow(cells))
        return Table(rows)

    # ------------------------------------------------------------------
    # Content controls
    # ------------------------------------------------------------------

    def _control(self, control_class: type, item: Mapping[str, Any]) -> XmlComponent:
        options = {}
        for key, value in item.items():
            if key != "type":
                name = snake_case(key)
                options[_OPTION_NAMES.get(name, name)] = value
        if "children" in options:
            options["children"] = self.nodes(options["children"])
        if "default_date" in options:
            options["default_date"] = _parse_date(options["default_date"])
        options.setdefault("id_generator", self._id_generator)
        options.setdefault("diagnostics", self._diagnostics)
        try:
            return control_class(**options)
        except TypeError as e:
            raise ConfigurationError(
                f"{control_class.__name__}: unsupported option in definition ({e})."
            ) from e


def load_definition(
    data: Mapping[str, Any],
    *,
    id_generator: IdGenerator | None = None,
    diagnostics: Diagnostics | None = None,
) -> list[XmlComponent]:
    """Build the top-level nodes described by ``data["body"]``."""
    return DefinitionLoader(id_generator, diagnostics).load(data)


def load_definition_file(
    path: str | Path,
    *,
    id_generator: IdGenerator | None = None,
    diagnostics: Diagnostics | None = None,
) -> list[XmlComponent]:
    """Read a UTF-8 JSON definition file and build its nodes."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return load_definition(data, id_generator=id_generator, diagnostics=diagnostics)
