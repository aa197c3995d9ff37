"""
docx-sdt – Word Content Controls
=================================
Construction, validation and serialization of WordprocessingML content
controls (structured document tags, ``w:sdt``): plain and rich text runs,
block sections, dropdown lists and combo boxes, date pickers and
checkboxes.

Invalid configurations fail at construction with a descriptive
ContentControlError; suspicious but legal ones are reported as
diagnostics.

Quick Start::

    from docx_sdt import (
        ContentControlBuilder, Paragraph, RunContentControl, TextRun, render_body,
    )

    name = RunContentControl(
        tag="CustomerName",
        title="Customer Name",
        children=[TextRun("[Customer Name]")],
    )
    priority = (
        ContentControlBuilder.dropdown("Priority")
        .add_item("High", "high")
        .add_item("Low", "low")
        .build([TextRun("High")])
    )

    xml = render_body([
        Paragraph([TextRun("Customer: "), name]),
        Paragraph([TextRun("Priority: "), priority]),
    ])
"""

__version__ = "0.1.0"

# Errors
from .errors import (
    ContentControlError,
    ConfigurationError,
    NestingViolationError,
    FormatError,
)

# Core models
from .models.properties import (
    Appearance,
    DropdownType,
    CalendarType,
    DateStorageFormat,
    DataBinding,
    Lock,
    DefaultStyle,
    ListItem,
    CheckboxSymbol,
    DEFAULT_DATE_FORMAT,
    DEFAULT_LOCALE,
    DEFAULT_CHECKED_SYMBOL,
    DEFAULT_UNCHECKED_SYMBOL,
    MAX_TITLE_LENGTH,
)
from .models.content import (
    ContentKind,
    SerializationContext,
    XmlComponent,
    InlineContent,
    BlockContent,
    TextRun,
    Paragraph,
    Table,
    TableRow,
    TableCell,
    content_kind,
)

# Controls
from .controls.ids import IdGenerator, content_control_ids
from .controls.base import ContentControl
from .controls.run import RunContentControl
from .controls.inline_rich_text import InlineRichTextContentControl
from .controls.block import BlockContentControl
from .controls.dropdown import DropdownContentControl
from .controls.date_picker import DatePickerContentControl
from .controls.checkbox import CheckboxContentControl

# Builders
from .builder.control_builder import ContentControlBuilder
from .builder.loader import load_definition, load_definition_file

# Serialization
from .ooxml.formatter import Formatter, render_body, to_element, to_xml

# Validator
from .validator.diagnostics import Diagnostic, Diagnostics, Severity
from .validator.guid import GuidValidator, validate_data_binding

__all__ = [
    # Errors
    "ContentControlError",
    "ConfigurationError",
    "NestingViolationError",
    "FormatError",
    # Models
    "Appearance",
    "DropdownType",
    "CalendarType",
    "DateStorageFormat",
    "DataBinding",
    "Lock",
    "DefaultStyle",
    "ListItem",
    "CheckboxSymbol",
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_LOCALE",
    "DEFAULT_CHECKED_SYMBOL",
    "DEFAULT_UNCHECKED_SYMBOL",
    "MAX_TITLE_LENGTH",
    "ContentKind",
    "SerializationContext",
    "XmlComponent",
    "InlineContent",
    "BlockContent",
    "TextRun",
    "Paragraph",
    "Table",
    "TableRow",
    "TableCell",
    "content_kind",
    # Controls
    "IdGenerator",
    "content_control_ids",
    "ContentControl",
    "RunContentControl",
    "InlineRichTextContentControl",
    "BlockContentControl",
    "DropdownContentControl",
    "DatePickerContentControl",
    "CheckboxContentControl",
    # Builders
    "ContentControlBuilder",
    "load_definition",
    "load_definition_file",
    # Serialization
    "Formatter",
    "render_body",
    "to_element",
    "to_xml",
    # Validation
    "Diagnostic",
    "Diagnostics",
    "Severity",
    "GuidValidator",
    "validate_data_binding",
]
