"""
Data Binding Validation
========================
Guards for the data binding of a content control.

A malformed ``w:storeItemID`` makes Word refuse to open the document,
so it is a hard failure. A relative XPath is only reported.
"""

from __future__ import annotations

import random
import re

from ..errors import FormatError
from ..models.properties import DataBinding
from .diagnostics import Diagnostics


class GuidValidator:
    """Validation helpers for brace-delimited GUIDs."""

    GUID_REGEX = re.compile(
        r"^\{[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}\}$"
    )

    @classmethod
    def is_valid_guid(cls, guid: str) -> bool:
        return isinstance(guid, str) and cls.GUID_REGEX.match(guid) is not None

    @classmethod
    def validate_guid(cls, guid: str, context: str = "GUID") -> None:
        """Raise FormatError with the offending value and the expected pattern."""
        if not cls.is_valid_guid(guid):
            raise FormatError(
                f'{context}: Invalid GUID format "{guid}". '
                "GUIDs must follow the format {XXXXXXXX-XXXX-XXXX-XXXX-XXXXXXXXXXXX} "
                "where X is a hexadecimal digit. "
                'Example: "{12345678-1234-5678-9ABC-123456789012}". '
                "This validation prevents document corruption that occurs with invalid GUID formats."
            )

    @staticmethod
    def generate_test_guid() -> str:
        """Random, correctly formatted GUID for tests and demos."""
        digits = "".join(random.choice("0123456789ABCDEF") for _ in range(32))
        return "{%s-%s-%s-%s-%s}" % (
            digits[:8], digits[8:12], digits[12:16], digits[16:20], digits[20:],
        )


def validate_store_item_id(store_item_id: str, context: str) -> None:
    GuidValidator.validate_guid(store_item_id, f"{context} dataBinding.storeItemId")


def validate_data_binding(
    binding: DataBinding,
    context: str,
    diagnostics: Diagnostics | None = None,
) -> None:
    """
    Validate a data binding.

    Raises FormatError for an empty XPath or a malformed store item ID.
    Reports SDT-003 when the XPath does not start with "/".
    """
    if not binding.xpath or not binding.xpath.strip():
        raise FormatError(
            f"{context}: dataBinding.xpath cannot be empty. "
            'Provide a valid XPath expression like "/root/element"'
        )

    validate_store_item_id(binding.store_item_id, context)

    if not binding.xpath.startswith("/") and diagnostics is not None:
        diagnostics.warn(
            "SDT-003",
            context,
            f'dataBinding.xpath "{binding.xpath}" should typically start with "/" for absolute paths',
            "data_binding",
        )
