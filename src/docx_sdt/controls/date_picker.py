"""
Date Picker Content Control
============================
Inline control showing a calendar picker in Word.

Example::

    DatePickerContentControl(
        tag="DueDate",
        date_format="yyyy-MM-dd",
        default_date=datetime(2024, 12, 31, tzinfo=timezone.utc),
        children=[TextRun("2024-12-31")],
    )

Naive datetimes and plain dates are taken as UTC when written to
``w:fullDate``.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Any, Sequence

from ..errors import ConfigurationError
from ..models.content import ContentKind, Fragment, InlineContent
from ..models.properties import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_LOCALE,
    CalendarType,
    DateStorageFormat,
    coerce_enum,
)
from .base import ContentControl, as_children

_LOCALE = re.compile(r"^[a-z]{2}-[A-Z]{2}$")


def format_full_date(value: date) -> str:
    """ISO-8601 UTC timestamp with milliseconds, e.g. ``2024-12-31T00:00:00.000Z``."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


class DatePickerContentControl(ContentControl, InlineContent):
    """
    Date picker control.

    date_format:          Word date pattern, default "MM/dd/yyyy"
    calendar_type:        CalendarType, default gregorian
    locale:               language tag such as "en-US", written as w:lid
    default_date:         date or datetime written as w:fullDate
    store_mapped_data_as: DateStorageFormat, default text
    """

    kind = ContentKind.DATE_CONTROL
    _tag_example = "tag='DueDate', children=[TextRun('12/31/2024')]"

    def __init__(
        self,
        *,
        children: Sequence[InlineContent] | None = None,
        date_format: str | None = None,
        calendar_type: CalendarType | str | None = None,
        locale: str | None = None,
        default_date: date | None = None,
        store_mapped_data_as: DateStorageFormat | str | None = None,
        **properties: Any,
    ) -> None:
        self._children = as_children(children)
        self._date_format = date_format or DEFAULT_DATE_FORMAT
        self._calendar_type = calendar_type or CalendarType.GREGORIAN
        self._locale = locale or DEFAULT_LOCALE
        self._default_date = default_date
        self._store_mapped_data_as = store_mapped_data_as or DateStorageFormat.TEXT
        super().__init__(**properties)

    @property
    def date_format(self) -> str:
        return self._date_format

    @property
    def calendar_type(self) -> CalendarType:
        return self._calendar_type

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def default_date(self) -> date | None:
        return self._default_date

    @property
    def store_mapped_data_as(self) -> DateStorageFormat:
        return self._store_mapped_data_as

    def _validate_payload(self) -> None:
        name = self.control_name
        self._require_children(
            "TextRun element",
            "tag='DueDate', children=[TextRun('12/31/2024')]",
        )
        self._require_inline_children()

        if not isinstance(self._date_format, str):
            raise ConfigurationError(
                f"{name}: 'date_format' must be a string. "
                "Use standard date format patterns like 'MM/dd/yyyy', 'dd/MM/yyyy', or 'yyyy-MM-dd'."
            )
        self._calendar_type = coerce_enum(CalendarType, self._calendar_type, name, "calendar_type")
        self._store_mapped_data_as = coerce_enum(
            DateStorageFormat, self._store_mapped_data_as, name, "store_mapped_data_as"
        )
        if self._default_date is not None and not isinstance(self._default_date, date):
            raise ConfigurationError(
                f"{name}: 'default_date' must be a date or datetime. "
                f"Received: {self._default_date!r}. "
                f"Example: {name}(default_date=datetime(2024, 12, 31), ...)"
            )

        if not isinstance(self._locale, str):
            raise ConfigurationError(
                f"{name}: 'locale' must be a string such as 'en-US'. "
                f"Received: {self._locale!r}."
            )
        if not _LOCALE.match(self._locale):
            self._diagnostics.warn(
                "SDT-020",
                name,
                f"Locale '{self._locale}' may not be in the expected format. "
                "Consider using standard locale codes like 'en-US', 'en-GB', 'fr-FR', etc.",
                "locale",
            )

    def _payload_properties(self) -> list[Fragment]:
        settings: list[Fragment] = [
            {"w:dateFormat": {"_attr": {"w:val": self._date_format}}},
            {"w:calendar": {"_attr": {"w:val": self._calendar_type.value}}},
            {"w:lid": {"_attr": {"w:val": self._locale}}},
            {"w:storeMappedDataAs": {"_attr": {"w:val": self._store_mapped_data_as.value}}},
        ]
        if self._default_date is not None:
            settings.append({"w:fullDate": {"_attr": {"w:val": format_full_date(self._default_date)}}})
        return [{"w:date": settings}]
