"""
Diagnostics Channel
====================
Non-fatal advisories raised while constructing content controls.

Hard failures are exceptions (see :mod:`docx_sdt.errors`). Everything
that is suspicious but still produces a document Word will open is
reported here instead, so callers can assert on it, redirect it, or
ignore it.

Example::

    from docx_sdt import Diagnostics, RunContentControl, TextRun

    diagnostics = Diagnostics()
    RunContentControl(tag="Customer Name", children=[TextRun("x")],
                      diagnostics=diagnostics)
    for issue in diagnostics.warnings:
        print(f"[{issue.severity}] {issue.rule_id}: {issue.message}")

Rule ids:
- SDT-001  Tag contains whitespace
- SDT-002  Title longer than 255 characters
- SDT-003  Data binding XPath is not absolute
- SDT-004  Color is not a 6-digit hex value
- SDT-010  Dropdown list items share a value
- SDT-020  Date picker locale is not in xx-XX form
- SDT-030  Checkbox control was given content children
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------


class Severity(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


_LOG_LEVELS = {
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.INFO: logging.INFO,
}


@dataclass(frozen=True)
class Diagnostic:
    rule_id: str
    severity: Severity
    message: str
    source: str
    field: str | None = None

    def __str__(self) -> str:
        return f"{self.source}: {self.message}"


# ---------------------------------------------------------------------------
# Sink
# ---------------------------------------------------------------------------


class Diagnostics:
    """
    Collecting sink for construction diagnostics.

    Every reported diagnostic is kept in order and forwarded to the
    ``docx_sdt.validator.diagnostics`` logger at the matching level.
    Pass ``forward_to_log=False`` to keep them out of logging entirely.

    A sink created with ``parent`` also records everything into the parent,
    which then decides on logging. Controls use this to keep their own
    diagnostics while sharing a caller-supplied sink.
    """

    def __init__(
        self,
        forward_to_log: bool = True,
        parent: "Diagnostics | None" = None,
    ) -> None:
        self._issues: list[Diagnostic] = []
        self._forward_to_log = forward_to_log
        self._parent = parent

    def report(
        self,
        rule_id: str,
        severity: Severity,
        source: str,
        message: str,
        field: str | None = None,
    ) -> Diagnostic:
        issue = Diagnostic(rule_id, severity, message, source, field)
        self._record(issue)
        return issue

    def _record(self, issue: Diagnostic) -> None:
        self._issues.append(issue)
        if self._forward_to_log:
            logger.log(_LOG_LEVELS[issue.severity], "[%s] %s", issue.rule_id, issue)
        if self._parent is not None:
            self._parent._record(issue)

    def warn(
        self,
        rule_id: str,
        source: str,
        message: str,
        field: str | None = None,
    ) -> Diagnostic:
        return self.report(rule_id, Severity.WARNING, source, message, field)

    @property
    def issues(self) -> list[Diagnostic]:
        return list(self._issues)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [i for i in self._issues if i.severity == Severity.WARNING]

    def messages(self) -> list[str]:
        return [str(i) for i in self._issues]

    def clear(self) -> None:
        self._issues.clear()

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._issues))

    def __len__(self) -> int:
        return len(self._issues)

    def __repr__(self) -> str:
        return f"Diagnostics({len(self._issues)} issue(s))"
