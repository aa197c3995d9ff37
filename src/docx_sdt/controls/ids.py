"""
Content Control IDs
====================
Numeric identity (w:id) for content controls.

Word rejects a document in which two structured document tags share an
ID, so every control variant draws from the same generator. The shared
instance ``content_control_ids`` is used unless a control is given its
own generator, which is how tests get deterministic IDs::

    ids = IdGenerator(start=100)
    RunContentControl(tag="A", children=[TextRun("a")], id_generator=ids).id  # 100
"""

from __future__ import annotations

import threading
from typing import Iterator


class IdGenerator:
    """Thread-safe source of increasing positive integers."""

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("start must be a positive integer")
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
        return value

    __call__ = next

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next()

    def __repr__(self) -> str:
        return f"IdGenerator(next={self._next})"


content_control_ids = IdGenerator()
