"""Shared mutable cell holding a transport's current severity threshold."""

from __future__ import annotations

from threading import RLock
from typing import Any

from .levels import SeverityLevel


class LevelCell:
    """Thread-safe holder for ``SeverityLevel | None`` (``None`` means disabled).

    The adapter and the handle it registers with a host both read the same
    cell, so a change made through either one is visible to the other.

    Examples
    --------
    >>> cell = LevelCell("debug")
    >>> cell.get()
    <SeverityLevel.DEBUG: 10>
    >>> cell.set(False)
    >>> cell.get() is None
    True
    """

    __slots__ = ("_lock", "_value")

    def __init__(self, value: Any = SeverityLevel.SILLY) -> None:
        self._lock = RLock()
        self._value = normalize_threshold(value)

    def get(self) -> SeverityLevel | None:
        with self._lock:
            return self._value

    def set(self, value: Any) -> None:
        normalized = normalize_threshold(value)
        with self._lock:
            self._value = normalized

    def __repr__(self) -> str:
        return f"LevelCell({self.get()!r})"


def normalize_threshold(value: Any) -> SeverityLevel | None:
    """Coerce user input into a threshold; ``False``/``None`` disable the transport."""

    if value is None or value is False:
        return None
    return SeverityLevel.coerce(value)


__all__ = ["LevelCell", "normalize_threshold"]
