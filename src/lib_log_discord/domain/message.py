"""Log record handed to the sink by the host logging system.

Purpose
-------
Provide an immutable representation of one log call: the data items passed at
the call site, the severity label, and the emission timestamp.

System Role
-----------
Created by the host per log call, consumed once by the sink, never retained.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable

from .levels import SeverityLevel


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True, frozen=True)
class LogMessage:
    """One log record.

    Attributes
    ----------
    data:
        Items passed at the call site, in order. Only the last item is rendered
        by the default payload builder.
    level:
        Severity label such as ``"error"``. Labels outside
        :class:`SeverityLevel` are tolerated.
    date:
        Emission time as ``datetime`` or an ISO-8601 string.
    """

    data: tuple[Any, ...]
    level: str
    date: datetime | str

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", tuple(self.data))
        if isinstance(self.level, SeverityLevel):
            object.__setattr__(self, "level", self.level.severity)

    @property
    def last_item(self) -> Any:
        """Return the last data item, or ``None`` when no data was logged."""

        return self.data[-1] if self.data else None

    @classmethod
    def create(
        cls,
        level: SeverityLevel | str,
        *data: Any,
        clock: Callable[[], datetime] | None = None,
    ) -> "LogMessage":
        """Build a record stamped with the current UTC time.

        Examples
        --------
        >>> message = LogMessage.create("warn", "disk", 93)
        >>> message.level, message.last_item
        ('warn', 93)
        """

        label = level.severity if isinstance(level, SeverityLevel) else level
        now = (clock or _utc_now)()
        return cls(data=data, level=label, date=now)


__all__ = ["LogMessage"]
