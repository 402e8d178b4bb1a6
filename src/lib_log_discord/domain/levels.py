"""Severity levels and the embed colour table.

Purpose
-------
Model the ordered severities understood by the host logging system and the
fixed colours Discord embeds use to visualise them.

Contents
--------
* :class:`SeverityLevel` enum with ordering and conversion helpers.
* :data:`EMBED_COLORS` mapping severity labels to 24-bit RGB integers.
* :func:`color_for` total colour lookup with a neutral fallback.

System Role
-----------
Used by the payload builder for colour selection and by hosts (``LogHub``,
``DiscordLogHandler``) to gate records against a transport threshold.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class SeverityLevel(Enum):
    """Ordered severities; a higher value is more severe."""

    SILLY = 0
    DEBUG = 10
    VERBOSE = 20
    INFO = 30
    WARN = 40
    ERROR = 50

    @property
    def severity(self) -> str:
        """Return the lowercase label used on the wire."""

        return self.name.lower()

    @property
    def color(self) -> int:
        """Return the embed colour associated with this level."""

        return EMBED_COLORS[self.severity]

    def allows(self, level: "SeverityLevel") -> bool:
        """Return ``True`` when ``level`` passes a threshold set to ``self``.

        Examples
        --------
        >>> SeverityLevel.WARN.allows(SeverityLevel.ERROR)
        True
        >>> SeverityLevel.WARN.allows(SeverityLevel.INFO)
        False
        """

        return level.value >= self.value

    @classmethod
    def from_name(cls, name: str) -> "SeverityLevel":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def coerce(cls, value: "SeverityLevel | str") -> "SeverityLevel":
        """Accept an enum member or a case-insensitive label."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_name(value)
        raise ValueError(f"Unsupported log level value: {value!r}")

    @classmethod
    def lookup(cls, value: Any) -> "SeverityLevel | None":
        """Return the matching level or ``None`` for labels outside the order."""

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls.from_name(value)
        except ValueError:
            return None


_ALIASES = {"WARNING": "WARN"}

EMBED_COLORS: Mapping[str, int] = MappingProxyType(
    {
        "error": 0xF44336,
        "warn": 0xFFC107,
        "info": 0x2196F3,
        "verbose": 0x9C27B0,
        "debug": 0x4CAF50,
        "silly": 0x607D8B,
        "log": 0x333333,
    }
)
#: Embed colours keyed by severity label; ``log`` only participates in colour lookup.

NEUTRAL_COLOR = EMBED_COLORS["log"]


def color_for(label: Any) -> int:
    """Return the embed colour for ``label``, falling back to :data:`NEUTRAL_COLOR`.

    Examples
    --------
    >>> hex(color_for("error"))
    '0xf44336'
    >>> color_for("nonsense") == NEUTRAL_COLOR
    True
    """

    if isinstance(label, SeverityLevel):
        label = label.severity
    if not isinstance(label, str):
        return NEUTRAL_COLOR
    return EMBED_COLORS.get(label, NEUTRAL_COLOR)


__all__ = ["EMBED_COLORS", "NEUTRAL_COLOR", "SeverityLevel", "color_for"]
