"""Default renderer turning arbitrary logged data into embed text.

Purpose
-------
Provide a total, deterministic pretty-printer for the last item of a record:
it must accept cyclic containers, foreign objects with broken ``__repr__``
implementations, and exceptions, and it must never raise.

Contents
--------
* :func:`inspect_value` - render any value.
* :func:`render_last_item` - default renderer used by the payload builder.
"""

from __future__ import annotations

import traceback
from typing import Any

from rich.pretty import pretty_repr

from lib_log_discord.domain.message import LogMessage

_MAX_WIDTH = 80
_MAX_DEPTH = 6


def inspect_value(value: Any) -> str:
    """Return a human-readable representation of ``value``.

    Examples
    --------
    >>> inspect_value("boom")
    "'boom'"
    >>> loop = [1]
    >>> loop.append(loop)
    >>> "..." in inspect_value(loop)
    True
    >>> inspect_value(ValueError("bad input"))
    'ValueError: bad input'
    """

    if isinstance(value, BaseException):
        return _render_exception(value)
    try:
        return pretty_repr(value, max_width=_MAX_WIDTH, max_depth=_MAX_DEPTH)
    except Exception:  # pragma: no cover - rich already guards repr errors
        return _fallback_repr(value)


def render_last_item(message: LogMessage) -> str:
    """Render only the last data item of ``message``."""

    return inspect_value(message.last_item)


def _render_exception(error: BaseException) -> str:
    try:
        lines = traceback.format_exception(type(error), error, error.__traceback__)
    except Exception:  # pragma: no cover - traceback formatting is defensive itself
        return _fallback_repr(error)
    return "".join(lines).rstrip("\n")


def _fallback_repr(value: Any) -> str:
    return f"<{type(value).__qualname__} object at {id(value):#x}>"


__all__ = ["inspect_value", "render_last_item"]
