"""Console port used as the last tier of failure reporting.

Purpose
-------
Define the narrow contract for writing a delivery warning to a local console
when neither a custom hook nor peer transports can take the error.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class WarningConsolePort(Protocol):
    """Write a human-readable warning describing ``error``."""

    def warn(self, error: BaseException) -> None:
        """Render ``error`` as a warning line."""


__all__ = ["WarningConsolePort"]
