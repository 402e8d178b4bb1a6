"""Console adapters."""

from __future__ import annotations

from .rich_console import RichWarningConsole

__all__ = ["RichWarningConsole"]
