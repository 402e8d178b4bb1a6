"""Rich-powered console adapter implementing :class:`WarningConsolePort`.

Purpose
-------
Last tier of the failure-reporting cascade: print a delivery warning on
stderr when no hook or peer transport can take it.
"""

from __future__ import annotations

from rich.console import Console

from lib_log_discord.application.ports.console import WarningConsolePort

_PREFIX = "lib_log_discord"


class RichWarningConsole(WarningConsolePort):
    """Render delivery errors as yellow warning lines.

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), record=True, width=200)
    >>> RichWarningConsole(console=console).warn(RuntimeError("offline"))
    >>> console.export_text().strip()
    'lib_log_discord: RuntimeError: offline'
    """

    def __init__(self, *, console: Console | None = None, style: str = "yellow") -> None:
        self._console = console if console is not None else Console(stderr=True)
        self._style = style

    def warn(self, error: BaseException) -> None:
        self._console.print(self._format_line(error), style=self._style, markup=False, highlight=False)

    @staticmethod
    def _format_line(error: BaseException) -> str:
        line = f"{_PREFIX}: {type(error).__name__}: {error}"
        cause = error.__cause__
        if cause is not None:
            line += f" (caused by {type(cause).__name__}: {cause})"
        return line


__all__ = ["RichWarningConsole"]
