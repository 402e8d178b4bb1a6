"""Static package metadata surfaced by the CLI banner.

The values mirror ``pyproject.toml`` so ``lib_log_discord info`` can print them
without importing :mod:`importlib.metadata` at runtime.
"""

from __future__ import annotations

from typing import Callable

name = "lib_log_discord"
title = "Discord webhook sink for structured log records"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_log_discord"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_discord"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner through ``writer`` (defaults to :func:`print`).

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_discord:\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    text = [f"Info for {name}:\n", "\n"]
    text.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    if writer is None:
        print("".join(text), end="")
        return
    for line in text:
        writer(line)


__all__ = [
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
