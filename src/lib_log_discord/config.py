"""Environment and ``.env`` configuration helpers.

Purpose
-------
Let deployments configure the sink through environment variables, optionally
seeded from the nearest ``.env`` file, without hard-coding webhook URLs.

Contents
--------
* :data:`DOTENV_ENV_VAR` - toggle consulted by the CLI.
* :func:`enable_dotenv` - load the nearest ``.env`` once per process.
* :func:`config_from_env` - build a :class:`DiscordConfig` from ``LOG_DISCORD_*``.
"""

from __future__ import annotations

import os
from pathlib import Path
from threading import RLock
from typing import Any

from dotenv import load_dotenv

from .transport import DiscordConfig

DOTENV_ENV_VAR = "LIB_LOG_DISCORD_USE_DOTENV"

ENV_WEBHOOK = "LOG_DISCORD_WEBHOOK"
ENV_USERNAME = "LOG_DISCORD_USERNAME"
ENV_AVATAR = "LOG_DISCORD_AVATAR"
ENV_THUMB = "LOG_DISCORD_THUMB"
ENV_LEVEL = "LOG_DISCORD_LEVEL"

_FIELD_ENV = {
    "webhook": ENV_WEBHOOK,
    "username": ENV_USERNAME,
    "avatar": ENV_AVATAR,
    "thumb": ENV_THUMB,
    "level": ENV_LEVEL,
}

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOCK = RLock()
_DOTENV_PATH: Path | None = None


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` walking upwards from ``search_from`` (default: cwd).

    Existing environment variables keep precedence. The first successful load
    is cached; later calls return the same path without reloading.
    """

    global _DOTENV_PATH
    with _DOTENV_LOCK:
        if _DOTENV_PATH is not None:
            return _DOTENV_PATH
        start = (search_from or Path.cwd()).resolve()
        for directory in (start, *start.parents):
            candidate = directory / ".env"
            if candidate.is_file():
                load_dotenv(candidate, override=False)
                _DOTENV_PATH = candidate
                return candidate
        return None


def dotenv_requested(flag: bool | None) -> bool:
    """Resolve the CLI flag against :data:`DOTENV_ENV_VAR`; an explicit flag wins."""

    if flag is not None:
        return flag
    return os.getenv(DOTENV_ENV_VAR, "").strip().lower() in _TRUTHY


def config_from_env(**overrides: Any) -> DiscordConfig:
    """Build a :class:`DiscordConfig` from ``LOG_DISCORD_*`` variables.

    Non-``None`` keyword overrides take precedence over the environment.
    Raises :class:`ConfigurationError` when no webhook is available.

    Examples
    --------
    >>> import os
    >>> os.environ[ENV_WEBHOOK] = "https://discord.com/api/webhooks/0/a"
    >>> config_from_env(username="ops").username
    'ops'
    >>> del os.environ[ENV_WEBHOOK]
    """

    values: dict[str, Any] = {}
    for field, env_name in _FIELD_ENV.items():
        env_value = os.getenv(env_name)
        if env_value is not None and env_value.strip():
            values[field] = env_value.strip()
    values.update({key: value for key, value in overrides.items() if value is not None})
    values.setdefault("webhook", "")
    return DiscordConfig(**values)


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_PATH
    with _DOTENV_LOCK:
        _DOTENV_PATH = None


__all__ = [
    "DOTENV_ENV_VAR",
    "ENV_AVATAR",
    "ENV_LEVEL",
    "ENV_THUMB",
    "ENV_USERNAME",
    "ENV_WEBHOOK",
    "config_from_env",
    "dotenv_requested",
    "enable_dotenv",
]
