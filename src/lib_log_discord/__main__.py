"""Allow ``python -m lib_log_discord`` to run the Click command line."""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
