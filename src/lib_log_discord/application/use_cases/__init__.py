"""Use cases orchestrating payload construction, delivery and error reporting."""

from __future__ import annotations

from .build_payload import create_build_payload, render_timestamp
from .deliver import create_send
from .report_error import ReportTier, collect_peers, create_report_error

__all__ = [
    "ReportTier",
    "collect_peers",
    "create_build_payload",
    "create_report_error",
    "create_send",
    "render_timestamp",
]
