"""Process-wide telemetry reporter registration."""

from __future__ import annotations

import threading
from typing import Any, Optional

__all__ = ["set_telemetry_reporting", "get_telemetry_reporting", "reset_telemetry_reporting"]

_lock = threading.Lock()
_reporter: Optional[Any] = None


def set_telemetry_reporting(reporter: Any) -> None:
    """Register the telemetry reporter; a reporter already set is kept."""
    global _reporter
    with _lock:
        if _reporter is None:
            _reporter = reporter


def get_telemetry_reporting() -> Optional[Any]:
    """Return the registered telemetry reporter, or None."""
    return _reporter


def reset_telemetry_reporting() -> None:
    """Forget the registered telemetry reporter."""
    global _reporter
    with _lock:
        _reporter = None