"""Small runtime helpers: identifiers, timestamps and process information."""

from __future__ import annotations

import os
import time
import uuid

__all__ = ["new_uuid", "current_utc_time", "time_since_epoch_millis", "get_pid"]

_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def new_uuid() -> str:
    """Return a new random UUID in its canonical string form."""
    return str(uuid.uuid4())


def current_utc_time() -> str:
    """Return the current timestamp formatted as YYYY-MM-DDTHH:MM:SSZ.

    The clock is read in the local time zone.
    """
    return time.strftime(_TIMESTAMP_FORMAT, time.localtime())


def time_since_epoch_millis() -> int:
    """Return milliseconds elapsed since the Unix epoch."""
    return time.time_ns() // 1_000_000


def get_pid() -> int:
    """Return the process id of the caller."""
    return os.getpid()