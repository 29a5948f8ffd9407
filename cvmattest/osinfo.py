"""Operating system details gathered for an attestation request."""

from __future__ import annotations

import logging
import os
import re
import sys
from typing import Optional

__all__ = [
    "attestation_pcr_list",
    "parse_os_release_file",
    "parse_version_string",
    "windows_version",
]

_log = logging.getLogger(__name__)

_LINUX_PCRS = (0, 1, 2, 3, 4, 5, 6, 7)
_WINDOWS_PCRS = (0, 1, 2, 3, 4, 5, 6, 7, 11, 12, 13, 14)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def attestation_pcr_list(windows: Optional[bool] = None) -> list[int]:
    """Return the PCR indices used for attestation.

    Windows guests use a larger set than Linux guests. When ``windows`` is
    None the running platform decides.
    """
    if windows is None:
        windows = sys.platform == "win32"
    return list(_WINDOWS_PCRS if windows else _LINUX_PCRS)


def parse_os_release_file(path: str | os.PathLike[str], delim: str = "=") -> dict[str, str]:
    """Read key/value pairs from an os-release style file.

    A line is split at the first character that appears in ``delim``; lines
    without such a character are skipped. Double quotes are removed from the
    value, and a later key replaces an earlier one.

    Raises ValueError for a missing path or an empty delimiter, and OSError
    when the file cannot be read.
    """
    if path is None or not delim:
        raise ValueError("Invalid input argument")

    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        _log.error("Failed to open file:%s", path)
        raise

    delimiters = set(delim)
    entries: dict[str, str] = {}
    for line in text.split("\n"):
        pos = next((i for i, ch in enumerate(line) if ch in delimiters), None)
        if pos is None:
            continue
        key = line[:pos]
        entries[key] = line[pos + 1:].replace('"', "")
    return entries


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        _log.error("Invalid input argument")
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN < value <= _INT_MAX:
        _log.error("Input out of range")
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_version_string(text: str) -> tuple[int, int]:
    """Extract (major, minor) from a dotted version string.

    Only the first two components are read; a missing minor component is 0.
    Each component must start with an integer. Raises ValueError otherwise.
    """
    if not text:
        _log.error("Invalid input parameter")
        raise ValueError("empty version string")

    major_str, dot, rest = text.partition(".")
    try:
        major = _parse_int(major_str)
    except ValueError:
        _log.error("Failed to get major version from string:%s", major_str)
        raise

    minor = 0
    if dot:
        minor_str = rest.partition(".")[0]
        try:
            minor = _parse_int(minor_str)
        except ValueError:
            _log.error("Failed to get minor version from string:%s", minor_str)
            raise

    mask = 0xFFFFFFFF
    return major & mask, minor & mask


def windows_version() -> tuple[int, int, str]:
    """Return (major, minor, build) reported for Windows guests."""
    return 10, 0, "NotApplicable"