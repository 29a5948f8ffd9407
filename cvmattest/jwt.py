"""Reading the runtime key published in an attestation token."""

from __future__ import annotations

import json
import logging
from typing import Any

from cvmattest.encoding import base64_decode

__all__ = ["extract_jwk_info"]

_log = logging.getLogger(__name__)


def _member(value: Any, key: str) -> Any:
    if value is None:
        return None
    if isinstance(value, dict):
        return value.get(key)
    raise ValueError(f"cannot look up {key!r} in a non-object value")


def _first(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, list):
        return value[0] if value else None
    raise ValueError("cannot index a non-array value")


def _as_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise ValueError("value is not convertible to a string")


def extract_jwk_info(jwt: str) -> tuple[str, str]:
    """Return the base64url modulus and exponent of the token's runtime key.

    The key is read from ``x-ms-runtime.keys[0]`` of the token's claims; a
    missing field yields an empty string. Raises ValueError when the token is
    empty, has fewer than three parts, or its claims cannot be decoded.
    """
    if not jwt:
        _log.error("Invalid input argument")
        raise ValueError("Invalid input argument")

    tokens = jwt.split(".")
    if len(tokens) < 3:
        _log.error("Invalid JWT token")
        raise ValueError("Invalid JWT token")

    try:
        claims = json.loads(base64_decode(tokens[1]))
    except ValueError as exc:
        _log.error("Error parsing the JWT claims")
        raise ValueError("Error parsing the JWT claims") from exc

    try:
        key = _first(_member(_member(claims, "x-ms-runtime"), "keys"))
        n = _as_string(_member(key, "n"))
        e = _as_string(_member(key, "e"))
    except ValueError as exc:
        _log.error("Unexpected error while extracting JWK info from JWT")
        raise ValueError("Unexpected error while extracting JWK info from JWT") from exc

    return n, e