"""Base64 and base64url conversions used by the attestation protocol."""

from __future__ import annotations

import base64
import binascii

__all__ = [
    "base64_to_binary",
    "binary_to_base64",
    "binary_to_base64url",
    "base64url_to_binary",
    "base64_encode",
    "base64_decode",
]


def _as_bytes(data: bytes | bytearray | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def base64_to_binary(data: str) -> bytes:
    """Decode standard base64 text into bytes; padding is optional.

    Raises ValueError on characters outside the base64 alphabet.
    """
    body = data.rstrip("=")
    if len(body) % 4 == 1:
        raise ValueError("invalid base64 length")
    padded = body + "=" * (-len(body) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 data: {exc}") from exc


def binary_to_base64(data: bytes | bytearray) -> str:
    """Encode bytes as padded standard base64."""
    return base64.b64encode(bytes(data)).decode("ascii")


def binary_to_base64url(data: bytes | bytearray) -> str:
    """Encode bytes as base64url without padding."""
    return base64.urlsafe_b64encode(bytes(data)).decode("ascii").rstrip("=")


def base64url_to_binary(data: str) -> bytes:
    """Decode base64url text, with or without padding, into bytes."""
    return base64_to_binary(data.replace("-", "+").replace("_", "/"))


def base64_encode(data: str | bytes) -> str:
    """Encode a string (UTF-8) or bytes as padded standard base64."""
    return binary_to_base64(_as_bytes(data))


def base64_decode(data: str) -> str:
    """Decode base64 text into a string, dropping trailing NUL characters."""
    return base64_to_binary(data).rstrip(b"\0").decode("utf-8")