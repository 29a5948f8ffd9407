"""Splitting of attestation endpoint URLs."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cvmattest.errors import AttestationError, ErrorCode

__all__ = ["UrlInfo", "split_url", "parse_url"]

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class UrlInfo:
    """The parts of a URL as understood by the attestation client."""

    protocol: str
    domain: str
    port: str
    path: str
    query: str


def split_url(url: str) -> UrlInfo:
    """Split ``url`` into protocol, domain, port, path and query.

    Raises AttestationError when the URL is empty or holds no domain.
    """
    if not url:
        raise AttestationError(ErrorCode.ERROR_INVALID_INPUT_PARAMETER, "Invalid input parameter")

    text = url.strip()

    if text.startswith("https://"):
        offset = 8
    elif text.startswith("http://"):
        offset = 7
    else:
        offset = 0

    path_idx = text.find("/", offset + 1)
    if path_idx == -1:
        path = ""
        dns = text[offset:]
    else:
        path = text[path_idx:]
        dns = text[offset:path_idx]

    port_idx = dns.find(":")
    if port_idx == -1:
        port = ""
    else:
        port = dns[port_idx + 1:]
        dns = dns[:port_idx]

    protocol = text[: offset - 3] if offset > 0 else ""

    query_idx = path.find("?")
    if query_idx == -1:
        query = ""
    else:
        query = path[query_idx + 1:]
        path = path[:query_idx]

    if not dns:
        raise AttestationError(ErrorCode.ERROR_PARSING_DNS_INFO, "Error extracting DNS info from URL")

    _log.info("Attestation URL info - protocol {%s}, domain {%s}", protocol, dns)
    return UrlInfo(protocol=protocol, domain=dns, port=port, path=path, query=query)


def parse_url(url: str) -> str:
    """Return the domain name of ``url``."""
    return split_url(url).domain