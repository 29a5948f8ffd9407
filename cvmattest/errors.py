"""Error codes and the exception raised by attestation helpers."""

from __future__ import annotations

import enum
import logging

__all__ = ["ErrorCode", "AttestationError"]

_log = logging.getLogger(__name__)


class ErrorCode(enum.Enum):
    """Failure categories reported by the attestation client."""

    SUCCESS = enum.auto()
    ERROR_CURL_INITIALIZATION = enum.auto()
    ERROR_ATTESTATION_FAILED = enum.auto()
    ERROR_HTTP_REQUEST_EXCEEDED_RETRIES = enum.auto()
    ERROR_HTTP_REQUEST_FAILED = enum.auto()
    ERROR_SENDING_CURL_REQUEST_FAILED = enum.auto()
    ERROR_INVALID_INPUT_PARAMETER = enum.auto()
    ERROR_EVP_PKEY_ENCRYPT_INIT_FAILED = enum.auto()
    ERROR_EVP_PKEY_ENCRYPT_FAILED = enum.auto()
    ERROR_CONVERTING_JWK_TO_RSA_PUB = enum.auto()
    ERROR_PARSING_DNS_INFO = enum.auto()
    ERROR_HCL_REPORT_EMPTY = enum.auto()
    ERROR_HCL_REPORT_PARSING_FAILURE = enum.auto()


class AttestationError(Exception):
    """Raised when an attestation operation fails.

    Carries the error code and a human readable description.
    """

    def __init__(self, code: ErrorCode, description: str) -> None:
        super().__init__(f"Error code:{code.name} description:{description}")
        self.code = code
        self.description = description
        _log.error("Error code:%s description:%s", code.name, description)