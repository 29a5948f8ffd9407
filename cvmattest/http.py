"""Sending attestation requests over HTTP with retries."""

from __future__ import annotations

import email.utils
import logging
import random
import time
from datetime import datetime, timezone
from typing import Callable, Optional

import requests

from cvmattest.errors import AttestationError, ErrorCode

__all__ = ["generate_random_jitter", "send_request"]

_log = logging.getLogger(__name__)

MAX_RETRIES = 3
BACK_OFF_TIME_SECONDS = 5
MAX_JITTER_MILLISECONDS = 5000

HTTP_STATUS_OK = 200
HTTP_STATUS_ATTESTATION_FAILURE = 400
HTTP_STATUS_REQUEST_TIMEOUT = 408
HTTP_STATUS_TOO_MANY_REQUESTS = 429
HTTP_STATUS_SERVER_ERROR = 500


def generate_random_jitter() -> int:
    """Return a random delay between 0 and 5000 milliseconds."""
    jitter = random.randint(0, MAX_JITTER_MILLISECONDS)
    _log.info("Adding additional random jitter of %d milliseconds", jitter)
    return jitter


def _retry_after_seconds(response: requests.Response) -> int:
    value = response.headers.get("Retry-After")
    if not value:
        return 0
    value = value.strip()
    if value.isdigit():
        return int(value)
    try:
        when = email.utils.parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return 0
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return max(0, int((when - datetime.now(timezone.utc)).total_seconds()))


def _is_retryable(status: int) -> bool:
    return status in (HTTP_STATUS_TOO_MANY_REQUESTS, HTTP_STATUS_REQUEST_TIMEOUT) or (
        status >= HTTP_STATUS_SERVER_ERROR
    )


def _post_with_retries(
    url: str, body: bytes, session: requests.Session, sleep: Callable[[float], object]
) -> str:
    headers = {"Content-Type": "application/json"}
    retries = 0
    while True:
        try:
            response = session.post(url, data=body, headers=headers)
        except requests.RequestException as exc:
            _log.error("Failed sending request with error:%s", exc)
            raise AttestationError(
                ErrorCode.ERROR_SENDING_CURL_REQUEST_FAILED,
                f"Failed sending request with error:{exc}",
            ) from exc

        status = response.status_code
        text = response.text
        if status == HTTP_STATUS_OK:
            return text

        if status == HTTP_STATUS_ATTESTATION_FAILURE:
            _log.error("Attestation failed with error code:%d description:%s", status, text)
            raise AttestationError(ErrorCode.ERROR_ATTESTATION_FAILED, text)

        if not _is_retryable(status):
            _log.error("Http Request failed with error:%d description:%s", status, text)
            raise AttestationError(ErrorCode.ERROR_HTTP_REQUEST_FAILED, text)

        _log.error("Http Request failed with error:%d description:%s", status, text)
        _log.info("Retrying")
        if retries == MAX_RETRIES:
            _log.error("Maximum retries exceeded.")
            raise AttestationError(ErrorCode.ERROR_HTTP_REQUEST_EXCEEDED_RETRIES, text)

        retry_after = _retry_after_seconds(response)
        if retry_after:
            _log.info("Http Request throttled, retry-after: %d", retry_after)

        back_off = BACK_OFF_TIME_SECONDS * 2**retries
        retries += 1
        wait_ms = max(back_off, retry_after) * 1000 + generate_random_jitter()
        _log.info("Http Request wait time: %d", wait_ms)
        sleep(wait_ms / 1000)


def send_request(
    url: str,
    payload: str,
    session: Optional[requests.Session] = None,
    sleep: Callable[[float], object] = time.sleep,
) -> str:
    """POST a JSON ``payload`` to ``url`` and return the response body.

    Throttling, timeouts and server errors are retried up to three times with
    exponential back-off plus random jitter, honouring Retry-After. Raises
    AttestationError on a failed attestation, other HTTP errors, exhausted
    retries or a transport failure.
    """
    body = payload.encode("utf-8")
    if session is not None:
        return _post_with_retries(url, body, session, sleep)
    with requests.Session() as own_session:
        return _post_with_retries(url, body, own_session, sleep)