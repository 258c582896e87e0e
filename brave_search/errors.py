from __future__ import annotations

from enum import Enum
from typing import Any, Optional

import httpx


class ErrorKind(str, Enum):
    RATE_LIMIT = "rate_limit"
    AUTHENTICATION = "authentication"
    UNPROCESSABLE = "unprocessable"
    API = "api"
    TRANSPORT = "transport"
    SUMMARY_FAILED = "summary_failed"
    SUMMARY_TIMEOUT = "summary_timeout"
    CANCELLED = "cancelled"


class BraveSearchError(Exception):
    """Every failure raised by the client, tagged with an ``ErrorKind``.

    ``response_data`` holds the decoded response body (or raw text when the
    body is not JSON) for HTTP failures, and is ``None`` otherwise.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.API,
        *,
        status_code: Optional[int] = None,
        response_data: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.response_data = response_data

    def __repr__(self) -> str:
        return f"BraveSearchError(kind={self.kind.value!r}, status_code={self.status_code!r}, message={self.message!r})"


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


def _server_message(body: Any, fallback: str) -> str:
    if isinstance(body, dict):
        message = body.get("message")
        if message:
            return str(message)
        error = body.get("error")
        if isinstance(error, dict):
            detail = error.get("detail") or error.get("code")
            if detail:
                return str(detail)
    return fallback


def error_from_response(response: httpx.Response) -> BraveSearchError:
    status = response.status_code
    body = _decode_body(response)
    message = _server_message(body, response.reason_phrase or f"HTTP {status}")

    if status == 429:
        return BraveSearchError(
            f"Rate limit exceeded: {message}", ErrorKind.RATE_LIMIT, status_code=status, response_data=body
        )
    if status == 401:
        return BraveSearchError(
            f"Authentication error: {message}", ErrorKind.AUTHENTICATION, status_code=status, response_data=body
        )
    if status == 422:
        return BraveSearchError(
            f"Unprocessable request: {message}", ErrorKind.UNPROCESSABLE, status_code=status, response_data=body
        )
    return BraveSearchError(f"API error ({status}): {message}", ErrorKind.API, status_code=status, response_data=body)


def error_from_transport(exc: httpx.HTTPError) -> BraveSearchError:
    return BraveSearchError(f"Unexpected error: {str(exc) or type(exc).__name__}", ErrorKind.TRANSPORT)
