from __future__ import annotations

import time
from contextlib import asynccontextmanager
from enum import Enum
from typing import Any, AsyncIterator, Dict, Iterable, Mapping, Optional

import httpx

from .config import BraveSearchConfig
from .errors import BraveSearchError, ErrorKind, error_from_response, error_from_transport
from .logging_utils import get_logger, log_event


WEB_SEARCH_PATH = "/web/search"
IMAGE_SEARCH_PATH = "/images/search"
NEWS_SEARCH_PATH = "/news/search"
SUMMARIZER_SEARCH_PATH = "/summarizer/search"
LOCAL_POIS_PATH = "/local/pois"
LOCAL_DESCRIPTIONS_PATH = "/local/descriptions"

# Every result category the web search endpoint can return.
WIDENED_RESULT_FILTER = "discussions,faq,news,query,summarizer,videos,web,infobox"

logger = get_logger()


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ",".join(_format_value(item) for item in value)
    return str(value)


def format_options(options: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    if not options:
        return {}
    return {key: _format_value(value) for key, value in options.items() if value is not None}


def join_ids(ids: Iterable[str]) -> str:
    id_list = [str(item) for item in ids]
    if not id_list:
        raise ValueError("at least one location id is required")
    return ",".join(id_list)


def require_query(query: str) -> str:
    if not query or not query.strip():
        raise ValueError("query must be a non-empty string")
    return query


def build_headers(api_key: str) -> Dict[str, str]:
    return {
        "Accept": "application/json",
        "Accept-Encoding": "gzip",
        "X-Subscription-Token": api_key,
    }


class RequestBuilder:
    def __init__(self, config: BraveSearchConfig, http_client: Optional[httpx.AsyncClient] = None) -> None:
        self._config = config
        self._http_client = http_client

    @property
    def config(self) -> BraveSearchConfig:
        return self._config

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http_client is not None:
            yield self._http_client
            return
        async with httpx.AsyncClient(timeout=self._config.request_timeout) as client:
            yield client

    def build_params(self, primary: Mapping[str, str], options: Optional[Mapping[str, Any]] = None) -> Dict[str, str]:
        params = dict(primary)
        params.update(format_options(options))
        return params

    async def get(self, path: str, params: Mapping[str, str]) -> Any:
        try:
            return await self._send(path, params)
        except BraveSearchError as exc:
            if not self._should_widen(path, exc):
                raise
        retry_params = dict(params)
        retry_params["result_filter"] = WIDENED_RESULT_FILTER
        log_event(
            logger,
            {
                "event": "request_retry",
                "path": path,
                "reason": "unprocessable",
                "result_filter": WIDENED_RESULT_FILTER,
            },
        )
        return await self._send(path, retry_params)

    def _should_widen(self, path: str, exc: BraveSearchError) -> bool:
        return (
            self._config.retry_unprocessable
            and path == WEB_SEARCH_PATH
            and exc.kind is ErrorKind.UNPROCESSABLE
        )

    async def _send(self, path: str, params: Mapping[str, str]) -> Any:
        url = f"{self._config.endpoint_base}{path}"
        headers = build_headers(self._config.api_key.get_secret_value())
        start = time.perf_counter()
        log_event(logger, {"event": "request_started", "method": "GET", "path": path})
        try:
            async with self._client() as client:
                response = await client.get(url, params=params, headers=headers)
        except httpx.HTTPError as exc:
            error = error_from_transport(exc)
            self._log_failure(path, error, start)
            raise error from exc

        duration_ms = int((time.perf_counter() - start) * 1000)
        if not response.is_success:
            error = error_from_response(response)
            self._log_failure(path, error, start)
            raise error

        try:
            payload = response.json()
        except ValueError as exc:
            error = BraveSearchError(
                f"API error ({response.status_code}): response body is not valid JSON",
                ErrorKind.API,
                status_code=response.status_code,
                response_data=response.text,
            )
            self._log_failure(path, error, start)
            raise error from exc

        log_event(
            logger,
            {
                "event": "request_completed",
                "method": "GET",
                "path": path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return payload

    def _log_failure(self, path: str, error: BraveSearchError, start: float) -> None:
        log_event(
            logger,
            {
                "event": "request_failed",
                "method": "GET",
                "path": path,
                "kind": error.kind.value,
                "status_code": error.status_code,
                "error": error.message,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
