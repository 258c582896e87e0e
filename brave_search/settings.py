from __future__ import annotations

import os
from typing import Optional

from .config import DEFAULT_BASE_URL, DEFAULT_POLL_INTERVAL_MS, DEFAULT_REQUEST_TIMEOUT, BraveSearchConfig


def _optional_int(name: str) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    return int(raw) if raw else None


def load_settings() -> BraveSearchConfig:
    api_key = os.environ.get("BRAVE_SEARCH_API_KEY", "")
    if not api_key:
        raise RuntimeError("BRAVE_SEARCH_API_KEY is required to build a Brave Search client")
    base_url = os.environ.get("BRAVE_SEARCH_BASE_URL", DEFAULT_BASE_URL)
    poll_interval = int(os.environ.get("BRAVE_SEARCH_POLL_INTERVAL", str(DEFAULT_POLL_INTERVAL_MS)))
    request_timeout = float(os.environ.get("BRAVE_SEARCH_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT)))
    return BraveSearchConfig(
        api_key=api_key,
        base_url=base_url,
        poll_interval=poll_interval,
        max_poll_attempts=_optional_int("BRAVE_SEARCH_MAX_POLL_ATTEMPTS"),
        poll_timeout=_optional_int("BRAVE_SEARCH_POLL_TIMEOUT"),
        request_timeout=request_timeout,
    )
