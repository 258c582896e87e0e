from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


DEFAULT_BASE_URL = "https://api.search.brave.com/res/v1"
DEFAULT_POLL_INTERVAL_MS = 500
DEFAULT_MAX_POLL_ATTEMPTS = 20
DEFAULT_REQUEST_TIMEOUT = 20.0


class BraveSearchConfig(BaseModel):
    """Read-only client configuration.

    ``poll_interval`` and ``poll_timeout`` are milliseconds. When both
    ``max_poll_attempts`` and ``poll_timeout`` are given, ``max_poll_attempts``
    wins; ``poll_timeout`` alone is converted to ``ceil(timeout / interval)``.
    """

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    base_url: str = DEFAULT_BASE_URL
    poll_interval: int = Field(default=DEFAULT_POLL_INTERVAL_MS, ge=0)
    max_poll_attempts: Optional[int] = Field(default=None, ge=0)
    poll_timeout: Optional[int] = Field(default=None, ge=0)
    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)
    retry_unprocessable: bool = True

    @field_validator("api_key")
    @classmethod
    def require_api_key(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("api_key must be a non-empty string")
        return value

    @property
    def poll_attempts(self) -> int:
        if self.max_poll_attempts is not None:
            return self.max_poll_attempts
        if self.poll_timeout is not None and self.poll_interval > 0:
            return math.ceil(self.poll_timeout / self.poll_interval)
        return DEFAULT_MAX_POLL_ATTEMPTS

    @property
    def poll_interval_seconds(self) -> float:
        return self.poll_interval / 1000.0

    @property
    def endpoint_base(self) -> str:
        return self.base_url.rstrip("/")
