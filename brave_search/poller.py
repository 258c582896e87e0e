"""Polling loop for the asynchronously generated web search summary.

A summary key from a web search is looked up repeatedly until the summarizer
reports a terminal status or the attempt budget runs out:

    pending --(status=complete, non-empty summary)--> complete  (returned)
    pending --(status=failed)-----------------------> failed    (raised)
    pending --(budget used up)----------------------> exhausted (raised)

Attempts are separated by one fixed interval; there is no backoff and no
sleep after the final attempt.
"""
from __future__ import annotations

import asyncio
from enum import Enum
from typing import Any, Awaitable, Callable, Mapping, NoReturn, Optional, TypeVar

from .errors import BraveSearchError, ErrorKind
from .logging_utils import get_logger, log_event
from .types import SummarizerSearchApiResponse


T = TypeVar("T")

SummaryFetcher = Callable[[str, Optional[Mapping[str, Any]]], Awaitable[SummarizerSearchApiResponse]]
Sleeper = Callable[[float], Awaitable[Any]]

SUMMARY_FAILED_MESSAGE = "Summary generation failed"
SUMMARY_TIMEOUT_MESSAGE = "Summary not available after maximum polling attempts"
SUMMARY_CANCELLED_MESSAGE = "Summary polling cancelled"

logger = get_logger()


class PollState(str, Enum):
    PENDING = "pending"
    COMPLETE = "complete"
    FAILED = "failed"


def classify(response: Mapping[str, Any]) -> PollState:
    status = response.get("status")
    if status == PollState.COMPLETE.value and response.get("summary"):
        return PollState.COMPLETE
    if status == PollState.FAILED.value:
        return PollState.FAILED
    # complete with an empty summary is not ready yet
    return PollState.PENDING


class SummaryPoller:
    def __init__(
        self,
        fetch: SummaryFetcher,
        *,
        interval: float,
        max_attempts: int,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        if max_attempts < 0:
            raise ValueError("max_attempts must be non-negative")
        if interval < 0:
            raise ValueError("interval must be non-negative")
        self._fetch = fetch
        self._interval = interval
        self._max_attempts = max_attempts
        self._sleep = sleep

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def interval(self) -> float:
        return self._interval

    async def poll(
        self,
        key: str,
        options: Optional[Mapping[str, Any]] = None,
        *,
        cancel: Optional[asyncio.Event] = None,
    ) -> SummarizerSearchApiResponse:
        """Return the first complete summary for ``key``.

        Raises ``BraveSearchError`` with kind ``summary_failed`` on a failed
        status, ``summary_timeout`` once ``max_attempts`` lookups stayed
        pending, and ``cancelled`` when ``cancel`` is set mid-poll. Errors from
        the lookup request itself propagate unchanged.
        """
        for attempt in range(1, self._max_attempts + 1):
            response = await self._guard(lambda: self._fetch(key, options), cancel, attempt)
            state = classify(response)
            log_event(
                logger,
                {
                    "event": "summary_poll_attempt",
                    "attempt": attempt,
                    "max_attempts": self._max_attempts,
                    "state": state.value,
                },
            )

            if state is PollState.COMPLETE:
                log_event(logger, {"event": "summary_ready", "attempts": attempt})
                return response
            if state is PollState.FAILED:
                log_event(logger, {"event": "summary_failed", "attempts": attempt})
                raise BraveSearchError(SUMMARY_FAILED_MESSAGE, ErrorKind.SUMMARY_FAILED, response_data=response)

            if attempt < self._max_attempts:
                await self._guard(lambda: self._sleep(self._interval), cancel, attempt)

        log_event(logger, {"event": "summary_exhausted", "attempts": self._max_attempts})
        raise BraveSearchError(SUMMARY_TIMEOUT_MESSAGE, ErrorKind.SUMMARY_TIMEOUT)

    async def _guard(
        self,
        factory: Callable[[], Awaitable[T]],
        cancel: Optional[asyncio.Event],
        attempt: int,
    ) -> T:
        if cancel is None:
            return await factory()
        if cancel.is_set():
            self._cancelled(attempt)

        work = asyncio.ensure_future(factory())
        signal = asyncio.ensure_future(cancel.wait())
        try:
            await asyncio.wait({work, signal}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in (work, signal):
                if not task.done():
                    task.cancel()
            # reap both so no request or timer outlives this call
            await asyncio.gather(work, signal, return_exceptions=True)

        if signal.done() and not signal.cancelled():
            self._cancelled(attempt)
        return work.result()

    def _cancelled(self, attempt: int) -> NoReturn:
        log_event(logger, {"event": "summary_cancelled", "attempt": attempt})
        raise BraveSearchError(SUMMARY_CANCELLED_MESSAGE, ErrorKind.CANCELLED)
