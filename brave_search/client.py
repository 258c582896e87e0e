from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Iterable, Optional

import httpx

from .config import BraveSearchConfig
from .logging_utils import get_logger, log_event
from .poller import SummaryPoller
from .request import (
    IMAGE_SEARCH_PATH,
    LOCAL_DESCRIPTIONS_PATH,
    LOCAL_POIS_PATH,
    NEWS_SEARCH_PATH,
    SUMMARIZER_SEARCH_PATH,
    WEB_SEARCH_PATH,
    RequestBuilder,
    join_ids,
    require_query,
)
from .types import (
    BraveSearchOptions,
    ImageSearchApiResponse,
    ImageSearchOptions,
    LocalDescriptionsOptions,
    LocalDescriptionsSearchApiResponse,
    LocalPoiOptions,
    LocalPoiSearchApiResponse,
    NewsSearchApiResponse,
    NewsSearchOptions,
    SummarizerOptions,
    SummarizerSearchApiResponse,
    WebSearchApiResponse,
)


logger = get_logger()


@dataclass
class SummarizedAnswer:
    """The two outcomes of ``BraveSearch.get_summarized_answer``.

    ``web_search`` resolves as soon as the search returns. ``summary``
    resolves to the completed summarizer response, or to ``None`` when the
    search carried no summary key.
    """

    web_search: asyncio.Task[WebSearchApiResponse]
    summary: asyncio.Task[Optional[SummarizerSearchApiResponse]]

    def cancel(self) -> None:
        self.web_search.cancel()
        self.summary.cancel()


class BraveSearch:
    """Async client for the Brave Search API.

    Pass either an API key (plus optional ``BraveSearchConfig`` field
    overrides such as ``poll_interval`` or ``max_poll_attempts``) or a
    complete ``config``. An injected ``http_client`` is used for every request
    and is never closed here; without one each request opens its own
    ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        config: Optional[BraveSearchConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        **overrides: Any,
    ) -> None:
        if config is None:
            config = BraveSearchConfig(api_key=api_key or "", **overrides)
        elif api_key is not None or overrides:
            values = config.model_dump()
            values.update(overrides)
            if api_key is not None:
                values["api_key"] = api_key
            config = BraveSearchConfig(**values)
        self._config = config
        self._requests = RequestBuilder(config, http_client)

    @property
    def config(self) -> BraveSearchConfig:
        return self._config

    async def __aenter__(self) -> BraveSearch:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None

    async def web_search(
        self, query: str, options: Optional[BraveSearchOptions] = None
    ) -> WebSearchApiResponse:
        params = self._requests.build_params({"q": require_query(query)}, options)
        return await self._requests.get(WEB_SEARCH_PATH, params)

    async def image_search(
        self, query: str, options: Optional[ImageSearchOptions] = None
    ) -> ImageSearchApiResponse:
        params = self._requests.build_params({"q": require_query(query)}, options)
        return await self._requests.get(IMAGE_SEARCH_PATH, params)

    async def news_search(
        self, query: str, options: Optional[NewsSearchOptions] = None
    ) -> NewsSearchApiResponse:
        params = self._requests.build_params({"q": require_query(query)}, options)
        return await self._requests.get(NEWS_SEARCH_PATH, params)

    async def local_poi_search(
        self, ids: Iterable[str], options: Optional[LocalPoiOptions] = None
    ) -> LocalPoiSearchApiResponse:
        """Fetch points of interest by the location ids of a web search.

        Location ids are only valid for about 8 hours after the search that
        returned them.
        """
        params = self._requests.build_params({"ids": join_ids(ids)}, options)
        return await self._requests.get(LOCAL_POIS_PATH, params)

    async def local_descriptions_search(
        self, ids: Iterable[str], options: Optional[LocalDescriptionsOptions] = None
    ) -> LocalDescriptionsSearchApiResponse:
        params = self._requests.build_params({"ids": join_ids(ids)}, options)
        return await self._requests.get(LOCAL_DESCRIPTIONS_PATH, params)

    async def summarizer_search(
        self, key: str, options: Optional[SummarizerOptions] = None
    ) -> SummarizerSearchApiResponse:
        if not key:
            raise ValueError("summary key must be a non-empty string")
        params = self._requests.build_params({"key": key}, options)
        return await self._requests.get(SUMMARIZER_SEARCH_PATH, params)

    def summary_poller(self) -> SummaryPoller:
        return SummaryPoller(
            self.summarizer_search,
            interval=self._config.poll_interval_seconds,
            max_attempts=self._config.poll_attempts,
        )

    async def poll_for_summary(
        self,
        key: str,
        options: Optional[SummarizerOptions] = None,
        *,
        cancel: Optional[asyncio.Event] = None,
    ) -> SummarizerSearchApiResponse:
        return await self.summary_poller().poll(key, options, cancel=cancel)

    def get_summarized_answer(
        self,
        query: str,
        options: Optional[BraveSearchOptions] = None,
        summarizer_options: Optional[SummarizerOptions] = None,
        *,
        cancel: Optional[asyncio.Event] = None,
    ) -> SummarizedAnswer:
        """Start a web search and poll for its summary in the background.

        Must be called from a running event loop. The web search always asks
        for a summary (``summary=true``). If the search fails, the summary task
        fails with the same error.
        """
        require_query(query)
        search_options = dict(options or {})
        search_options["summary"] = True

        loop = asyncio.get_running_loop()
        web_search = loop.create_task(self.web_search(query, search_options))
        summary = loop.create_task(self._summary_for(web_search, summarizer_options, cancel))
        return SummarizedAnswer(web_search=web_search, summary=summary)

    async def _summary_for(
        self,
        web_search: asyncio.Future[WebSearchApiResponse],
        options: Optional[SummarizerOptions],
        cancel: Optional[asyncio.Event],
    ) -> Optional[SummarizerSearchApiResponse]:
        # cancelling the summary must leave the search running
        response = await asyncio.shield(web_search)
        key = (response.get("summarizer") or {}).get("key")
        if not key:
            log_event(logger, {"event": "summary_skipped", "reason": "no_summary_key"})
            return None
        return await self.poll_for_summary(key, options, cancel=cancel)
