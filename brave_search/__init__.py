from __future__ import annotations

from .client import BraveSearch, SummarizedAnswer
from .config import BraveSearchConfig
from .errors import BraveSearchError, ErrorKind
from .logging_utils import setup_logging
from .poller import PollState, SummaryPoller
from .settings import load_settings
from .types import (
    BraveSearchOptions,
    FreshnessOption,
    ImageSearchApiResponse,
    ImageSearchOptions,
    LocalDescriptionsOptions,
    LocalDescriptionsSearchApiResponse,
    LocalPoiOptions,
    LocalPoiSearchApiResponse,
    NewsSearchApiResponse,
    NewsSearchOptions,
    ResultFilterValue,
    SafeSearchLevel,
    SummarizerOptions,
    SummarizerSearchApiResponse,
    UnitSystem,
    WebSearchApiResponse,
)

__all__ = [
    "BraveSearch",
    "BraveSearchConfig",
    "BraveSearchError",
    "BraveSearchOptions",
    "ErrorKind",
    "FreshnessOption",
    "ImageSearchApiResponse",
    "ImageSearchOptions",
    "LocalDescriptionsOptions",
    "LocalDescriptionsSearchApiResponse",
    "LocalPoiOptions",
    "LocalPoiSearchApiResponse",
    "NewsSearchApiResponse",
    "NewsSearchOptions",
    "PollState",
    "ResultFilterValue",
    "SafeSearchLevel",
    "SummarizedAnswer",
    "SummarizerOptions",
    "SummarizerSearchApiResponse",
    "SummaryPoller",
    "UnitSystem",
    "WebSearchApiResponse",
    "load_settings",
    "setup_logging",
]

__version__ = "0.9.0"
