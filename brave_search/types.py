"""Structural shapes of Brave Search API options and responses.

Plain ``TypedDict`` declarations only; responses are decoded JSON and every
variant is discriminated by its top-level ``type`` field.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Literal, Tuple, TypedDict, Union


class ResultFilterValue(str, Enum):
    DISCUSSIONS = "discussions"
    FAQ = "faq"
    INFOBOX = "infobox"
    NEWS = "news"
    QUERY = "query"
    SUMMARIZER = "summarizer"
    VIDEOS = "videos"
    WEB = "web"


class SafeSearchLevel(str, Enum):
    OFF = "off"
    MODERATE = "moderate"
    STRICT = "strict"


class FreshnessOption(str, Enum):
    PAST_DAY = "pd"
    PAST_WEEK = "pw"
    PAST_MONTH = "pm"
    PAST_YEAR = "py"


class UnitSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


# Options


class BraveSearchOptions(TypedDict, total=False):
    country: str
    search_lang: str
    ui_lang: str
    safesearch: str
    freshness: str
    text_decorations: bool
    spellcheck: bool
    goggles_id: str
    units: str
    extra_snippets: bool
    count: int
    offset: int
    result_filter: str
    summary: bool


class SummarizerOptions(TypedDict, total=False):
    entity_info: bool


class ImageSearchOptions(TypedDict, total=False):
    country: str
    search_lang: str
    count: int
    safesearch: str
    spellcheck: bool


class NewsSearchOptions(TypedDict, total=False):
    country: str
    search_lang: str
    ui_lang: str
    count: int
    offset: int
    safesearch: str
    freshness: str
    spellcheck: bool
    extra_snippets: bool


class LocalPoiOptions(TypedDict, total=False):
    search_lang: str
    ui_lang: str
    units: str


class LocalDescriptionsOptions(TypedDict, total=False):
    search_lang: str
    ui_lang: str


# Common


class MetaUrl(TypedDict, total=False):
    scheme: str
    netloc: str
    hostname: str
    favicon: str
    path: str


class Thumbnail(TypedDict, total=False):
    src: str
    alt: str
    height: int
    width: int
    bg_color: str
    original: str
    logo: bool
    duplicated: bool
    theme: str


class Profile(TypedDict, total=False):
    name: str
    long_name: str
    url: str
    img: str


class Rating(TypedDict, total=False):
    ratingValue: float
    bestRating: float
    reviewCount: int
    profile: Profile
    is_tripadvisor: bool


class Unit(TypedDict):
    value: float
    units: str


class Language(TypedDict):
    main: str


class Person(TypedDict, total=False):
    type: Literal["person"]
    name: str
    url: str
    thumbnail: Thumbnail


class ContactPoint(TypedDict, total=False):
    type: Literal["contact_point"]
    telephone: str
    email: str


class Organization(TypedDict, total=False):
    type: Literal["organization"]
    name: str
    url: str
    thumbnail: Thumbnail
    contact_points: List[ContactPoint]


class DataProvider(TypedDict, total=False):
    type: Literal["external"]
    name: str
    url: str
    long_name: str
    img: str


class Result(TypedDict, total=False):
    title: str
    url: str
    is_source_local: bool
    is_source_both: bool
    description: str
    page_age: str
    page_fetched: str
    profile: Profile
    language: str
    family_friendly: bool


# Rich result payloads


class ImageProperties(TypedDict, total=False):
    url: str
    resized: str
    placeholder: str
    height: int
    width: int
    format: str
    content_size: str


class Image(TypedDict, total=False):
    thumbnail: Thumbnail
    url: str
    properties: ImageProperties


class VideoData(TypedDict, total=False):
    duration: str
    views: str
    creator: str
    publisher: str
    thumbnail: Thumbnail


class MovieData(TypedDict, total=False):
    name: str
    description: str
    url: str
    thumbnail: Thumbnail
    release: str
    directors: List[Person]
    actors: List[Person]
    rating: Rating
    duration: str
    genre: List[str]
    query: str


class Answer(TypedDict, total=False):
    text: str
    author: str
    upvoteCount: int
    downvoteCount: int


class QAPage(TypedDict):
    question: str
    answer: Answer


class Price(TypedDict):
    price: str
    price_currency: str


class Book(TypedDict, total=False):
    title: str
    author: List[Person]
    date: str
    price: Price
    pages: int
    publisher: Person
    rating: Rating


class Article(TypedDict, total=False):
    author: List[Person]
    date: str
    publisher: Organization
    thumbnail: Thumbnail
    isAccessibleForFree: bool


class Offer(TypedDict):
    url: str
    priceCurrency: str
    price: str


class ProductReview(TypedDict, total=False):
    name: str
    price: str
    thumbnail: Thumbnail
    description: str
    offers: List[Offer]
    rating: Rating


class CreativeWork(TypedDict, total=False):
    name: str
    thumbnail: Thumbnail
    rating: Rating


class MusicRecording(TypedDict, total=False):
    name: str
    thumbnail: Thumbnail
    rating: Rating


class Review(TypedDict, total=False):
    type: Literal["review"]
    name: str
    thumbnail: Thumbnail
    description: str
    rating: Rating


class Software(TypedDict, total=False):
    name: str
    author: str
    version: str
    codeRepository: str
    homepage: str
    datePublisher: str
    is_npm: bool
    is_pypi: bool
    stars: int
    forks: int
    ProgrammingLanguage: str


class HowTo(TypedDict, total=False):
    text: str
    name: str
    url: str
    image: List[str]


class Recipe(TypedDict, total=False):
    title: str
    description: str
    thumbnail: Thumbnail
    url: str
    domain: str
    favicon: str
    time: str
    prep_time: str
    cook_time: str
    ingredients: str
    instructions: List[HowTo]
    servings: int
    calories: int
    rating: Rating
    recipeCategory: str
    recipeCuisine: str
    video: VideoData


class ButtonResult(TypedDict):
    type: Literal["button_result"]
    title: str
    url: str


class KnowledgeGraphProfile(TypedDict, total=False):
    title: str
    description: str
    url: str
    thumbnail: str


class QA(TypedDict, total=False):
    question: str
    answer: str
    title: str
    url: str
    meta_url: MetaUrl


class FAQ(TypedDict):
    type: Literal["faq"]
    results: List[QA]


# Locations


class PostalAddress(TypedDict, total=False):
    type: Literal["PostalAddress"]
    country: str
    postalCode: str
    streetAddress: str
    addressRegion: str
    addressLocality: str
    displayAddress: str


class DayOpeningHours(TypedDict, total=False):
    abbr_name: str
    full_name: str
    opens: str
    closes: str


class OpeningHours(TypedDict, total=False):
    current_day: List[DayOpeningHours]
    days: List[List[DayOpeningHours]]


class Contact(TypedDict, total=False):
    email: str
    telephone: str


class TripAdvisorReview(TypedDict, total=False):
    title: str
    description: str
    date: str
    rating: Rating
    author: Person
    review_url: str
    language: str


class Reviews(TypedDict, total=False):
    results: List[TripAdvisorReview]
    viewMoreUrl: str
    reviews_in_foreign_language: bool


class PictureResults(TypedDict, total=False):
    viewMoreUrl: str
    results: List[Thumbnail]


class Action(TypedDict):
    type: str
    url: str


class LocationWebResult(Result, total=False):
    meta_url: MetaUrl


class LocationResult(Result, total=False):
    type: Literal["location_result"]
    id: str
    provider_url: str
    coordinates: Tuple[float, float]
    zoom_level: int
    thumbnail: Thumbnail
    postal_address: PostalAddress
    opening_hours: OpeningHours
    contact: Contact
    price_range: str
    rating: Rating
    distance: Unit
    profiles: List[DataProvider]
    reviews: Reviews
    pictures: PictureResults
    action: Action
    serves_cuisine: List[str]
    categories: List[str]
    icon_category: str
    results: LocationWebResult
    timezone: str
    timezone_offset: str


class LocationDescription(TypedDict):
    type: Literal["local_description"]
    id: str
    description: str


class Locations(TypedDict):
    type: Literal["locations"]
    results: List[LocationResult]


# Search result variants


class NewsResult(Result, total=False):
    meta_url: MetaUrl
    source: str
    breaking: bool
    is_live: bool
    thumbnail: Thumbnail
    age: str
    extra_snippets: List[str]


class VideoResult(Result, total=False):
    type: Literal["video_result"]
    video: VideoData
    meta_url: MetaUrl
    thumbnail: Thumbnail
    age: str


class DeepResult(TypedDict, total=False):
    news: List[NewsResult]
    buttons: List[ButtonResult]
    social: List[KnowledgeGraphProfile]
    videos: List[VideoResult]
    images: List[Image]


class SearchResult(Result, total=False):
    type: Literal["search_result"]
    subtype: str
    deep_results: DeepResult
    schemas: List[List[Any]]
    meta_url: MetaUrl
    thumbnail: Thumbnail
    age: str
    location: LocationResult
    video: VideoData
    movie: MovieData
    faq: FAQ
    qa: QAPage
    book: Book
    rating: Rating
    article: Article
    product: ProductReview
    product_cluster: List[ProductReview]
    cluster_type: str
    cluster: List[Result]
    creative_work: CreativeWork
    music_recording: MusicRecording
    review: Review
    software: Software
    recipe: Recipe
    organization: Organization
    content_type: str
    extra_snippets: List[str]


class ForumData(TypedDict, total=False):
    forum_name: str
    num_answers: int
    score: str
    title: str
    question: str
    top_comment: str


class DiscussionResult(Result, total=False):
    type: Literal["discussion"]
    data: ForumData


class Discussions(TypedDict):
    type: Literal["search"]
    results: List[DiscussionResult]
    mutated_by_goggles: bool


# Infobox


class AbstractGraphInfobox(Result, total=False):
    type: Literal["infobox"]
    subtype: str
    position: int
    label: str
    category: str
    long_desc: str
    thumbnail: Thumbnail
    attributes: List[List[str]]
    profiles: List[Union[Profile, DataProvider]]
    website_url: str
    ratings: List[Rating]
    providers: List[DataProvider]
    distance: Unit
    images: List[Thumbnail]
    movie: MovieData
    # subtype "generic"
    found_in_urls: List[str]
    # subtype "code"
    data: QAPage
    meta_url: MetaUrl
    # subtypes "location" and "place"
    is_location: bool
    coordinates: Tuple[float, float]
    zoom_level: int
    location: LocationResult


class GraphInfobox(TypedDict):
    type: Literal["graph"]
    results: AbstractGraphInfobox


class ResultReference(TypedDict):
    type: str
    index: int
    all: bool


class MixedResponse(TypedDict):
    type: Literal["mixed"]
    main: List[ResultReference]
    top: List[ResultReference]
    side: List[ResultReference]


class News(TypedDict):
    type: Literal["news"]
    results: List[NewsResult]
    mutated_by_goggles: bool


class Videos(TypedDict):
    type: Literal["videos"]
    results: List[VideoResult]
    mutated_by_goggles: bool


class Search(TypedDict):
    type: Literal["search"]
    results: List[SearchResult]
    family_friendly: bool


class Summarizer(TypedDict):
    type: Literal["summarizer"]
    key: str


class Query(TypedDict, total=False):
    original: str
    show_strict_warning: bool
    altered: str
    safesearch: bool
    is_navigational: bool
    is_geolocal: bool
    local_decision: str
    local_locations_idx: int
    is_trending: bool
    is_news_breaking: bool
    ask_for_location: bool
    language: Language
    spellcheck_off: bool
    country: str
    bad_results: bool
    should_fallback: bool
    lat: str
    long: str
    postal_code: str
    city: str
    state: str
    header_country: str
    more_results_available: bool
    custom_location_label: str
    reddit_cluster: str
    summary_key: str


# Summarizer


class TextLocation(TypedDict):
    start: int
    end: int


class SummaryImage(Image, total=False):
    text: str


class SummaryEntity(TypedDict, total=False):
    uuid: str
    name: str
    url: str
    text: str
    images: List[SummaryImage]
    highlight: List[TextLocation]


class SummaryMessage(TypedDict):
    type: Literal["token", "enum_item", "enum_start", "enum_end"]
    data: Union[SummaryEntity, str]


class SummaryAnswer(TypedDict, total=False):
    answer: str
    score: float
    highlight: TextLocation


class SummaryContext(TypedDict, total=False):
    title: str
    url: str
    meta_url: MetaUrl


class SummaryEnrichments(TypedDict, total=False):
    raw: str
    images: List[SummaryImage]
    qa: List[SummaryAnswer]
    entities: List[SummaryEntity]
    context: List[SummaryContext]


class SummaryEntityInfo(TypedDict, total=False):
    provider: str
    description: str


# Top-level responses


class WebSearchApiResponse(TypedDict, total=False):
    type: Literal["search"]
    discussions: Discussions
    faq: FAQ
    infobox: GraphInfobox
    locations: Locations
    mixed: MixedResponse
    news: News
    query: Query
    videos: Videos
    web: Search
    summarizer: Summarizer


class SummarizerSearchApiResponse(TypedDict, total=False):
    type: Literal["summarizer"]
    status: str
    title: str
    summary: List[SummaryMessage]
    enrichments: SummaryEnrichments
    followups: List[str]
    entities_infos: Dict[str, SummaryEntityInfo]


class LocalPoiSearchApiResponse(TypedDict):
    type: Literal["local_pois"]
    results: List[LocationResult]


class LocalDescriptionsSearchApiResponse(TypedDict):
    type: Literal["local_descriptions"]
    results: List[LocationDescription]


class ImageQuery(TypedDict, total=False):
    original: str
    altered: str
    spellcheck_off: bool
    show_strict_warning: bool


class ImageResult(TypedDict, total=False):
    type: Literal["image_result"]
    title: str
    url: str
    source: str
    page_fetched: str
    thumbnail: Thumbnail
    properties: ImageProperties
    meta_url: MetaUrl
    confidence: str


class ImageSearchApiResponse(TypedDict, total=False):
    type: Literal["images"]
    query: ImageQuery
    results: List[ImageResult]


class NewsSearchApiResponse(TypedDict, total=False):
    type: Literal["news"]
    query: Query
    results: List[NewsResult]
