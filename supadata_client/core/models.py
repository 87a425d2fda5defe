"""Typed result models for API responses."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from supadata_client.core.exceptions import ErrorIdentifier


class APIModel(BaseModel):
    """Base for all response models.

    Keys are camelCase on the wire and snake_case in Python. Unknown keys are
    ignored and absent keys fall back to the field default.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class TranscriptMode(str, Enum):
    """How the transcript should be obtained."""

    NATIVE = "native"
    AUTO = "auto"
    GENERATE = "generate"


class TranscriptJobStatus(str, Enum):
    QUEUED = "queued"
    ACTIVE = "active"
    COMPLETED = "completed"
    FAILED = "failed"


class CrawlStatus(str, Enum):
    SCRAPING = "scraping"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class BatchJobStatus(str, Enum):
    QUEUED = "queued"
    ACTIVE = "active"
    COMPLETED = "completed"
    FAILED = "failed"


class MetadataPlatform(str, Enum):
    YOUTUBE = "youtube"
    TIKTOK = "tiktok"
    INSTAGRAM = "instagram"
    TWITTER = "twitter"
    FACEBOOK = "facebook"


class MetadataType(str, Enum):
    VIDEO = "video"
    IMAGE = "image"
    CAROUSEL = "carousel"
    POST = "post"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ErrorDetail(APIModel):
    """Error body returned with failed responses and embedded in failed jobs."""

    error: str = Field(default="", description="Error code identifier")
    message: str = Field(default="", description="Human-readable error message")
    details: str | None = Field(default=None, description="Additional error details")
    documentation_url: str | None = Field(default=None, description="Link to relevant documentation")

    @field_validator("error", "message", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        """Read a JSON null code or message as an empty string."""
        return "" if v is None else v

    @property
    def identifier(self) -> ErrorIdentifier | str:
        """Return the error code as an ErrorIdentifier, or the raw string if unknown."""
        try:
            return ErrorIdentifier(self.error)
        except ValueError:
            return self.error


# ---------------------------------------------------------------------------
# Transcripts
# ---------------------------------------------------------------------------


class TranscriptChunk(APIModel):
    """One caption segment. Offset and duration are in milliseconds."""

    text: str = ""
    offset: float = 0.0
    duration: float = 0.0
    lang: str | None = None


class SyncTranscript(APIModel):
    """A transcript returned immediately.

    ``content`` is a list of segments, or a single string when plain text
    was requested.
    """

    content: list[TranscriptChunk] | str = Field(default_factory=list)
    lang: str = ""
    available_langs: list[str] = Field(default_factory=list)


class AsyncTranscript(APIModel):
    """A handle to a transcript job that is still being processed."""

    job_id: str


@dataclass(frozen=True)
class Transcript:
    """Result of a transcript request: exactly one of sync or async.

    Use ``is_async`` to branch. The accessor for the inactive variant returns
    ``None``.
    """

    result: SyncTranscript | AsyncTranscript

    def __post_init__(self) -> None:
        if not isinstance(self.result, (SyncTranscript, AsyncTranscript)):
            raise TypeError(
                f"Transcript result must be SyncTranscript or AsyncTranscript, got {type(self.result).__name__}"
            )

    @property
    def is_async(self) -> bool:
        return isinstance(self.result, AsyncTranscript)

    @property
    def sync(self) -> SyncTranscript | None:
        return None if self.is_async else self.result  # type: ignore[return-value]

    @property
    def job(self) -> AsyncTranscript | None:
        return self.result if self.is_async else None  # type: ignore[return-value]

    @property
    def job_id(self) -> str | None:
        job = self.job
        return job.job_id if job is not None else None


class TranscriptJob(APIModel):
    """Status of an asynchronous transcript job.

    ``content``, ``lang`` and ``available_langs`` are populated once the job
    is completed; ``error`` is populated when it failed.
    """

    status: TranscriptJobStatus
    content: list[TranscriptChunk] | str = Field(default_factory=list)
    lang: str = ""
    available_langs: list[str] = Field(default_factory=list)
    error: ErrorDetail | None = None


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------


class Author(APIModel):
    display_name: str = ""
    username: str = ""
    avatar_url: str = ""
    verified: bool = False


class Stats(APIModel):
    """Engagement counters. A counter is None when the platform does not expose it."""

    likes: int | None = None
    comments: int | None = None
    shares: int | None = None
    views: int | None = None


class MediaItem(APIModel):
    type: str = ""
    url: str = ""
    duration: float | None = None
    thumbnail_url: str | None = None


class Media(APIModel):
    type: str = ""
    url: str = ""
    duration: float | None = None
    thumbnail_url: str = ""
    items: list[MediaItem] = Field(default_factory=list)


class Metadata(APIModel):
    """Unified metadata for a social media post or video."""

    platform: MetadataPlatform
    type: MetadataType
    id: str = ""
    url: str = ""
    title: str = ""
    description: str = ""
    author: Author = Field(default_factory=Author)
    stats: Stats = Field(default_factory=Stats)
    media: Media = Field(default_factory=Media)
    tags: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    additional_data: dict[str, Any] | None = None


# ---------------------------------------------------------------------------
# Account
# ---------------------------------------------------------------------------


class AccountInfo(APIModel):
    organization_id: str = Field(default="", description="Organization identifier")
    plan: str = Field(default="", description="Current plan name")
    max_credits: int = Field(default=0, description="Credits available per billing period")
    used_credits: int = Field(default=0, description="Credits used in the current period")


# ---------------------------------------------------------------------------
# Web
# ---------------------------------------------------------------------------


class ScrapeResult(APIModel):
    """Markdown content of a single web page plus the links found on it."""

    url: str = ""
    content: str = ""
    name: str = ""
    description: str = ""
    og_url: str = ""
    count_characters: int = 0
    urls: list[str] = Field(default_factory=list)


class SiteMap(APIModel):
    urls: list[str] = Field(default_factory=list)


class JobHandle(APIModel):
    """Identifier of a server-side job, used to poll its status."""

    job_id: str


class CrawlPage(APIModel):
    url: str = ""
    content: str = ""
    name: str = ""
    description: str = ""
    og_url: str = ""
    count_characters: int = 0


class CrawlJob(APIModel):
    """Status of a crawl job.

    ``pages`` is populated once pages are available; ``next`` holds the URL of
    the following page of results when there are more.
    """

    status: CrawlStatus
    pages: list[CrawlPage] = Field(default_factory=list)
    next: str | None = None
    error: ErrorDetail | None = None


# ---------------------------------------------------------------------------
# YouTube
# ---------------------------------------------------------------------------


class SearchUploadDate(str, Enum):
    ALL = "all"
    HOUR = "hour"
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class SearchType(str, Enum):
    ALL = "all"
    VIDEO = "video"
    CHANNEL = "channel"
    PLAYLIST = "playlist"
    MOVIE = "movie"


class SearchDuration(str, Enum):
    ALL = "all"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class SearchSortBy(str, Enum):
    RELEVANCE = "relevance"
    RATING = "rating"
    DATE = "date"
    VIEWS = "views"


class SearchFeature(str, Enum):
    HD = "hd"
    SUBTITLES = "subtitles"
    CREATIVE_COMMONS = "creative-commons"
    THREE_D = "3d"
    LIVE = "live"
    FOUR_K = "4k"
    THREE_SIXTY = "360"
    LOCATION = "location"
    HDR = "hdr"
    VR180 = "vr180"


class ChannelVideoType(str, Enum):
    ALL = "all"
    VIDEO = "video"
    SHORT = "short"
    LIVE = "live"


class ChannelRef(APIModel):
    id: str = ""
    name: str = ""


class YouTubeSearchItem(APIModel):
    """One search hit. Which fields are set depends on ``type``."""

    type: str = ""
    id: str = ""
    title: str = ""
    description: str = ""
    thumbnail: str = ""
    duration: int | None = None
    view_count: int | None = None
    upload_date: str | None = None
    subscriber_count: int | None = None
    video_count: int | None = None
    channel: ChannelRef | None = None


class YouTubeSearchResults(APIModel):
    query: str = ""
    results: list[YouTubeSearchItem] = Field(default_factory=list)
    total_results: int = 0
    next_page_token: str | None = None


class YouTubeVideo(APIModel):
    id: str = ""
    title: str = ""
    description: str = ""
    duration: int = 0
    channel: ChannelRef = Field(default_factory=ChannelRef)
    tags: list[str] = Field(default_factory=list)
    thumbnail: str = ""
    upload_date: datetime | None = None
    view_count: int | None = None
    like_count: int | None = None
    transcript_languages: list[str] = Field(default_factory=list)


class YouTubeChannel(APIModel):
    id: str = ""
    name: str = ""
    handle: str = ""
    description: str = ""
    subscriber_count: int | None = None
    video_count: int | None = None
    view_count: int | None = None
    thumbnail: str = ""
    banner: str = ""


class YouTubePlaylist(APIModel):
    id: str = ""
    title: str = ""
    description: str = ""
    video_count: int | None = None
    view_count: int | None = None
    last_updated: datetime | None = None
    channel: ChannelRef = Field(default_factory=ChannelRef)


class VideoIds(APIModel):
    """Video identifiers of a channel or playlist, split by kind."""

    video_ids: list[str] = Field(default_factory=list)
    short_ids: list[str] = Field(default_factory=list)
    live_ids: list[str] = Field(default_factory=list)


class BatchTranscript(APIModel):
    content: list[TranscriptChunk] | str = Field(default_factory=list)
    lang: str = ""
    available_langs: list[str] = Field(default_factory=list)


class BatchItem(APIModel):
    """Outcome for one video of a batch job.

    ``transcript`` is set for transcript batches, ``video`` for video
    metadata batches, and ``error_code`` when that video failed.
    """

    video_id: str = ""
    transcript: BatchTranscript | None = None
    video: YouTubeVideo | None = None
    error_code: str | None = None


class BatchStats(APIModel):
    total: int = 0
    succeeded: int = 0
    failed: int = 0


class BatchJob(APIModel):
    """Status of a YouTube batch job."""

    status: BatchJobStatus
    results: list[BatchItem] = Field(default_factory=list)
    stats: BatchStats = Field(default_factory=BatchStats)
    completed_at: datetime | None = None
    error: ErrorDetail | None = None
