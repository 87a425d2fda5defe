"""Supadata client - typed Python client for the Supadata API.

A Python library for fetching video transcripts, social media metadata,
web page content and YouTube data from the Supadata API, with typed results
and typed errors.

Usage:
    >>> from supadata_client import Supadata, with_api_key
    >>>
    >>> client = Supadata(with_api_key("sd_..."))
    >>> result = client.transcript("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
    >>> if not result.is_async:
    ...     print(result.sync.content[0].text)
"""

__version__ = "1.0.0"

# Public library API exports
from supadata_client.core.client import Supadata
from supadata_client.core.config import (
    BASE_URL,
    SupadataConfig,
    build_config,
    with_api_key,
    with_base_url,
    with_client,
    with_timeout,
)
from supadata_client.core.logging import setup_logging
from supadata_client.core.models import (
    AccountInfo,
    AsyncTranscript,
    BatchJob,
    BatchJobStatus,
    ChannelVideoType,
    CrawlJob,
    CrawlStatus,
    ErrorDetail,
    JobHandle,
    Metadata,
    MetadataPlatform,
    MetadataType,
    ScrapeResult,
    SearchDuration,
    SearchFeature,
    SearchSortBy,
    SearchType,
    SearchUploadDate,
    SiteMap,
    SyncTranscript,
    Transcript,
    TranscriptChunk,
    TranscriptJob,
    TranscriptJobStatus,
    TranscriptMode,
    VideoIds,
    YouTubeChannel,
    YouTubePlaylist,
    YouTubeSearchResults,
    YouTubeVideo,
)

# Export exceptions for library users
from supadata_client.core.exceptions import (
    APIError,
    DecodeError,
    ErrorIdentifier,
    HTTPStatusError,
    RequestBuildError,
    SupadataError,
)

__all__ = [
    "__version__",
    # Client and configuration
    "Supadata",
    "SupadataConfig",
    "BASE_URL",
    "build_config",
    "with_api_key",
    "with_base_url",
    "with_client",
    "with_timeout",
    "setup_logging",
    # Results
    "AccountInfo",
    "AsyncTranscript",
    "BatchJob",
    "BatchJobStatus",
    "ChannelVideoType",
    "CrawlJob",
    "CrawlStatus",
    "ErrorDetail",
    "JobHandle",
    "Metadata",
    "MetadataPlatform",
    "MetadataType",
    "ScrapeResult",
    "SearchDuration",
    "SearchFeature",
    "SearchSortBy",
    "SearchType",
    "SearchUploadDate",
    "SiteMap",
    "SyncTranscript",
    "Transcript",
    "TranscriptChunk",
    "TranscriptJob",
    "TranscriptJobStatus",
    "TranscriptMode",
    "VideoIds",
    "YouTubeChannel",
    "YouTubePlaylist",
    "YouTubeSearchResults",
    "YouTubeVideo",
    # Exceptions
    "SupadataError",
    "APIError",
    "DecodeError",
    "ErrorIdentifier",
    "HTTPStatusError",
    "RequestBuildError",
]
