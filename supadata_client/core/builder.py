"""Request construction: one builder per API operation."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import quote

import httpx
from pydantic.alias_generators import to_camel

from supadata_client import __version__
from supadata_client.core.config import SupadataConfig
from supadata_client.core.exceptions import RequestBuildError
from supadata_client.core.models import (
    ChannelVideoType,
    SearchDuration,
    SearchFeature,
    SearchSortBy,
    SearchType,
    SearchUploadDate,
    TranscriptMode,
)

USER_AGENT = f"supadata-python/{__version__}"


@dataclass(frozen=True)
class RequestSpec:
    """Description of a single API call, independent of configuration.

    Args:
        method: HTTP method
        path: Endpoint path, appended to the configured base URL
        params: Ordered query parameters; a key may repeat
        json: JSON body, only for POST operations
        headers: Operation-specific headers
    """

    method: str
    path: str
    params: tuple[tuple[str, str], ...] = ()
    json: dict[str, Any] | None = None
    headers: Mapping[str, str] = field(default_factory=dict)


def _encode(value: Any) -> str:
    """Stringify a parameter value for the query string."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple)):
        return len(value) == 0
    if isinstance(value, (int, float)):
        return value <= 0
    return False


def _query(*pairs: tuple[str, Any], required: Sequence[str] = ()) -> tuple[tuple[str, str], ...]:
    """Build query pairs, skipping empty optional values.

    Sequence values are expanded into repeated entries with the same key.
    """
    params: list[tuple[str, str]] = []
    for key, value in pairs:
        if isinstance(value, (list, tuple)):
            params.extend((key, _encode(item)) for item in value if not _is_empty(item))
        elif key in required or not _is_empty(value):
            params.append((key, _encode(value)))
    return tuple(params)


def _json_body(**fields: Any) -> dict[str, Any]:
    """Build a camelCase JSON body, skipping empty values."""
    body: dict[str, Any] = {}
    for name, value in fields.items():
        if _is_empty(value):
            continue
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, tuple):
            value = list(value)
        body[to_camel(name)] = value
    return body


def _post(path: str, body: dict[str, Any]) -> RequestSpec:
    return RequestSpec(
        method="POST",
        path=path,
        json=body,
        headers={"Content-Type": "application/json"},
    )


def _segment(value: str) -> str:
    """Encode an identifier as a single path segment."""
    return quote(value, safe="")


# ---------------------------------------------------------------------------
# Universal endpoints
# ---------------------------------------------------------------------------


def build_transcript(
    url: str,
    lang: str | None = None,
    text: bool = False,
    chunk_size: int | None = None,
    mode: TranscriptMode | str | None = None,
) -> RequestSpec:
    """GET /transcript. ``mode`` is always sent and defaults to ``auto``."""
    params = _query(
        ("url", url),
        ("lang", lang),
        ("text", text),
        ("chunkSize", chunk_size),
        ("mode", mode or TranscriptMode.AUTO),
        required=("url", "mode"),
    )
    return RequestSpec(method="GET", path="/transcript", params=params)


def build_transcript_result(job_id: str) -> RequestSpec:
    return RequestSpec(method="GET", path=f"/transcript/{_segment(job_id)}")


def build_metadata(url: str) -> RequestSpec:
    return RequestSpec(method="GET", path="/metadata", params=_query(("url", url), required=("url",)))


def build_me() -> RequestSpec:
    return RequestSpec(method="GET", path="/me")


# ---------------------------------------------------------------------------
# Web endpoints
# ---------------------------------------------------------------------------


def build_scrape(url: str, no_links: bool = False, lang: str | None = None) -> RequestSpec:
    params = _query(("url", url), ("noLinks", no_links), ("lang", lang), required=("url",))
    return RequestSpec(method="GET", path="/web/scrape", params=params)


def build_map(url: str, no_links: bool = False, lang: str | None = None) -> RequestSpec:
    params = _query(("url", url), ("noLinks", no_links), ("lang", lang), required=("url",))
    return RequestSpec(method="GET", path="/web/map", params=params)


def build_crawl(url: str, limit: int | None = None) -> RequestSpec:
    """POST /web/crawl with ``url`` always present in the body."""
    body = {"url": url, **_json_body(limit=limit)}
    return _post("/web/crawl", body)


def build_crawl_result(job_id: str, skip: int = 0) -> RequestSpec:
    return RequestSpec(
        method="GET",
        path=f"/web/crawl/{_segment(job_id)}",
        params=_query(("skip", skip)),
    )


# ---------------------------------------------------------------------------
# YouTube endpoints
# ---------------------------------------------------------------------------


def build_youtube_search(
    query: str,
    upload_date: SearchUploadDate | str | None = None,
    type: SearchType | str | None = None,
    duration: SearchDuration | str | None = None,
    sort_by: SearchSortBy | str | None = None,
    features: Sequence[SearchFeature | str] = (),
    limit: int | None = None,
    next_page_token: str | None = None,
) -> RequestSpec:
    params = _query(
        ("query", query),
        ("uploadDate", upload_date),
        ("type", type),
        ("duration", duration),
        ("sortBy", sort_by),
        ("features", list(features)),
        ("limit", limit),
        ("nextPageToken", next_page_token),
        required=("query",),
    )
    return RequestSpec(method="GET", path="/youtube/search", params=params)


def build_youtube_video(video_id: str) -> RequestSpec:
    return RequestSpec(method="GET", path="/youtube/video", params=_query(("id", video_id), required=("id",)))


def build_youtube_channel(channel_id: str) -> RequestSpec:
    return RequestSpec(method="GET", path="/youtube/channel", params=_query(("id", channel_id), required=("id",)))


def build_youtube_playlist(playlist_id: str) -> RequestSpec:
    return RequestSpec(method="GET", path="/youtube/playlist", params=_query(("id", playlist_id), required=("id",)))


def build_youtube_channel_videos(
    channel_id: str,
    limit: int | None = None,
    type: ChannelVideoType | str | None = None,
) -> RequestSpec:
    params = _query(("id", channel_id), ("limit", limit), ("type", type), required=("id",))
    return RequestSpec(method="GET", path="/youtube/channel/videos", params=params)


def build_youtube_playlist_videos(playlist_id: str, limit: int | None = None) -> RequestSpec:
    params = _query(("id", playlist_id), ("limit", limit), required=("id",))
    return RequestSpec(method="GET", path="/youtube/playlist/videos", params=params)


def _require_batch_source(
    video_ids: Sequence[str],
    playlist_id: str | None,
    channel_id: str | None,
) -> None:
    if not video_ids and not playlist_id and not channel_id:
        raise RequestBuildError("A batch needs video_ids, playlist_id or channel_id")


def build_youtube_transcript_batch(
    video_ids: Sequence[str] = (),
    playlist_id: str | None = None,
    channel_id: str | None = None,
    limit: int | None = None,
    lang: str | None = None,
    text: bool = False,
) -> RequestSpec:
    _require_batch_source(video_ids, playlist_id, channel_id)
    body = _json_body(
        video_ids=list(video_ids),
        playlist_id=playlist_id,
        channel_id=channel_id,
        limit=limit,
        lang=lang,
        text=text,
    )
    return _post("/youtube/transcript/batch", body)


def build_youtube_video_batch(
    video_ids: Sequence[str] = (),
    playlist_id: str | None = None,
    channel_id: str | None = None,
    limit: int | None = None,
) -> RequestSpec:
    _require_batch_source(video_ids, playlist_id, channel_id)
    body = _json_body(
        video_ids=list(video_ids),
        playlist_id=playlist_id,
        channel_id=channel_id,
        limit=limit,
    )
    return _post("/youtube/video/batch", body)


def build_youtube_batch_result(job_id: str) -> RequestSpec:
    return RequestSpec(method="GET", path=f"/youtube/batch/{_segment(job_id)}")


# ---------------------------------------------------------------------------
# Transport request
# ---------------------------------------------------------------------------


def build_request(spec: RequestSpec, config: SupadataConfig) -> httpx.Request:
    """Turn a RequestSpec into a fully-addressed httpx.Request.

    The User-Agent and x-api-key headers are always set.

    Raises:
        RequestBuildError: If the resulting URL is not a valid http(s) URL
    """
    raw_url = f"{config.base_url.rstrip('/')}{spec.path}"
    try:
        url = httpx.URL(raw_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise RequestBuildError(f"Invalid request URL {raw_url!r}: {e}") from e

    if url.scheme not in ("http", "https"):
        raise RequestBuildError(f"URL must use http or https scheme, got {raw_url!r}")
    if not url.host:
        raise RequestBuildError(f"URL must have a valid host, got {raw_url!r}")

    headers = {
        **spec.headers,
        "User-Agent": USER_AGENT,
        "x-api-key": config.api_key,
    }
    return httpx.Request(
        spec.method,
        url,
        params=list(spec.params) if spec.params else None,
        json=spec.json,
        headers=headers,
    )
