"""Synchronous client for the Supadata API."""

import logging
from collections.abc import Callable
from typing import TypeVar

from supadata_client.core import builder
from supadata_client.core.builder import RequestSpec, build_request
from supadata_client.core.config import Option, SupadataConfig, build_config
from supadata_client.core.logging import call_id_var, generate_call_id
from supadata_client.core.models import (
    AccountInfo,
    CrawlJob,
    JobHandle,
    Metadata,
    ScrapeResult,
    SiteMap,
    Transcript,
    TranscriptJob,
    TranscriptMode,
)
from supadata_client.core.resolver import decode_job, decode_model, decode_transcript, resolve
from supadata_client.core.youtube import YouTube

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Supadata:
    """Client for the Supadata transcript, metadata and web API.

    Each method sends exactly one request and returns a typed result. Failed
    responses raise APIError (or HTTPStatusError when the body is unreadable);
    transport failures propagate as httpx exceptions.

    Usage:
        >>> client = Supadata(with_api_key("sd_..."), with_timeout(30))
        >>> result = client.transcript("https://youtu.be/dQw4w9WgXcQ")
        >>> if result.is_async:
        ...     job = client.transcript_result(result.job_id)

    Args:
        *options: Option functions applied in order over the default
            configuration (API key from SUPADATA_API_KEY, default base URL,
            60 second timeout).
    """

    def __init__(self, *options: Option):
        self._config = build_config(*options)
        self.youtube = YouTube(self._call)

    @property
    def config(self) -> SupadataConfig:
        return self._config

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._config.http_client.close()

    def __enter__(self) -> "Supadata":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _call(self, spec: RequestSpec, decoder: Callable[[bytes], T]) -> T:
        """Send one request and resolve its response."""
        token = call_id_var.set(generate_call_id())
        try:
            request = build_request(spec, self._config)
            logger.debug("Sending %s %s", request.method, request.url)
            response = self._config.http_client.send(request)
            logger.debug("Received status %d for %s %s", response.status_code, spec.method, spec.path)
            return resolve(response.status_code, response.content, decoder)
        finally:
            call_id_var.reset(token)

    # ------------------------------------------------------------------
    # Universal endpoints
    # ------------------------------------------------------------------

    def transcript(
        self,
        url: str,
        *,
        lang: str | None = None,
        text: bool = False,
        chunk_size: int | None = None,
        mode: TranscriptMode | str | None = None,
    ) -> Transcript:
        """Get the transcript of a video, or a job handle if it must be generated.

        Args:
            url: URL of the video (YouTube, TikTok, Instagram, X, Facebook or a file)
            lang: Preferred ISO 639-1 language code
            text: Return plain text instead of timed segments
            chunk_size: Maximum characters per segment
            mode: native, auto or generate; ``auto`` when not given

        Returns:
            A Transcript holding either the finished transcript or an async job handle.
        """
        spec = builder.build_transcript(url, lang=lang, text=text, chunk_size=chunk_size, mode=mode)
        return self._call(spec, decode_transcript)

    def transcript_result(self, job_id: str) -> TranscriptJob:
        """Check the status of a transcript job once."""
        return self._call(builder.build_transcript_result(job_id), decode_job(TranscriptJob))

    def metadata(self, url: str) -> Metadata:
        """Get unified metadata for a social media post or video."""
        return self._call(builder.build_metadata(url), decode_model(Metadata))

    def me(self) -> AccountInfo:
        """Get organization, plan and credit usage for the API key."""
        return self._call(builder.build_me(), decode_model(AccountInfo))

    # ------------------------------------------------------------------
    # Web endpoints
    # ------------------------------------------------------------------

    def scrape(self, url: str, *, no_links: bool = False, lang: str | None = None) -> ScrapeResult:
        """Scrape a web page into Markdown."""
        return self._call(builder.build_scrape(url, no_links=no_links, lang=lang), decode_model(ScrapeResult))

    def map(self, url: str, *, no_links: bool = False, lang: str | None = None) -> SiteMap:
        """List the URLs found on a website."""
        return self._call(builder.build_map(url, no_links=no_links, lang=lang), decode_model(SiteMap))

    def crawl(self, url: str, *, limit: int | None = None) -> JobHandle:
        """Start a crawl job over a website."""
        return self._call(builder.build_crawl(url, limit=limit), decode_model(JobHandle))

    def crawl_result(self, job_id: str, skip: int = 0) -> CrawlJob:
        """Check the status of a crawl job once.

        Args:
            job_id: Identifier returned by crawl()
            skip: Number of pages to skip, for paging through large results
        """
        return self._call(builder.build_crawl_result(job_id, skip=skip), decode_job(CrawlJob))
