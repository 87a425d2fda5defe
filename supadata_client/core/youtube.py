"""YouTube endpoints, reached as ``client.youtube``."""

from collections.abc import Callable, Sequence
from typing import Any

from supadata_client.core import builder
from supadata_client.core.builder import RequestSpec
from supadata_client.core.models import (
    BatchJob,
    ChannelVideoType,
    JobHandle,
    SearchDuration,
    SearchFeature,
    SearchSortBy,
    SearchType,
    SearchUploadDate,
    VideoIds,
    YouTubeChannel,
    YouTubePlaylist,
    YouTubeSearchResults,
    YouTubeVideo,
)
from supadata_client.core.resolver import decode_job, decode_model

Call = Callable[[RequestSpec, Callable[[bytes], Any]], Any]


class YouTube:
    """YouTube search, video, channel, playlist and batch operations.

    Args:
        call: Function that sends a RequestSpec and decodes the response
    """

    def __init__(self, call: Call):
        self._call = call

    def search(
        self,
        query: str,
        *,
        upload_date: SearchUploadDate | str | None = None,
        type: SearchType | str | None = None,
        duration: SearchDuration | str | None = None,
        sort_by: SearchSortBy | str | None = None,
        features: Sequence[SearchFeature | str] = (),
        limit: int | None = None,
        next_page_token: str | None = None,
    ) -> YouTubeSearchResults:
        """Search YouTube. Each feature is sent as its own ``features`` parameter."""
        spec = builder.build_youtube_search(
            query,
            upload_date=upload_date,
            type=type,
            duration=duration,
            sort_by=sort_by,
            features=features,
            limit=limit,
            next_page_token=next_page_token,
        )
        return self._call(spec, decode_model(YouTubeSearchResults))

    def video(self, video_id: str) -> YouTubeVideo:
        return self._call(builder.build_youtube_video(video_id), decode_model(YouTubeVideo))

    def channel(self, channel_id: str) -> YouTubeChannel:
        return self._call(builder.build_youtube_channel(channel_id), decode_model(YouTubeChannel))

    def playlist(self, playlist_id: str) -> YouTubePlaylist:
        return self._call(builder.build_youtube_playlist(playlist_id), decode_model(YouTubePlaylist))

    def channel_videos(
        self,
        channel_id: str,
        *,
        limit: int | None = None,
        type: ChannelVideoType | str | None = None,
    ) -> VideoIds:
        spec = builder.build_youtube_channel_videos(channel_id, limit=limit, type=type)
        return self._call(spec, decode_model(VideoIds))

    def playlist_videos(self, playlist_id: str, *, limit: int | None = None) -> VideoIds:
        spec = builder.build_youtube_playlist_videos(playlist_id, limit=limit)
        return self._call(spec, decode_model(VideoIds))

    def transcript_batch(
        self,
        *,
        video_ids: Sequence[str] = (),
        playlist_id: str | None = None,
        channel_id: str | None = None,
        limit: int | None = None,
        lang: str | None = None,
        text: bool = False,
    ) -> JobHandle:
        """Start a batch transcript job.

        At least one of ``video_ids``, ``playlist_id`` or ``channel_id`` is required.
        Poll the returned job with batch_result().
        """
        spec = builder.build_youtube_transcript_batch(
            video_ids=video_ids,
            playlist_id=playlist_id,
            channel_id=channel_id,
            limit=limit,
            lang=lang,
            text=text,
        )
        return self._call(spec, decode_model(JobHandle))

    def video_batch(
        self,
        *,
        video_ids: Sequence[str] = (),
        playlist_id: str | None = None,
        channel_id: str | None = None,
        limit: int | None = None,
    ) -> JobHandle:
        """Start a batch video metadata job."""
        spec = builder.build_youtube_video_batch(
            video_ids=video_ids,
            playlist_id=playlist_id,
            channel_id=channel_id,
            limit=limit,
        )
        return self._call(spec, decode_model(JobHandle))

    def batch_result(self, job_id: str) -> BatchJob:
        """Check the status of a batch job once."""
        return self._call(builder.build_youtube_batch_result(job_id), decode_job(BatchJob))
