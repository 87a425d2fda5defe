"""Tests for the YouTube endpoint group."""

import json
from datetime import datetime, timezone

import httpx
import pytest

from supadata_client import (
    BatchJobStatus,
    ChannelVideoType,
    RequestBuildError,
    SearchFeature,
    SearchSortBy,
    Supadata,
    with_api_key,
    with_base_url,
    with_client,
)


class Recorder:
    """Answers every request with the same JSON body and keeps the requests."""

    def __init__(self, body):
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(200, json=self.body)


@pytest.fixture
def client_for():
    """Factory building a client backed by a Recorder."""

    def build(body):
        recorder = Recorder(body)
        client = Supadata(
            with_api_key("test-api-key"),
            with_base_url("https://api.test/v1"),
            with_client(httpx.Client(transport=httpx.MockTransport(recorder))),
        )
        return client, recorder

    return build


def test_search(client_for):
    """Test YouTube search parameters and results."""
    client, recorder = client_for(
        {
            "query": "lofi",
            "results": [
                {
                    "type": "video",
                    "id": "abc",
                    "title": "Lofi beats",
                    "duration": 3600,
                    "viewCount": 1200,
                    "channel": {"id": "UC1", "name": "Beats"},
                },
                {"type": "channel", "id": "UC2", "title": "Chill", "subscriberCount": 5000},
            ],
            "totalResults": 2,
            "nextPageToken": "token-2",
        }
    )

    result = client.youtube.search(
        "lofi",
        sort_by=SearchSortBy.VIEWS,
        features=[SearchFeature.HD, SearchFeature.LIVE],
        limit=2,
    )

    request = recorder.requests[-1]
    assert request.url.path == "/v1/youtube/search"
    assert request.url.params["query"] == "lofi"
    assert request.url.params["sortBy"] == "views"
    assert request.url.params.get_list("features") == ["hd", "live"]
    assert "uploadDate" not in request.url.params
    assert result.total_results == 2
    assert result.results[0].channel.name == "Beats"
    assert result.results[1].subscriber_count == 5000
    assert result.next_page_token == "token-2"


def test_video(client_for):
    """Test fetching a video."""
    client, recorder = client_for(
        {
            "id": "dQw4w9WgXcQ",
            "title": "Never Gonna Give You Up",
            "duration": 213,
            "channel": {"id": "UCuAXFkgsw1L7xaCfnd5JJOw", "name": "Rick Astley"},
            "tags": ["music"],
            "uploadDate": "2009-10-25T06:57:33Z",
            "viewCount": 1500000000,
            "transcriptLanguages": ["en", "de"],
        }
    )

    video = client.youtube.video("dQw4w9WgXcQ")

    assert recorder.requests[-1].url.path == "/v1/youtube/video"
    assert recorder.requests[-1].url.params["id"] == "dQw4w9WgXcQ"
    assert video.channel.name == "Rick Astley"
    assert video.upload_date == datetime(2009, 10, 25, 6, 57, 33, tzinfo=timezone.utc)
    assert video.like_count is None
    assert video.transcript_languages == ["en", "de"]


def test_channel(client_for):
    """Test fetching a channel."""
    client, recorder = client_for({"id": "UC1", "name": "Beats", "handle": "@beats", "subscriberCount": 10})

    channel = client.youtube.channel("UC1")

    assert recorder.requests[-1].url.path == "/v1/youtube/channel"
    assert channel.handle == "@beats"
    assert channel.subscriber_count == 10


def test_playlist(client_for):
    """Test fetching a playlist."""
    client, recorder = client_for({"id": "PL1", "title": "Mix", "videoCount": 25, "channel": {"id": "UC1"}})

    playlist = client.youtube.playlist("PL1")

    assert recorder.requests[-1].url.path == "/v1/youtube/playlist"
    assert playlist.video_count == 25
    assert playlist.channel.id == "UC1"


def test_channel_videos(client_for):
    """Test listing a channel's videos."""
    client, recorder = client_for({"videoIds": ["a", "b"], "shortIds": ["s"], "liveIds": []})

    ids = client.youtube.channel_videos("UC1", limit=10, type=ChannelVideoType.ALL)

    params = recorder.requests[-1].url.params
    assert recorder.requests[-1].url.path == "/v1/youtube/channel/videos"
    assert params["limit"] == "10"
    assert params["type"] == "all"
    assert ids.video_ids == ["a", "b"]
    assert ids.short_ids == ["s"]


def test_playlist_videos(client_for):
    """Test listing a playlist's videos."""
    client, recorder = client_for({"videoIds": ["a"]})

    ids = client.youtube.playlist_videos("PL1")

    assert recorder.requests[-1].url.path == "/v1/youtube/playlist/videos"
    assert "limit" not in recorder.requests[-1].url.params
    assert ids.live_ids == []


def test_transcript_batch(client_for):
    """Test starting a transcript batch."""
    client, recorder = client_for({"jobId": "batch-1"})

    handle = client.youtube.transcript_batch(video_ids=["a", "b"], lang="en")

    request = recorder.requests[-1]
    assert request.method == "POST"
    assert request.url.path == "/v1/youtube/transcript/batch"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {"videoIds": ["a", "b"], "lang": "en"}
    assert handle.job_id == "batch-1"


def test_video_batch(client_for):
    """Test starting a video batch."""
    client, recorder = client_for({"jobId": "batch-2"})

    handle = client.youtube.video_batch(channel_id="UC1", limit=50)

    assert recorder.requests[-1].url.path == "/v1/youtube/video/batch"
    assert json.loads(recorder.requests[-1].content) == {"channelId": "UC1", "limit": 50}
    assert handle.job_id == "batch-2"


def test_batch_without_source_sends_nothing(client_for):
    """Test a batch without any source sends no request."""
    client, recorder = client_for({"jobId": "never"})

    with pytest.raises(RequestBuildError):
        client.youtube.video_batch(limit=5)

    assert recorder.requests == []


def test_batch_result(client_for):
    """Test polling a finished batch."""
    client, recorder = client_for(
        {
            "status": "completed",
            "results": [
                {"videoId": "a", "transcript": {"content": [{"text": "hi"}], "lang": "en"}},
                {"videoId": "b", "errorCode": "transcript-unavailable"},
            ],
            "stats": {"total": 2, "succeeded": 1, "failed": 1},
            "completedAt": "2025-03-01T12:00:00Z",
        }
    )

    job = client.youtube.batch_result("batch-1")

    assert recorder.requests[-1].url.path == "/v1/youtube/batch/batch-1"
    assert job.status == BatchJobStatus.COMPLETED
    assert job.results[0].transcript.content[0].text == "hi"
    assert job.results[1].error_code == "transcript-unavailable"
    assert job.stats.failed == 1


@pytest.mark.parametrize("status", ["queued", "active"])
def test_batch_result_pending(client_for, status):
    """Test polling a batch that is still running."""
    client, _ = client_for({"status": status})

    job = client.youtube.batch_result("batch-1")

    assert job.status == BatchJobStatus(status)
    assert job.results == []
