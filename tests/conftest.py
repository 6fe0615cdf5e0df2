"""
Pytest configuration and fixtures for the playlist pipeline
"""

import pytest
from unittest.mock import Mock

from moodplay import create_app


def make_openai_client(content=None, error=None):
    """Mock OpenAI client whose chat completion returns content or raises error"""
    client = Mock()
    if error is not None:
        client.chat.completions.create.side_effect = error
    else:
        message = Mock()
        message.content = content
        choice = Mock()
        choice.message = message
        client.chat.completions.create.return_value = Mock(choices=[choice])
    return client


def make_search_item(video_id, title, channel="Some Channel", high=True):
    thumbnails = {"default": {"url": f"https://i.ytimg.com/vi/{video_id}/default.jpg"}}
    if high:
        thumbnails["high"] = {"url": f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg"}
    return {
        "id": {"kind": "youtube#video", "videoId": video_id},
        "snippet": {
            "title": title,
            "channelTitle": channel,
            "description": "",
            "thumbnails": thumbnails,
        },
    }


class FakeRequest:
    def __init__(self, result, timeouts=None):
        self.result = result
        self.timeouts = timeouts if timeouts is not None else []

    def execute(self, http=None):
        self.timeouts.append(getattr(http, "timeout", None))
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


class FakeYouTube:
    """
    Stand-in for the YouTube Data API resource.

    search_results maps a query to a list of items or an exception; unknown queries
    return no items. durations maps a video id to an ISO 8601 duration.
    """

    def __init__(self, search_results=None, durations=None, search_error=None):
        self.search_results = search_results or {}
        self.durations = durations or {}
        self.search_error = search_error
        self.search_calls = []
        self.video_calls = []
        # socket timeout of the http object every request was executed with
        self.http_timeouts = []

    def search(self):
        return Mock(list=self._search_list)

    def videos(self):
        return Mock(list=self._videos_list)

    def _search_list(self, **kwargs):
        self.search_calls.append(kwargs)
        if self.search_error is not None:
            return FakeRequest(self.search_error, self.http_timeouts)
        result = self.search_results.get(kwargs["q"], [])
        if isinstance(result, Exception):
            return FakeRequest(result, self.http_timeouts)
        return FakeRequest({"items": result}, self.http_timeouts)

    def _videos_list(self, **kwargs):
        self.video_calls.append(kwargs)
        video_id = kwargs["id"]
        if video_id not in self.durations:
            return FakeRequest({"items": []}, self.http_timeouts)
        return FakeRequest({"items": [{"id": video_id, "contentDetails": {"duration": self.durations[video_id]}}]}, self.http_timeouts)


@pytest.fixture
def failing_openai_client():
    return make_openai_client(error=RuntimeError("service unavailable"))


@pytest.fixture
def failing_youtube():
    return FakeYouTube(search_error=RuntimeError("quota exceeded"))


@pytest.fixture
def app_factory():
    def _make(openai_client=None, youtube_client=None, **config):
        test_config = {
            "TESTING": True,
            "OPENAI_API_KEY": None,
            "YOUTUBE_API_KEY": None,
            "PLAYLIST_MODE": "songs",
        }
        test_config.update(config)
        return create_app(test_config, openai_client=openai_client, youtube_client=youtube_client)
    return _make
