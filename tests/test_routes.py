"""
Tests for the HTTP surface
"""

import json
from unittest.mock import Mock

import pytest

from conftest import FakeYouTube, make_openai_client, make_search_item
from moodplay.fallbacks import FALLBACK_SONGS
from moodplay.routes import normalize_country


@pytest.fixture
def youtube():
    return FakeYouTube({
        "Espresso Sabrina Carpenter official music video": [
            make_search_item("eVli-tstM5E", "Sabrina Carpenter - Espresso (Official Video)", "Sabrina Carpenter"),
        ],
    })


class TestGeneratePlaylist:

    def test_success(self, app_factory, youtube):
        reply = json.dumps([{"title": "Espresso", "artist": "Sabrina Carpenter"}])
        client = app_factory(make_openai_client(reply), youtube).test_client()

        response = client.post("/api/generate-playlist", json={"prompt": "  summer pop  ", "country": "us"})

        assert response.status_code == 200
        data = response.get_json()
        assert data["success"] is True
        assert data["title"] == 'Your "summer pop" Playlist'
        assert data["playlist"][0]["videoId"] == "eVli-tstM5E"
        assert youtube.search_calls[0]["regionCode"] == "US"

    def test_workout_fallback(self, app_factory, failing_openai_client, failing_youtube):
        client = app_factory(failing_openai_client, failing_youtube).test_client()

        response = client.post("/api/generate-playlist", json={"prompt": "energetic workout music"})

        assert response.status_code == 200
        data = response.get_json()
        assert [(s["title"], s["artist"]) for s in data["playlist"]] == FALLBACK_SONGS["workout"]
        assert all(s["videoId"] is None for s in data["playlist"])

    @pytest.mark.parametrize("body", [{"prompt": ""}, {"prompt": "   "}, {"prompt": 12}, {}, ["prompt"]])
    def test_invalid_prompt(self, app_factory, body):
        openai_client, youtube = Mock(), Mock()
        client = app_factory(openai_client, youtube).test_client()

        response = client.post("/api/generate-playlist", json=body)

        assert response.status_code == 400
        assert "prompt" in response.get_json()["error"]
        openai_client.chat.completions.create.assert_not_called()
        youtube.search.assert_not_called()

    def test_not_json(self, app_factory):
        client = app_factory(Mock(), Mock()).test_client()
        response = client.post("/api/generate-playlist", data="prompt=hi")
        assert response.status_code == 400

    def test_no_results(self, app_factory, failing_openai_client):
        client = app_factory(failing_openai_client, FakeYouTube(), PLAYLIST_MODE="queries").test_client()

        response = client.post("/api/generate-playlist", json={"prompt": "pop"})

        assert response.status_code == 404
        assert response.get_json() == {"error": "No songs found. Please try a different prompt."}

    @pytest.mark.parametrize("missing", ["openai", "youtube"])
    def test_missing_configuration(self, app_factory, missing):
        clients = {"openai": Mock(), "youtube": Mock()}
        clients[missing] = None
        client = app_factory(clients["openai"], clients["youtube"]).test_client()

        response = client.post("/api/generate-playlist", json={"prompt": "pop"})

        assert response.status_code == 500
        assert "not configured" in response.get_json()["error"]

    def test_unexpected_error(self, app_factory, monkeypatch):
        def explode(*args, **kwargs):
            raise RuntimeError("kaboom")

        monkeypatch.setattr("moodplay.routes.build_playlist", explode)
        client = app_factory(Mock(), Mock()).test_client()

        response = client.post("/api/generate-playlist", json={"prompt": "pop"})

        assert response.status_code == 500
        assert response.get_json()["details"] == "kaboom"


class TestIndex:

    def test_renders(self, app_factory):
        response = app_factory(Mock(), Mock()).test_client().get("/")
        assert response.status_code == 200
        assert b"/api/generate-playlist" in response.data


@pytest.mark.parametrize("value, expected", [
    ("us", "US"), (" kr ", "KR"), ("UK", "GB"), ("", None), ("USA", None), (None, None), (7, None),
])
def test_normalize_country(value, expected):
    assert normalize_country(value) == expected
