"""
Tests for environment-driven configuration
"""

import logging

from moodplay.config import ScoringWeights, _env_bool, _env_float, _env_int


class TestEnvNumbers:

    def test_valid_values(self, monkeypatch):
        monkeypatch.setenv("SEARCH_MAX_RESULTS", "7")
        monkeypatch.setenv("OPENAI_TIMEOUT", "2.5")
        assert _env_int("SEARCH_MAX_RESULTS", 15) == 7
        assert _env_float("OPENAI_TIMEOUT", 20) == 2.5

    def test_unset_or_blank_uses_default(self, monkeypatch):
        monkeypatch.delenv("SEARCH_MAX_RESULTS", raising=False)
        monkeypatch.setenv("OPENAI_TIMEOUT", "  ")
        assert _env_int("SEARCH_MAX_RESULTS", 15) == 15
        assert _env_float("OPENAI_TIMEOUT", 20) == 20

    def test_malformed_value_uses_default_and_warns(self, monkeypatch, caplog):
        monkeypatch.setenv("SEARCH_MAX_RESULTS", "abc")
        monkeypatch.setenv("YOUTUBE_TIMEOUT", "ten")

        with caplog.at_level(logging.WARNING, logger="moodplay.config"):
            assert _env_int("SEARCH_MAX_RESULTS", 15) == 15
            assert _env_float("YOUTUBE_TIMEOUT", 10) == 10

        assert "SEARCH_MAX_RESULTS" in caplog.text
        assert "YOUTUBE_TIMEOUT" in caplog.text

    def test_bool(self, monkeypatch):
        monkeypatch.setenv("FETCH_DURATIONS", "no")
        assert _env_bool("FETCH_DURATIONS", True) is False
        monkeypatch.delenv("FETCH_DURATIONS")
        assert _env_bool("FETCH_DURATIONS", True) is True


def test_scoring_weights_from_config():
    weights = ScoringWeights.from_config({"SCORE_THRESHOLD": 3, "SCORE_HIGH_THUMBNAIL": 0})
    assert weights.threshold == 3
    assert weights.high_thumbnail == 0
    assert weights.official_marker == 10
