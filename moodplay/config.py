import os
import logging
from dataclasses import dataclass


logger = logging.getLogger(__name__)


def _env_number(name, default, cast):
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return cast(value)
    except ValueError:
        logger.warning("Invalid value %r for %s, using default %s", value, name, default)
        return default


def _env_int(name, default):
    return _env_number(name, default, int)


def _env_float(name, default):
    return _env_number(name, default, float)


def _env_bool(name, default):
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
    YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY")

    OPENAI_MODEL = os.getenv("OPENAI_MODEL") or "gpt-4o-mini"
    OPENAI_TEMPERATURE = _env_float("OPENAI_TEMPERATURE", 0.9)
    OPENAI_MAX_TOKENS = _env_int("OPENAI_MAX_TOKENS", 1000)
    OPENAI_TIMEOUT = _env_float("OPENAI_TIMEOUT", 20)
    YOUTUBE_TIMEOUT = _env_float("YOUTUBE_TIMEOUT", 10)

    # "songs": one search per generated song, "queries": one combined search
    PLAYLIST_MODE = os.getenv("PLAYLIST_MODE") or "songs"
    DEFAULT_REGION = os.getenv("DEFAULT_REGION") or "US"
    SEARCH_MAX_RESULTS = _env_int("SEARCH_MAX_RESULTS", 15)
    RESOLVER_MAX_WORKERS = _env_int("RESOLVER_MAX_WORKERS", 8)
    FETCH_DURATIONS = _env_bool("FETCH_DURATIONS", True)

    SCORE_OFFICIAL_MARKER = _env_int("SCORE_OFFICIAL_MARKER", 10)
    SCORE_MUSIC_VIDEO_MARKER = _env_int("SCORE_MUSIC_VIDEO_MARKER", 5)
    SCORE_NEGATIVE_MARKER = _env_int("SCORE_NEGATIVE_MARKER", -5)
    SCORE_HIGH_THUMBNAIL = _env_int("SCORE_HIGH_THUMBNAIL", 2)
    SCORE_THRESHOLD = _env_int("SCORE_THRESHOLD", 10)

    LOG_LEVEL = os.getenv("LOG_LEVEL") or "INFO"


@dataclass(frozen=True)
class ScoringWeights:
    official_marker: int = 10
    music_video_marker: int = 5
    negative_marker: int = -5
    high_thumbnail: int = 2
    threshold: int = 10

    @classmethod
    def from_config(cls, config):
        return cls(
            official_marker=config.get("SCORE_OFFICIAL_MARKER", 10),
            music_video_marker=config.get("SCORE_MUSIC_VIDEO_MARKER", 5),
            negative_marker=config.get("SCORE_NEGATIVE_MARKER", -5),
            high_thumbnail=config.get("SCORE_HIGH_THUMBNAIL", 2),
            threshold=config.get("SCORE_THRESHOLD", 10),
        )
