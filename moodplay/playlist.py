import time
import logging
from concurrent.futures import ThreadPoolExecutor

from .config import ScoringWeights
from .models import PlaylistItem, PlaylistResponse, ResolvedSong
from .playlist_gpt import generate_song_candidates, generate_search_queries
from .youtube import resolve_song, batch_search, PLACEHOLDER_THUMBNAIL
from .utils import DEFAULT_DURATION


logger = logging.getLogger(__name__)

NO_RESULTS_ERROR = "No songs found. Please try a different prompt."
GENRE_LABEL = "Music"


def _resolve_isolated(youtube, candidate, country, resolver_kwargs):
    try:
        return resolve_song(youtube, candidate, country, **resolver_kwargs)
    except Exception as e:
        logger.error("Resolving '%s' by '%s' failed: %s", candidate.title, candidate.artist, e)
        return ResolvedSong.unresolved(candidate, PLACEHOLDER_THUMBNAIL, DEFAULT_DURATION)


def resolve_candidates(youtube, candidates, country=None, max_workers=8, **resolver_kwargs):
    """
    Resolve every candidate concurrently. Output order follows the input order and a
    failing candidate never affects the others.
    """
    if not candidates:
        return []

    workers = max(1, min(max_workers, len(candidates)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(_resolve_isolated, youtube, candidate, country, resolver_kwargs)
            for candidate in candidates
        ]
        return [future.result() for future in futures]


def assemble(songs, prompt, now_ms=None):
    """
    Shape resolved songs into the playlist response.

    Args:
        songs (list[ResolvedSong]): songs in candidate order
        prompt (str): the user's prompt, used for the title
        now_ms (int, optional): generation timestamp used in item ids

    Returns:
        PlaylistResponse
    """
    if not songs:
        return PlaylistResponse(success=False, error=NO_RESULTS_ERROR)

    now_ms = now_ms if now_ms is not None else int(time.time() * 1000)
    items = [
        PlaylistItem(
            id=f"{now_ms}-{index}",
            title=song.title,
            artist=song.artist,
            video_id=song.video_id,
            thumbnail_url=song.thumbnail_url,
            duration=song.duration,
            genre=GENRE_LABEL,
        )
        for index, song in enumerate(songs)
    ]

    return PlaylistResponse(
        success=True,
        items=items,
        title=f'Your "{prompt}" Playlist',
        description=f"{len(items)} AI-curated songs with trending context",
    )


def build_playlist(openai_client, youtube, prompt, country=None, config=None):
    """
    Run the whole pipeline: generate candidates, resolve them, assemble the response.

    config is a mapping with the keys of moodplay.config.Config. PLAYLIST_MODE "songs"
    resolves each generated song separately; "queries" resolves generated search
    strings with one combined search.
    """
    config = config or {}
    gpt_kwargs = {
        "model": config.get("OPENAI_MODEL", "gpt-4o-mini"),
        "temperature": config.get("OPENAI_TEMPERATURE", 0.9),
        "max_tokens": config.get("OPENAI_MAX_TOKENS", 1000),
    }
    timeout = config.get("YOUTUBE_TIMEOUT")
    default_region = config.get("DEFAULT_REGION", "US")

    if config.get("PLAYLIST_MODE", "songs") == "queries":
        queries = generate_search_queries(openai_client, prompt, country, **gpt_kwargs)
        logger.info("Generated %d search queries", len(queries))
        if not queries:
            return PlaylistResponse(success=False, error=NO_RESULTS_ERROR)
        songs = batch_search(youtube, queries, country, timeout=timeout, default_region=default_region)
        return assemble(songs, prompt)

    candidates = generate_song_candidates(openai_client, prompt, country, **gpt_kwargs)
    logger.info("Generated %d song candidates", len(candidates))
    if not candidates:
        return PlaylistResponse(success=False, error=NO_RESULTS_ERROR)

    songs = resolve_candidates(
        youtube,
        candidates,
        country,
        max_workers=config.get("RESOLVER_MAX_WORKERS", 8),
        weights=ScoringWeights.from_config(config),
        max_results=config.get("SEARCH_MAX_RESULTS", 15),
        fetch_durations=config.get("FETCH_DURATIONS", True),
        timeout=timeout,
        default_region=default_region,
    )
    return assemble(songs, prompt)
