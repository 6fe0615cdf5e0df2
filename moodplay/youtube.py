import re
import logging
import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .config import ScoringWeights
from .models import ResolvedSong
from .utils import DEFAULT_DURATION, parse_duration, duration_minutes, extract_artist_and_title


logger = logging.getLogger(__name__)

MUSIC_CATEGORY_ID = "10"
PLACEHOLDER_THUMBNAIL = "/static/placeholder.svg"
MAX_LIST_RESULTS = 15
MAX_SONG_MINUTES = 10
BATCH_QUERY_LIMIT = 10
BATCH_RESULT_LIMIT = 12

QUERY_SUFFIXES = ["official music video", "official video", "music video", ""]

OFFICIAL_MARKER = re.compile(r"official|records|music", re.IGNORECASE)
MUSIC_VIDEO_MARKER = re.compile(r"music video|\bmv\b|official video", re.IGNORECASE)
NEGATIVE_MARKER = re.compile(r"\b(live|cover|reaction|karaoke)\b", re.IGNORECASE)
NON_MUSIC_MARKER = re.compile(r"reaction|tutorial|gameplay|review", re.IGNORECASE)


def create_youtube_client(api_key):
    return build("youtube", "v3", developerKey=api_key, cache_discovery=False)


def _execute(request, timeout=None):
    # httplib2.Http is not thread safe, every call gets its own
    return request.execute(http=httplib2.Http(timeout=timeout))


def build_query_variants(candidate):
    base = candidate.query()
    return [f"{base} {suffix}".strip() for suffix in QUERY_SUFFIXES]


def search_videos(youtube, query, region_code="US", max_results=MAX_LIST_RESULTS, timeout=None):
    """
    Search for music videos.

    Args:
        youtube: YouTube Data API resource
        query (str): search string
        region_code (str): region the results are biased to
        max_results (int): capped at 15
        timeout (float, optional): socket timeout in seconds

    Returns:
        list[dict]: search result items, possibly empty
    """
    request = youtube.search().list(
        q=query,
        part="id,snippet",
        maxResults=max(1, min(max_results, MAX_LIST_RESULTS)),
        type="video",
        regionCode=region_code,
        videoCategoryId=MUSIC_CATEGORY_ID,
        safeSearch="moderate",
        order="relevance",
    )
    response = _execute(request, timeout)
    return response.get("items", [])


def score_item(item, weights=ScoringWeights()):
    snippet = item.get("snippet", {})
    title = snippet.get("title", "")
    channel = snippet.get("channelTitle", "")

    score = 0
    if OFFICIAL_MARKER.search(channel) or OFFICIAL_MARKER.search(title):
        score += weights.official_marker
    if MUSIC_VIDEO_MARKER.search(title):
        score += weights.music_video_marker
    if NEGATIVE_MARKER.search(title):
        score += weights.negative_marker
    if snippet.get("thumbnails", {}).get("high", {}).get("url"):
        score += weights.high_thumbnail
    return score


def pick_best_item(items, weights=ScoringWeights()):
    """
    First item scoring above the threshold, otherwise the first item. Items without a
    video id are never picked.
    """
    playable = [item for item in items or [] if item.get("id", {}).get("videoId")]
    if not playable:
        return None
    for item in playable:
        if score_item(item, weights) > weights.threshold:
            return item
    return playable[0]


def best_thumbnail(item):
    thumbnails = item.get("snippet", {}).get("thumbnails", {})
    for size in ("high", "default"):
        url = thumbnails.get(size, {}).get("url")
        if url:
            return url
    return PLACEHOLDER_THUMBNAIL


def fetch_duration(youtube, video_id, timeout=None):
    """
    Look up the exact length of a video.

    Returns:
        str: display duration, DEFAULT_DURATION if the lookup fails or the video is
        longer than MAX_SONG_MINUTES
    """
    try:
        request = youtube.videos().list(part="contentDetails,statistics", id=video_id)
        response = _execute(request, timeout)
    except Exception as e:
        logger.warning("Duration lookup failed for %s: %s", video_id, e)
        return DEFAULT_DURATION

    items = response.get("items", [])
    if not items:
        return DEFAULT_DURATION

    raw = items[0].get("contentDetails", {}).get("duration")
    minutes = duration_minutes(raw)
    if minutes is None:
        return DEFAULT_DURATION
    if minutes > MAX_SONG_MINUTES:
        logger.warning("Discarding duration %s of %s, too long for a song", raw, video_id)
        return DEFAULT_DURATION
    return parse_duration(raw)


def resolve_song(youtube, candidate, region_code=None, weights=ScoringWeights(),
                 max_results=MAX_LIST_RESULTS, fetch_durations=True, timeout=None, default_region="US"):
    """
    Find the best matching video for a song candidate.

    Query variants are tried in order until one returns results. Never raises: when
    nothing is found the returned song has no video_id.

    Args:
        youtube: YouTube Data API resource
        candidate (SongCandidate): song to look up
        region_code (str, optional): falls back to default_region

    Returns:
        ResolvedSong
    """
    region_code = region_code or default_region

    for query in build_query_variants(candidate):
        try:
            items = search_videos(youtube, query, region_code, max_results, timeout)
        except HttpError as e:
            logger.warning("YouTube search failed for '%s': %s", query, e)
            continue
        except Exception as e:
            logger.warning("YouTube search error for '%s': %s", query, e)
            continue

        best = pick_best_item(items, weights)
        if best is None:
            continue

        video_id = best["id"]["videoId"]
        duration = DEFAULT_DURATION
        if fetch_durations:
            duration = fetch_duration(youtube, video_id, timeout)

        return ResolvedSong(
            title=candidate.title,
            artist=candidate.artist,
            video_id=video_id,
            thumbnail_url=best_thumbnail(best),
            duration=duration,
        )

    logger.warning("cannot find youtube video for track: %s, artist: %s", candidate.title, candidate.artist)
    return ResolvedSong.unresolved(candidate, PLACEHOLDER_THUMBNAIL, DEFAULT_DURATION)


def batch_search(youtube, queries, region_code=None, timeout=None, default_region="US"):
    """
    Resolve many queries with a single search call.

    The first BATCH_QUERY_LIMIT queries are joined into one search, obvious non-music
    results are dropped and artist/title are recovered from the video titles. Cheaper
    than resolve_song per query but less accurate.

    Returns:
        list[ResolvedSong]: at most BATCH_RESULT_LIMIT songs, empty on failure
    """
    combined_query = " | ".join(queries[:BATCH_QUERY_LIMIT])
    try:
        items = search_videos(youtube, combined_query, region_code or default_region, MAX_LIST_RESULTS, timeout)
    except Exception as e:
        logger.error("Error in batch YouTube search: %s", e)
        return []

    results = []
    for item in items:
        if len(results) >= BATCH_RESULT_LIMIT:
            break

        snippet = item.get("snippet", {})
        title = snippet.get("title") or "Unknown Title"
        channel_title = snippet.get("channelTitle") or "Unknown Artist"
        video_id = item.get("id", {}).get("videoId")

        if NON_MUSIC_MARKER.search(title):
            continue

        artist, song_title = extract_artist_and_title(title, channel_title)
        if video_id and artist and song_title:
            results.append(ResolvedSong(
                title=song_title,
                artist=artist,
                video_id=video_id,
                thumbnail_url=best_thumbnail(item),
                duration=DEFAULT_DURATION,
            ))

    logger.info("Found %d songs from single search call", len(results))
    return results
