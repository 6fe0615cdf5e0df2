import re


DEFAULT_DURATION = "3:30"
UNKNOWN_ARTIST = "Unknown Artist"

DURATION_PATTERN = re.compile(r"^PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?$")

TITLE_NOISE_PATTERNS = [
    re.compile(r"\(Official Music Video\)", re.IGNORECASE),
    re.compile(r"\(Official Video\)", re.IGNORECASE),
    re.compile(r"\(Music Video\)", re.IGNORECASE),
    re.compile(r"\[Official.*?\]", re.IGNORECASE),
    re.compile(r"official", re.IGNORECASE),
    re.compile(r"music video", re.IGNORECASE),
]

ARTIST_SUFFIX_PATTERN = re.compile(r"(VEVO|Records|Music|Official)$", re.IGNORECASE)
BY_PATTERN = re.compile(r" by ", re.IGNORECASE)


def _duration_parts(value):
    if not isinstance(value, str):
        return None
    match = DURATION_PATTERN.match(value.strip())
    # bare "PT" carries no components
    if not match or not any(match.groups()):
        return None
    return tuple(int(part or 0) for part in match.groups())


def parse_duration(value):
    """
    Convert an ISO 8601 video duration (PT4M13S) into a display string (4:13).

    Args:
        value (str): duration as returned by the videos endpoint

    Returns:
        str: "M:SS" below one hour, "H:MM:SS" otherwise, DEFAULT_DURATION if value is malformed
    """
    parts = _duration_parts(value)
    if parts is None:
        return DEFAULT_DURATION

    hours, minutes, seconds = parts
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def duration_minutes(value):
    """
    Total whole minutes of an ISO 8601 duration, or None when it is malformed.
    """
    parts = _duration_parts(value)
    if parts is None:
        return None
    hours, minutes, _ = parts
    return hours * 60 + minutes


def clean_video_title(video_title):
    cleaned = video_title or ""
    for pattern in TITLE_NOISE_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    return cleaned.strip()


def extract_artist_and_title(video_title, channel_title):
    """
    Best-effort split of a video title into (artist, song title).

    Tries "Artist - Song", "Artist: Song" and "Song" by Artist in that order and
    falls back to the channel name as the artist. Irregular titles will not always
    come out right.

    Args:
        video_title (str): raw video title
        channel_title (str): name of the uploading channel

    Returns:
        tuple: (artist, song_title)
    """
    clean_title = clean_video_title(video_title)

    artist = channel_title or ""
    song_title = clean_title

    if " - " in clean_title:
        head, tail = clean_title.split(" - ", 1)
        artist, song_title = head.strip(), tail.strip()
    elif ": " in clean_title:
        head, tail = clean_title.split(": ", 1)
        artist, song_title = head.strip(), tail.strip()
    elif BY_PATTERN.search(clean_title):
        head, tail = BY_PATTERN.split(clean_title, 1)
        song_title = head.strip().replace('"', "")
        artist = tail.strip()

    artist = ARTIST_SUFFIX_PATTERN.sub("", artist.strip()).strip()
    song_title = song_title.strip().strip('"').strip()

    return artist or UNKNOWN_ARTIST, song_title or clean_title
