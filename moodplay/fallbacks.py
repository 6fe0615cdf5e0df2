"""
Static candidate tables used when the text model cannot produce a usable playlist.

Topic buckets are matched against keywords in the user's prompt, region buckets
against the country code. A matching topic wins over the region.
"""
from .models import SongCandidate


MIN_FALLBACK_SIZE = 6
FILLER_SONG = SongCandidate(title="Bohemian Rhapsody", artist="Queen")

TOPIC_KEYWORDS = {
    "workout": ("workout", "gym", "running", "exercise", "pump"),
    "chill": ("chill", "relax", "study", "focus", "calm", "sleep"),
}

FALLBACK_SONGS = {
    "workout": [
        ("Espresso", "Sabrina Carpenter"),
        ("Physical", "Dua Lipa"),
        ("Blinding Lights", "The Weeknd"),
        ("Paint The Town Red", "Doja Cat"),
        ("rockstar", "Post Malone"),
        ("SICKO MODE", "Travis Scott"),
    ],
    "chill": [
        ("Birds of a Feather", "Billie Eilish"),
        ("Good Days", "SZA"),
        ("Best Part", "Daniel Caesar"),
        ("telepatía", "Kali Uchis"),
        ("Sunflower", "Rex Orange County"),
        ("Sofia", "Clairo"),
    ],
    "default": [
        ("Espresso", "Sabrina Carpenter"),
        ("Good Luck, Babe!", "Chappell Roan"),
        ("Birds of a Feather", "Billie Eilish"),
        ("Die With A Smile", "Lady Gaga & Bruno Mars"),
        ("A Bar Song (Tipsy)", "Shaboozey"),
        ("Beautiful Things", "Benson Boone"),
    ],
}

REGIONAL_FALLBACK_SONGS = {
    "KR": [
        ("Supernova", "aespa"),
        ("Klaxon", "(G)I-DLE"),
        ("God of Music", "SEVENTEEN"),
        ("How Sweet", "NewJeans"),
        ("Magnetic", "ILLIT"),
        ("APT.", "ROSÉ & Bruno Mars"),
    ],
    "JP": [
        ("アイドル", "YOASOBI"),
        ("ケセラセラ", "Mrs. GREEN APPLE"),
        ("SPECIALZ", "King Gnu"),
        ("唱", "Ado"),
        ("Subtitle", "Official髭男dism"),
        ("Bling-Bang-Bang-Born", "Creepy Nuts"),
    ],
    "IN": [
        ("With You", "AP Dhillon"),
        ("Mirchi", "Divine"),
        ("Born To Shine", "Diljit Dosanjh"),
        ("Kesariya", "Arijit Singh"),
        ("Swag Mera Desi", "Raftaar"),
        ("Genda Phool", "Badshah"),
    ],
    "BR": [
        ("Envolver", "Anitta"),
        ("Penhasco2", "Luísa Sonza"),
        ("Parabéns", "Pabllo Vittar"),
        ("Socadona", "Ludmilla"),
        ("O Grave Bater", "Kevinho"),
        ("Tubarão Te Amo", "MC Ryan SP"),
    ],
    "ES": [
        ("Mi Lova", "Bad Gyal"),
        ("Tú Me Dejaste De Querer", "C. Tangana"),
        ("DESPECHÁ", "Rosalía"),
        ("Columbia", "Quevedo"),
        ("Quevedo: Bzrp Music Sessions, Vol. 52", "Bizarrap"),
        ("Todo de Ti", "Rauw Alejandro"),
    ],
    "GB": [
        ("Sprinter", "Central Cee & Dave"),
        ("Starlight", "Dave"),
        ("Body", "Russ Millions & Tion Wayne"),
        ("Go", "Cat Burns"),
        ("Boy's a liar", "PinkPantheress"),
        ("Marea (we've lost dancing)", "Fred again.."),
    ],
}


def match_topic(prompt):
    prompt_lower = (prompt or "").lower()
    for topic, keywords in TOPIC_KEYWORDS.items():
        if any(keyword in prompt_lower for keyword in keywords):
            return topic
    return None


def pad_candidates(candidates, min_size=MIN_FALLBACK_SIZE):
    padded = list(candidates)
    while len(padded) < min_size:
        padded.append(FILLER_SONG)
    return padded


def fallback_songs(prompt, country=None):
    """
    Pick the static fallback list for a prompt and optional region code.

    Returns:
        list[SongCandidate]: at least MIN_FALLBACK_SIZE candidates
    """
    topic = match_topic(prompt)
    if topic:
        rows = FALLBACK_SONGS[topic]
    elif country and country.upper() in REGIONAL_FALLBACK_SONGS:
        rows = REGIONAL_FALLBACK_SONGS[country.upper()]
    else:
        rows = FALLBACK_SONGS["default"]

    return pad_candidates(SongCandidate(title=title, artist=artist) for title, artist in rows)


def fallback_queries(prompt, country=None):
    return [f"{song.artist} {song.title} official music video" for song in fallback_songs(prompt, country)]
