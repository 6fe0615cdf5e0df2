from dataclasses import dataclass, field
from typing import Optional, List

from .utils import DEFAULT_DURATION


@dataclass(frozen=True)
class SongCandidate:
    title: str
    artist: str

    def query(self) -> str:
        return f"{self.title} {self.artist}"


@dataclass
class ResolvedSong:
    title: str
    artist: str
    video_id: Optional[str] = None
    thumbnail_url: str = ""
    duration: str = DEFAULT_DURATION

    @classmethod
    def unresolved(cls, candidate: SongCandidate, thumbnail_url: str, duration: str):
        return cls(title=candidate.title, artist=candidate.artist,
                   thumbnail_url=thumbnail_url, duration=duration)


@dataclass
class PlaylistItem:
    id: str
    title: str
    artist: str
    video_id: Optional[str]
    thumbnail_url: str
    duration: str
    genre: str = "Music"

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "artist": self.artist,
            "videoId": self.video_id,
            "thumbnailUrl": self.thumbnail_url,
            "duration": self.duration,
            "genre": self.genre,
        }


@dataclass
class PlaylistResponse:
    success: bool
    items: List[PlaylistItem] = field(default_factory=list)
    title: str = ""
    description: str = ""
    error: Optional[str] = None

    def to_dict(self):
        if not self.success:
            return {"error": self.error}
        return {
            "success": True,
            "playlist": [item.to_dict() for item in self.items],
            "title": self.title,
            "description": self.description,
        }
