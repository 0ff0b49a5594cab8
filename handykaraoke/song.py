"""Song records as stored in the song database."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Song:
    """One karaoke song entry."""

    id: str = ""
    name: str = ""
    artist: str = ""
    key: str = ""
    tempo: int = 0
    song_type: str = ""
    lyrics: str = ""
    path: str = ""

    def detail(self) -> str:
        """One-line summary: id, name, artist, tempo, key and type."""
        key_part = ")" if self.key == "" else f"-{self.key})"
        return (
            f"{self.id}  {self.name} - {self.artist}"
            f"  ({self.tempo}{key_part}"
            f"  [{self.song_type}]"
        )

    def lyrics_line(self) -> str:
        """The lyrics with line breaks turned into spaces."""
        return self.lyrics.replace("\n", " ")

    def display_fields(self) -> dict[str, str]:
        """The labelled values shown in the song detail panel."""
        return {
            "id": self.id,
            "name": self.name,
            "artist": self.artist,
            "key": self.key,
            "bpm": f"{self.tempo} BPM",
            "type": self.song_type,
        }