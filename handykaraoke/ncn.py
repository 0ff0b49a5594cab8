"""Readers for NCN karaoke song folders (cursor and lyrics files)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

LYRICS_ENCODING = "tis_620"

_CURSOR_SUFFIXES = (".CUR", ".cur", ".Cur")
_LYRICS_SUFFIXES = (".LYR", ".lyr", ".Lyr")


@dataclass(frozen=True)
class LyricsHeader:
    """The header lines and the opening lyrics of a .LYR file."""

    name: str
    artist: str
    key: str
    lyrics: str


def _decode(path) -> str:
    return Path(path).read_bytes().decode(LYRICS_ENCODING, errors="replace")


def _first_lines(text: str, count: int) -> list[str]:
    lines = [line.removesuffix("\r") for line in text.split("\n")[:count]]
    return lines + [""] * (count - len(lines))


def read_cursor_file(path, resolution: int) -> list[int]:
    """Read cursor ticks: little-endian 16-bit values scaled by resolution / 24."""
    data = iter(Path(path).read_bytes())
    ticks = []
    for low in data:
        high = next(data, 0)
        ticks.append((low + (high << 8)) * resolution // 24)
    return ticks


def read_lyrics(path) -> str:
    """Return the lyrics text of a .LYR file, skipping its four header lines."""
    parts = _decode(path).split("\n", 4)
    return parts[4] if len(parts) == 5 else ""


def read_lyrics_header(path) -> LyricsHeader:
    """Read name, artist, key and the first four lyric lines of a .LYR file."""
    lines = _first_lines(_decode(path), 8)
    return LyricsHeader(
        name=lines[0],
        artist=lines[1],
        key=lines[2],
        lyrics=" ".join(lines[4:8]),
    )


def is_ncn_path(directory: str) -> bool:
    """True if the directory holds Cursor, Lyrics and Song entries."""
    return all(
        os.path.exists(f"{directory}/{sub}") for sub in ("Cursor", "Lyrics", "Song")
    )


def _companion(mid_path: str, folder: str, suffixes) -> str | None:
    stem = mid_path.replace("/Song/", f"/{folder}/")[:-4]
    for suffix in suffixes:
        candidate = stem + suffix
        if os.path.exists(candidate):
            return candidate
    return None


def cursor_file_for(mid_path: str) -> str | None:
    """The cursor file that belongs to a song's MIDI file, or None."""
    return _companion(mid_path, "Cursor", _CURSOR_SUFFIXES)


def lyrics_file_for(mid_path: str) -> str | None:
    """The lyrics file that belongs to a song's MIDI file, or None."""
    return _companion(mid_path, "Lyrics", _LYRICS_SUFFIXES)