"""Command line for browsing the karaoke song database."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .song import Song
from .songdatabase import SearchType, SongDatabase

DEFAULT_DATABASE = "Data/Database.db3"

_SEARCH_TYPES = {
    "all": SearchType.BY_ALL,
    "id": SearchType.BY_ID,
    "name": SearchType.BY_NAME,
    "artist": SearchType.BY_ARTIST,
}

_DEFAULT_MIDI_BPM = 120
_TEMPO_EVENT = b"\xff\x51\x03"


def _first_bpm(path: str) -> int:
    """Tempo of the first tempo event in a MIDI file, 0 if it is not MIDI."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError:
        return 0
    if not data.startswith(b"MThd"):
        return 0
    at = data.find(_TEMPO_EVENT)
    if at < 0 or at + 6 > len(data):
        return _DEFAULT_MIDI_BPM
    microseconds = int.from_bytes(data[at + 3 : at + 6], "big")
    if microseconds == 0:
        return 0
    return round(60_000_000 / microseconds)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="handy-karaoke", description="Browse the karaoke song database."
    )
    parser.add_argument("--database", default=DEFAULT_DATABASE, help="database file")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("count", help="show how many songs are stored")

    search = commands.add_parser("search", help="find songs by prefix")
    search.add_argument("text", help="prefix to look for")
    search.add_argument("--by", choices=sorted(_SEARCH_TYPES), default="all")
    search.add_argument(
        "--limit", type=int, default=1, help="number of songs to list from the match"
    )
    return parser


def _search(database: SongDatabase, text: str, by: str, limit: int) -> int:
    if limit < 1:
        raise SystemExit("--limit must be at least 1")
    database.search_type = _SEARCH_TYPES[by]
    song = database.search(text)
    if song == Song():
        return 1
    print(song.detail())
    for _ in range(limit - 1):
        following = database.search_next()
        if following == song:
            break
        print(following.detail())
        song = following
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    with SongDatabase(args.database, _first_bpm) as database:
        if args.command == "count":
            print(f"{database.count()} เพลง")
            return 0
        return _search(database, args.text, args.by, args.limit)