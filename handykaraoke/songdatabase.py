"""SQLite-backed song index with prefix search and browsing."""

from __future__ import annotations

import operator
import os
import sqlite3
from enum import Enum
from typing import Callable, Optional

from .ncn import cursor_file_for, is_ncn_path, lyrics_file_for, read_lyrics_header
from .song import Song

ProgressCallback = Callable[[int, int, str], None]

_BROWSE_LIMIT = 400


class SearchType(Enum):
    BY_ALL = 0
    BY_ID = 1
    BY_NAME = 2
    BY_ARTIST = 3


class UpdateType(Enum):
    UPDATE_ALL = 0
    IMPORT_NCN = 1


_NEXT_TYPE = {
    SearchType.BY_ALL: SearchType.BY_ID,
    SearchType.BY_ID: SearchType.BY_NAME,
    SearchType.BY_NAME: SearchType.BY_ARTIST,
    SearchType.BY_ARTIST: SearchType.BY_ALL,
}

_ORDER = {
    SearchType.BY_ALL: ("id", "name", "artist"),
    SearchType.BY_ID: ("id", "name", "artist"),
    SearchType.BY_NAME: ("name", "artist", "id"),
    SearchType.BY_ARTIST: ("artist", "name", "id"),
}

_INDEXES = {
    "id_idx": "id",
    "name_idx": "name",
    "artist_idx": "artist",
    "compound_idx": "id,name,artist",
}

_ALL_FILTER = "id LIKE ? OR name LIKE ? OR artist LIKE ?"


def _text(value) -> str:
    return "" if value is None else str(value)


def _row_to_song(row) -> Song:
    return Song(
        id=_text(row[0]),
        name=_text(row[1]),
        artist=_text(row[2]),
        key=_text(row[3]),
        tempo=int(row[4] or 0),
        song_type=_text(row[5]),
        lyrics=_text(row[6]),
        path=_text(row[7]),
    )


class SongDatabase:
    """A song table with search, stepping and rebuilding from an NCN folder.

    ``bpm_reader`` takes a MIDI file path and returns its first tempo in BPM,
    or 0 when the file is not usable.
    """

    def __init__(self, path, bpm_reader: Callable[[str], int]):
        path = str(path)
        if path != ":memory:":
            folder = os.path.dirname(path)
            if folder:
                os.makedirs(folder, exist_ok=True)
        self._bpm_reader = bpm_reader
        self._conn: Optional[sqlite3.Connection] = sqlite3.connect(
            path, isolation_level=None
        )
        self._conn.execute(
            "CREATE TABLE IF NOT EXISTS songs ("
            "id TEXT, name TEXT, artist TEXT, keyname TEXT, tempo INTEGER, "
            "songtype TEXT, lyrics TEXT, path TEXT)"
        )
        self._create_index()

        self.current_song = Song()
        self.search_type = SearchType.BY_ALL
        self.search_text = ""
        self.update_type = UpdateType.UPDATE_ALL
        self.ncn_path = ""
        self.update_count = 0
        self.is_updating = False

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "SongDatabase":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("song database is closed")
        return self._conn

    def _create_index(self) -> None:
        conn = self._connection()
        for name, columns in _INDEXES.items():
            conn.execute(f"CREATE INDEX IF NOT EXISTS {name} ON songs({columns})")

    def _drop_index(self) -> None:
        conn = self._connection()
        for name in _INDEXES:
            conn.execute(f"DROP INDEX IF EXISTS {name}")

    def count(self) -> int:
        """Number of songs stored; 0 when the database is closed."""
        if self._conn is None:
            return 0
        (total,) = self._conn.execute("SELECT COUNT(*) FROM songs").fetchone()
        return int(total)

    def set_ncn_path(self, directory: str) -> None:
        """Use ``directory`` as the NCN song folder; it must be a valid one."""
        if not is_ncn_path(directory):
            raise ValueError(f"not an NCN song folder: {directory!r}")
        self.ncn_path = directory

    def insert_ncn(self, ncn_path: str, song_id: str, mid_path: str) -> bool:
        """Add one NCN song; False when its files are missing or unusable."""
        cursor_path = cursor_file_for(mid_path)
        lyrics_path = lyrics_file_for(mid_path)
        if cursor_path is None or lyrics_path is None:
            return False

        bpm = self._bpm_reader(mid_path)
        if bpm == 0:
            return False

        try:
            header = read_lyrics_header(lyrics_path)
        except OSError:
            return False

        self._connection().execute(
            "INSERT INTO songs VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            (
                song_id,
                header.name,
                header.artist,
                header.key,
                bpm,
                "NCN",
                header.lyrics,
                mid_path.replace(ncn_path, ""),
            ),
        )
        return True

    def next_type(self, text: str) -> Song:
        """Switch to the next search type and search again."""
        previous = self.search_type
        self.search_type = _NEXT_TYPE[previous]
        return self.search(text if previous is SearchType.BY_ALL else self.search_text)

    def search(self, text: str) -> Song:
        """Find the first song whose field starts with ``text``."""
        conn = self._connection()
        pattern = text + "%"
        order = ", ".join(_ORDER[self.search_type])
        if self.search_type is SearchType.BY_ALL:
            self.search_text = text
            sql = f"SELECT * FROM songs WHERE {_ALL_FILTER} ORDER BY {order} LIMIT 1"
            params: tuple = (pattern,) * 3
        else:
            column = _ORDER[self.search_type][0]
            sql = f"SELECT * FROM songs WHERE {column} LIKE ? ORDER BY {order} LIMIT 1"
            params = (pattern,)

        row = conn.execute(sql, params).fetchone()
        if row is not None:
            self.current_song = _row_to_song(row)
        return self.current_song

    def search_next(self) -> Song:
        """Move to the song after the current one in search order."""
        return self._step(forward=True)

    def search_previous(self) -> Song:
        """Move to the song before the current one in search order."""
        return self._step(forward=False)

    def _step(self, forward: bool) -> Song:
        conn = self._connection()
        current = self.current_song
        beyond = operator.gt if forward else operator.lt
        direction = "" if forward else " DESC"
        columns = _ORDER[self.search_type]
        order = ", ".join(f"{column}{direction}" for column in columns)

        if self.search_type is SearchType.BY_ALL:
            pattern = self.search_text + "%"
            rows = conn.execute(
                f"SELECT * FROM songs WHERE {_ALL_FILTER} ORDER BY {order}",
                (pattern,) * 3,
            )

            def key(song: Song):
                return song.id

        else:
            bound = ">=" if forward else "<="
            rows = conn.execute(
                f"SELECT * FROM songs WHERE {columns[0]} {bound} ? "
                f"ORDER BY {order} LIMIT {_BROWSE_LIMIT}",
                (getattr(current, columns[0]),),
            )

            def key(song: Song):
                return tuple(getattr(song, column) for column in columns)

        mine = key(current)
        for row in rows:
            song = _row_to_song(row)
            if beyond(key(song), mine):
                self.current_song = song
                break
        return self.current_song

    def _midi_files(self) -> list[str]:
        base = f"{self.ncn_path}/Song"
        found = []
        for root, _dirs, files in os.walk(base):
            root = root.replace(os.sep, "/")
            found.extend(
                f"{root}/{name}" for name in files if name.lower().endswith(".mid")
            )
        return sorted(found)

    def update(self, progress: Optional[ProgressCallback] = None) -> int:
        """Rebuild the table from the NCN folder; returns how many files failed.

        ``progress`` is called with (position, total, file name) per file.
        """
        conn = self._connection()
        if not is_ncn_path(self.ncn_path):
            raise ValueError(f"not an NCN song folder: {self.ncn_path!r}")

        files = self._midi_files()
        self.update_count = len(files)
        self.is_updating = True
        failed = 0
        try:
            conn.execute("DELETE FROM songs")
            conn.execute("VACUUM")
            conn.execute("BEGIN")
            try:
                self._drop_index()
                for position, mid_path in enumerate(files, start=1):
                    file_name = mid_path.rsplit("/", 1)[-1]
                    if progress is not None:
                        progress(position, len(files), file_name)
                    song_id = file_name.split(".", 1)[0]
                    if not self.insert_ncn(self.ncn_path, song_id, mid_path):
                        failed += 1
                conn.execute("COMMIT")
            except BaseException:
                if conn.in_transaction:
                    conn.execute("ROLLBACK")
                raise
            self._create_index()
        finally:
            self.is_updating = False
        return failed