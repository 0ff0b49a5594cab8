# handykaraoke

The non-graphical core of a MIDI karaoke player for NCN song collections. It covers the song index, reading NCN files, lyrics highlight timing, beat tracking and the state of mixer controls. It uses only the standard library.

## Modules

- `handykaraoke.song`: `Song`, a dataclass holding id, name, artist, key, tempo, song type, lyrics and path. `detail()` returns a one-line summary such as `00001  Name - Artist  (120-C)  [NCN]`. `lyrics_line()` returns the lyrics with newlines replaced by spaces. `display_fields()` returns the labelled values for a detail panel.
- `handykaraoke.ncn`: readers for the files of an NCN collection.
  - `read_cursor_file(path, resolution)` returns the cursor ticks. Each tick is a little-endian 16-bit value scaled by `resolution / 24`.
  - `read_lyrics(path)` returns the lyrics after the four header lines of a TIS-620 `.lyr` file.
  - `read_lyrics_header(path)` returns a `LyricsHeader` with name, artist, key and the first four lyric lines joined by spaces.
  - `is_ncn_path(directory)` checks that the directory has `Cursor`, `Lyrics` and `Song` entries.
  - `cursor_file_for(mid_path)` and `lyrics_file_for(mid_path)` find the companion file of a song's MIDI file, trying upper-case, lower-case and capitalised suffixes. They return `None` if no file is found.
- `handykaraoke.songdatabase`: `SongDatabase`, an SQLite song table.
  - Prefix search by all fields, id, name or artist, selected through `SearchType`.
  - `next_type` cycles through the search types.
  - `search_next` and `search_previous` step through the songs in search order.
  - `update` rebuilds the table from an NCN collection.
  - It can be used as a context manager.
- `handykaraoke.lyrics`: `LyricsCursor` and `LinePosition`. The cursor tracks the two lyric lines on screen and the width of the highlight. You give it a text-measuring callable, the CR LF separated lyrics and the cursor ticks. `set_position(tick)` advances it during playback and returns the `(start, end)` highlight move, or `None`. `seek(tick)` replays up to a given tick. `line_x` places a line left, centred or right.
- `handykaraoke.rhythm`: `RhythmTracker`. It follows beats and bars across changes in beats per bar, with up to five beat lamps. `set_beat` loads the layout, then `set_current_beat` advances and `seek` jumps. The tracker exposes `lit_beats`, `current_bar` and `position_text`.
- `handykaraoke.slider`: `LevelSlider`, a clamped level control. It handles wheel steps, press and drag, and computes the handle position. It has separate listener lists for all changes and for user changes.
- `handykaraoke.ledvu`: `LedMeter` and `LedZone`, an LED level meter.
  - It holds the level and a peak-hold level, with the hold time kept between 50 ms and 10 s.
  - `layout(height)` lays out LEDs at a 3-pixel pitch and splits them into low, mid and high zones.
  - `peak(value)` sets the level to `value` and then back to zero. It returns the animation segments `(start, end, duration_ms)`.
- `handykaraoke.strips`: `ChannelStrip`, with mute, solo, a fader (`LevelSlider`) and a meter (`LedMeter`) for one MIDI channel or instrument group.
- `handykaraoke.switch`: `Switch`, an on/off switch with its texts and knob position.
- `handykaraoke.mixer`: `ChannelMixer`, which has sixteen `ChannelStrip`s.
  - Strip actions go to a player object that provides `set_volume`, `set_mute`, `set_solo`, `set_instrument`, `set_pan`, `set_reverb`, `set_chorus` and `channels`.
  - `handle_event(event_type, channel, data1, data2)` follows playback events given as an `EventType`. Note-on flashes the meter, controller 7 moves the fader, and pan, reverb, chorus and program changes refresh the selected channel's `ChannelDetail`.
  - `pan_label(value)` describes a pan value in Thai, as a left or right percentage or as centre.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the song database

```python
from handykaraoke.songdatabase import SearchType, SongDatabase

with SongDatabase("Data/Database.db3", bpm_reader) as db:
    print(db.count())
    song = db.search("Love")
    print(song.detail())
    print(db.search_next().detail())

    db.search_type = SearchType.BY_ARTIST
    print(db.search("A").detail())
```

`bpm_reader` is a callable. It takes the path of a MIDI file and returns its first tempo in BPM, or 0 when the file cannot be used. If a search finds nothing, `current_song` is left as it was, and that song is returned.

To rebuild the table from an NCN collection, set the collection folder and call `update`. Both `set_ncn_path` and `update` raise `ValueError` if the folder lacks `Cursor`, `Lyrics` or `Song`.

```python
db.set_ncn_path("/music/NCN")
failed = db.update(lambda position, total, name: print(position, total, name))
```

`update` scans `Song` recursively for `.mid` files and passes each one's progress to the callback. A song is skipped when its cursor or lyrics file is missing or its tempo reads as 0. `update` returns the number of songs skipped.

## Command line

The `handykaraoke` command reads a song database; the default file is `Data/Database.db3`, and `--database` chooses another.

```
handykaraoke count
handykaraoke search Love
handykaraoke search Love --by name --limit 5
handykaraoke --database other.db3 search 001 --by id
```

- `count` prints the number of songs.
- `search` prints the `detail()` line of the first matching song. With `--limit`, it also prints the songs that follow in search order. `--by` chooses `all`, `id`, `name` or `artist`. The exit status is 1 when nothing matches.

## What it does not do

- There is no graphical interface.
- It produces no audio and does not play MIDI. The mixer only records state and forwards it to a player object you supply.
- It does not parse MIDI files, apart from the command line's small first-tempo reader.
- The command line has no command to rebuild the database from an NCN collection; call `SongDatabase.update` from Python for that.
- Settings are not stored anywhere.