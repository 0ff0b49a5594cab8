"""Beat and bar tracking for the rhythm indicator."""

from __future__ import annotations

from typing import Mapping

MAX_BEATS = 5
_DEFAULT_BEATS_IN_BAR = 4


class RhythmTracker:
    """Follows playback beat by beat and tells which beat lamp is lit.

    ``beat_in_bar`` maps a number of beats per bar to how many bars use it;
    the entries are taken in ascending order of beats per bar.
    """

    def __init__(self) -> None:
        self.beat_count = 0
        self.current_beat = -1
        self.bar_count = 0
        self.bar_index = 0
        self.bpm = 0

        self._beat_in_bar: dict[int, int] = {}
        self._last_beat = 0
        self._time_sign_index = 0
        self._beat_bar_index = 0
        self._beats_per_bar = _DEFAULT_BEATS_IN_BAR
        self._change_beats_per_bar = False

        self._lit = [False] * MAX_BEATS
        self.visible_beats = _DEFAULT_BEATS_IN_BAR
        self.position_text = ""
        self.reset()

    @property
    def current_bar(self) -> int:
        return self.bar_index + 1

    @property
    def beats_per_bar(self) -> int:
        return self._beats_per_bar

    @property
    def lit_beats(self) -> tuple[int, ...]:
        """Indices of the beat lamps that are on."""
        return tuple(index for index, on in enumerate(self._lit) if on)

    def _signatures(self) -> list[tuple[int, int]]:
        return sorted(self._beat_in_bar.items())

    def _display_beats(self, count: int) -> None:
        self.visible_beats = min(count, MAX_BEATS)
        self._lit = [False] * MAX_BEATS

    def _update_text(self) -> None:
        self.position_text = f"{self.bar_index + 1}:{self.bar_count + 1}"

    def reset(self) -> None:
        """Rewind to before the first beat."""
        self._change_beats_per_bar = False
        self.current_beat = -1
        self.bar_index = 0
        self._beat_bar_index = 0
        self._time_sign_index = 0

        self._beats_per_bar = _DEFAULT_BEATS_IN_BAR
        self._last_beat = 0
        signatures = self._signatures()
        if signatures:
            beats, bars = signatures[0]
            self._beats_per_bar = beats
            self._last_beat = bars * beats

        self.bar_count = sum(self._beat_in_bar.values())
        self.position_text = f"0:{self.bar_count + 1}"
        self._display_beats(self._beats_per_bar)

    def set_beat(self, beat_in_bar: Mapping[int, int], beat_count: int) -> None:
        """Load the bar layout of a song and its total number of beats."""
        for beats in beat_in_bar:
            if not 1 <= beats <= MAX_BEATS:
                raise ValueError(
                    f"beats per bar must be between 1 and {MAX_BEATS}: {beats}"
                )
        self._beat_in_bar = dict(beat_in_bar)
        self.beat_count = beat_count
        self.reset()

    def _switch_signature(self) -> bool:
        signatures = self._signatures()
        if self._change_beats_per_bar and self._time_sign_index < len(signatures):
            beats, bars = signatures[self._time_sign_index]
            self._beats_per_bar = beats
            self._last_beat += bars * beats
            self._change_beats_per_bar = False
            return True
        return False

    def _finish_beat(self) -> None:
        self._beat_bar_index += 1
        if self._beat_bar_index == self._beats_per_bar:
            self._beat_bar_index = 0
            self.bar_index += 1
        if self.current_beat == self._last_beat - 1:
            self._time_sign_index += 1
            self._change_beats_per_bar = True

    def set_current_beat(self, beat: int) -> None:
        """Advance playback to ``beat`` and light its lamp."""
        if beat == self.current_beat or beat > self.beat_count:
            return

        self.current_beat = beat
        if self._beat_bar_index == 0:
            if self._switch_signature():
                self._display_beats(self._beats_per_bar)
            self._update_text()
            self._lit[self._beats_per_bar - 1] = False
            self._lit[0] = True
        else:
            self._lit[self._beat_bar_index - 1] = False
            self._lit[self._beat_bar_index] = True
        self._finish_beat()

    def seek(self, beat: int) -> None:
        """Jump to ``beat``, replaying the bar layout up to it."""
        if beat == self.current_beat or beat < 0 or beat > self.beat_count:
            return

        self.reset()
        for index in range(beat):
            self.current_beat = index
            if self._beat_bar_index == 0:
                self._switch_signature()
            self._finish_beat()

        self._display_beats(self._beats_per_bar)
        self._lit[self._beat_bar_index] = True
        self._update_text()