"""Karaoke lyrics cursor: which lines are shown and how far the highlight runs."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional, Sequence

_EDGE_MARGIN = 5


class LinePosition(Enum):
    """Horizontal placement of a lyrics line."""

    CENTER = 0
    LEFT = 1
    RIGHT = 2


class LyricsCursor:
    """Tracks the two displayed lyrics lines and the highlight cursor.

    ``measure`` takes a piece of text and returns its drawn width in pixels.
    The lyrics are given as CR LF separated lines together with the list of
    cursor ticks; each tick advances the highlight by one character.
    """

    def __init__(self, measure: Callable[[str], int]):
        self._measure = measure

        self.text_border_width = 2
        self.text_border_out_width = 1
        self.cur_border_width = 2
        self.cur_border_out_width = 1

        self.line1_position = LinePosition.CENTER
        self.line2_position = LinePosition.CENTER
        self.line1_y = 220
        self.line2_y = 100

        self.lyrics: list[str] = []
        self.cursors: list[int] = []
        self.line1 = ""
        self.line2 = ""
        self.is_line1 = True
        self.lines_index = 0
        self.widths: list[int] = []
        self.char_index = 0
        self.cursor_index = 0
        self.cursor_width = 0
        self.cursor_to_end = 0
        self.at_end_line = False

    @property
    def border_size(self) -> int:
        """The widest border of the normal and highlighted text."""
        return max(
            self.text_border_width + self.text_border_out_width,
            self.cur_border_width + self.cur_border_out_width,
        )

    @property
    def current_line(self) -> str:
        return self.line1 if self.is_line1 else self.line2

    def set_lyrics(self, text: str, cursors: Sequence[int]) -> None:
        """Load new lyrics and cursor ticks, then rewind."""
        self.lyrics = text.split("\r\n")
        self.cursors = list(cursors)
        self.reset()

    def reset(self) -> None:
        """Rewind to the first line with the cursor before its first character."""
        self.lines_index = 0
        if self.lyrics:
            self.line1 = self.lyrics[0]
            self.lines_index = 1
        if len(self.lyrics) > 1:
            self.line2 = self.lyrics[1]

        self.is_line1 = True
        self.cursor_to_end = 0
        self.cursor_width = 0
        self.cursor_index = 0
        self.char_index = -1
        self.at_end_line = False
        self.widths = self.chars_width(self.line1)

    def chars_width(self, text: str) -> list[int]:
        """Cursor widths after each character of ``text``, borders included."""
        border = self.border_size
        widths = [self._measure(text[: end + 1]) + border for end in range(len(text))]
        if widths:
            widths[-1] += border
        return widths

    def _load_other_line(self, text: str) -> None:
        if self.is_line1:
            self.line2 = text
        else:
            self.line1 = text

    def _advance(self) -> Optional[tuple[int, int]]:
        """Process one cursor tick; returns the (start, end) of a cursor move."""
        if self.at_end_line:
            self.at_end_line = False
            self.char_index = 0
            self.cursor_width = 0
            self.cursor_to_end = 0
            self.is_line1 = not self.is_line1

        if not self.widths and self.lines_index < len(self.lyrics):
            self._load_other_line(self.lyrics[self.lines_index])
            self.lines_index += 1
            self.is_line1 = not self.is_line1
            self.cursor_index += 1
            self.widths = self.chars_width(self.current_line)
            return None

        if self.char_index == len(self.widths):
            self.cursor_width = self.widths[-1] if self.widths else 0
            self.at_end_line = True
            self.cursor_index += 1
            return None

        if self.char_index == 0:
            if self.lines_index < len(self.lyrics):
                self._load_other_line(self.lyrics[self.lines_index])
                self.lines_index += 1
            else:
                self._load_other_line("")
            self.widths = self.chars_width(self.current_line)

        if self.char_index >= 0 and self.widths:
            self.cursor_to_end = self.widths[self.char_index]

        self.char_index += 1

        if self.cursor_index == len(self.cursors) - 1:
            self.cursor_to_end = self.widths[-1] if self.widths else 0

        self.cursor_index += 1

        start = self.cursor_width
        self.cursor_width = self.cursor_to_end
        return start, self.cursor_to_end

    def set_position(self, tick: int) -> Optional[tuple[int, int]]:
        """Advance for playback at ``tick``.

        Returns the (start, end) widths the highlight moves between, or None
        when the cursor does not move.
        """
        if self.cursor_index >= len(self.cursors):
            return None
        if tick < self.cursors[self.cursor_index]:
            return None
        return self._advance()

    def seek(self, tick: int) -> None:
        """Jump to ``tick``, replaying every cursor that lies before it."""
        if tick == 0:
            self.reset()
            return
        if not self.cursors:
            return

        self.reset()
        rounds = next(
            (index for index, value in enumerate(self.cursors) if value >= tick),
            len(self.cursors),
        )
        for _ in range(rounds):
            self._advance()

        self.at_end_line = self.char_index == len(self.widths)
        self.widths = self.chars_width(self.current_line)
        self.cursor_width = self.cursor_to_end

    def line_x(self, position: LinePosition, area_width: int, line_width: int) -> int:
        """Left edge of a line of ``line_width`` placed in ``area_width``."""
        if position is LinePosition.LEFT:
            return _EDGE_MARGIN
        if position is LinePosition.RIGHT:
            return area_width - (line_width + _EDGE_MARGIN)
        return int((area_width - line_width) / 2)