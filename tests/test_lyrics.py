import pytest

from handykaraoke.lyrics import LinePosition, LyricsCursor


def make_cursor():
    return LyricsCursor(len)


def test_default_border_size_from_widget_defaults():
    assert make_cursor().border_size == 3


def test_chars_width_with_zero_measure_is_border_only():
    cursor = LyricsCursor(lambda text: 0)
    b = cursor.border_size
    assert cursor.chars_width("abcd") == [b, b, b, 2 * b]


def test_chars_width_empty_text():
    assert make_cursor().chars_width("") == []


def test_chars_width_length_and_monotonic():
    cursor = make_cursor()
    widths = cursor.chars_width("hello")
    assert len(widths) == 5
    assert widths == sorted(widths)


def test_set_lyrics_loads_first_two_lines():
    cursor = make_cursor()
    cursor.set_lyrics("ab\r\ncd\r\nef", [0, 10, 20])
    assert cursor.line1 == "ab"
    assert cursor.line2 == "cd"
    assert cursor.is_line1 is True
    assert cursor.char_index == -1
    assert cursor.widths == cursor.chars_width("ab")


def test_first_tick_does_not_move_cursor():
    cursor = make_cursor()
    cursor.set_lyrics("ab\r\ncd", [0, 10, 20, 30])
    assert cursor.set_position(0) == (0, 0)
    assert cursor.cursor_index == 1


def test_tick_before_next_cursor_is_ignored():
    cursor = make_cursor()
    cursor.set_lyrics("ab\r\ncd", [0, 10, 20, 30])
    cursor.set_position(0)
    assert cursor.set_position(5) is None
    assert cursor.cursor_index == 1


def test_second_tick_moves_to_first_character():
    cursor = make_cursor()
    cursor.set_lyrics("ab\r\ncd", [0, 10, 20, 30])
    cursor.set_position(0)
    assert cursor.set_position(10) == (0, cursor.chars_width("ab")[0])
    assert cursor.line2 == "cd"


def test_last_cursor_runs_to_line_end():
    cursor = make_cursor()
    cursor.set_lyrics("abc", [0, 10])
    cursor.set_position(0)
    assert cursor.set_position(10) == (0, cursor.chars_width("abc")[-1])
    assert cursor.line2 == ""


def test_no_move_after_all_cursors_used():
    cursor = make_cursor()
    cursor.set_lyrics("abc", [0, 10])
    cursor.set_position(0)
    cursor.set_position(10)
    assert cursor.set_position(100) is None


def test_end_of_line_switches_lines():
    cursor = make_cursor()
    cursor.set_lyrics("ab\r\ncd\r\nef", list(range(0, 100, 10)))
    for tick in (0, 10, 20, 30):
        cursor.set_position(tick)
    assert cursor.at_end_line is True
    assert cursor.cursor_width == cursor.chars_width("ab")[-1]
    cursor.set_position(40)
    assert cursor.is_line1 is False
    assert cursor.line1 == "ef"


LYRICS = "ab\r\ncde\r\nf\r\ngh"
TICKS = list(range(0, 150, 10))


@pytest.mark.parametrize("steps", range(1, len(TICKS) + 1))
def test_seek_matches_stepping(steps):
    stepped = make_cursor()
    stepped.set_lyrics(LYRICS, TICKS)
    for tick in TICKS[:steps]:
        stepped.set_position(tick)

    sought = make_cursor()
    sought.set_lyrics(LYRICS, TICKS)
    sought.seek(TICKS[steps - 1] + 1)

    assert sought.line1 == stepped.line1
    assert sought.line2 == stepped.line2
    assert sought.is_line1 == stepped.is_line1
    assert sought.cursor_index == stepped.cursor_index
    assert sought.cursor_width == stepped.cursor_width


def test_seek_zero_resets():
    cursor = make_cursor()
    cursor.set_lyrics(LYRICS, TICKS)
    for tick in TICKS[:6]:
        cursor.set_position(tick)
    cursor.seek(0)
    assert cursor.line1 == "ab"
    assert cursor.line2 == "cde"
    assert cursor.cursor_index == 0
    assert cursor.cursor_width == 0


def test_seek_without_cursors_keeps_state():
    cursor = make_cursor()
    cursor.set_lyrics("ab\r\ncd", [])
    cursor.seek(50)
    assert cursor.line1 == "ab"
    assert cursor.cursor_index == 0


def test_line_x_left_and_right_margins():
    cursor = make_cursor()
    assert cursor.line_x(LinePosition.LEFT, 300, 120) == 5
    assert cursor.line_x(LinePosition.RIGHT, 300, 120) == 300 - (120 + 5)


def test_line_x_center_is_symmetric():
    cursor = make_cursor()
    x = cursor.line_x(LinePosition.CENTER, 100, 40)
    assert x == 30
    assert x + 40 + x == 100