import pytest

from handykaraoke.rhythm import MAX_BEATS, RhythmTracker


def play(tracker, beats):
    for beat in range(beats):
        tracker.set_current_beat(beat)


def test_fresh_tracker_shows_four_unlit_beats():
    tracker = RhythmTracker()
    assert tracker.visible_beats == 4
    assert tracker.lit_beats == ()
    assert tracker.current_beat == -1


def test_set_beat_uses_first_signature():
    tracker = RhythmTracker()
    tracker.set_beat({3: 2, 4: 1}, 10)
    assert tracker.beats_per_bar == 3
    assert tracker.visible_beats == 3
    assert tracker.bar_count == 3
    assert tracker.position_text == f"0:{tracker.bar_count + 1}"


def test_first_beat_lights_first_lamp():
    tracker = RhythmTracker()
    tracker.set_beat({4: 2}, 8)
    tracker.set_current_beat(0)
    assert tracker.lit_beats == (0,)
    assert tracker.current_bar == 1
    assert tracker.position_text.startswith("1:")


def test_lamps_cycle_through_bar():
    tracker = RhythmTracker()
    tracker.set_beat({4: 2}, 8)
    seen = []
    for beat in range(8):
        tracker.set_current_beat(beat)
        seen.append(tracker.lit_beats)
    assert seen == [(0,), (1,), (2,), (3,)] * 2


def test_bar_advances_after_full_bar():
    tracker = RhythmTracker()
    tracker.set_beat({4: 2}, 8)
    play(tracker, 4)
    assert tracker.current_bar == 2


def test_signature_switches_after_its_bars():
    tracker = RhythmTracker()
    tracker.set_beat({3: 1, 4: 1}, 7)
    play(tracker, 3)
    assert tracker.visible_beats == 3
    tracker.set_current_beat(3)
    assert tracker.beats_per_bar == 4
    assert tracker.visible_beats == 4
    assert tracker.lit_beats == (0,)


def test_repeated_or_out_of_range_beat_is_ignored():
    tracker = RhythmTracker()
    tracker.set_beat({4: 1}, 4)
    tracker.set_current_beat(0)
    tracker.set_current_beat(0)
    assert tracker.lit_beats == (0,)
    tracker.set_current_beat(5)
    assert tracker.current_beat == 0


@pytest.mark.parametrize("target", [1, 3, 4, 5, 6])
def test_seek_matches_playing_through(target):
    layout = {3: 1, 4: 1}
    played = RhythmTracker()
    played.set_beat(layout, 7)
    play(played, target)

    sought = RhythmTracker()
    sought.set_beat(layout, 7)
    sought.seek(target)

    assert sought.current_beat == played.current_beat
    assert sought.current_bar == played.current_bar
    assert sought.beats_per_bar == played.beats_per_bar


def test_seek_out_of_range_keeps_state():
    tracker = RhythmTracker()
    tracker.set_beat({4: 1}, 4)
    play(tracker, 2)
    tracker.seek(-1)
    tracker.seek(10)
    assert tracker.current_beat == 1


def test_reset_rewinds():
    tracker = RhythmTracker()
    tracker.set_beat({4: 2}, 8)
    play(tracker, 6)
    tracker.reset()
    assert tracker.current_beat == -1
    assert tracker.current_bar == 1
    assert tracker.lit_beats == ()


@pytest.mark.parametrize("beats", [0, MAX_BEATS + 1])
def test_unsupported_beats_per_bar_rejected(beats):
    tracker = RhythmTracker()
    with pytest.raises(ValueError):
        tracker.set_beat({beats: 1}, 4)