import pytest

from handykaraoke.slider import LevelSlider


def test_defaults_from_source():
    slider = LevelSlider()
    assert (slider.minimum, slider.maximum, slider.level) == (0, 100, 0)
    assert slider.step == 5
    assert slider.tick_count == 20
    assert slider.mouse_press_enabled is False


def test_set_level_clamps_and_notifies():
    slider = LevelSlider()
    heard = []
    slider.level_changed.append(heard.append)
    slider.set_level(150)
    slider.set_level(-10)
    slider.set_level(40)
    assert heard == [100, 0, 40]
    assert slider.level == 40


def test_same_level_is_silent():
    slider = LevelSlider(level=30)
    heard = []
    slider.level_changed.append(heard.append)
    slider.set_level(30)
    assert heard == []


def test_maximum_lowers_level():
    slider = LevelSlider(level=90)
    slider.set_maximum(50)
    assert slider.maximum == 50
    assert slider.level == 50


def test_invalid_bounds_ignored():
    slider = LevelSlider()
    slider.set_maximum(0)
    slider.set_minimum(100)
    assert (slider.minimum, slider.maximum) == (0, 100)


def test_minimum_raises_level():
    slider = LevelSlider(level=5)
    slider.set_minimum(20)
    assert slider.level == 20


def test_step_and_ticks_ignore_bad_values():
    slider = LevelSlider()
    slider.set_step(0)
    slider.set_tick_count(-1)
    assert slider.step == 5
    assert slider.tick_count == 20


def test_wheel_steps_and_reports_user_change():
    slider = LevelSlider(level=50)
    user = []
    slider.user_level_changed.append(user.append)
    assert slider.wheel(120) is True
    assert slider.level == 55
    assert slider.wheel(-120) is True
    assert slider.level == 50
    assert user == [55, 50]


def test_wheel_at_limit_does_nothing():
    slider = LevelSlider(level=100)
    assert slider.wheel(1) is False
    assert slider.level == 100


def test_press_needs_enabling():
    slider = LevelSlider()
    assert slider.press(0, 200) is False
    assert slider.level == 0


def test_press_top_and_bottom():
    slider = LevelSlider(mouse_press=True, level=50)
    slider.press(0, 200)
    assert slider.level == slider.maximum
    slider.press(200, 200)
    assert slider.level == slider.minimum


def test_drag_outside_is_clamped():
    slider = LevelSlider(level=50)
    slider.drag(-40, 200)
    assert slider.level == 100
    slider.drag(400, 200)
    assert slider.level == 0


def test_drag_rejects_zero_height():
    with pytest.raises(ValueError):
        LevelSlider().drag(10, 0)


def test_handle_offset_ends():
    slider = LevelSlider()
    assert slider.handle_offset(200, 12) == 200 - 12
    slider.set_level(slider.maximum)
    assert slider.handle_offset(200, 12) == 0


def test_handle_offset_moves_up_as_level_rises():
    slider = LevelSlider()
    offsets = []
    for level in (0, 25, 50, 75, 100):
        slider.set_level(level)
        offsets.append(slider.handle_offset(300, 20))
    assert offsets == sorted(offsets, reverse=True)