"""Level slider model shared by the mixer fader and volume sliders."""

from __future__ import annotations

from typing import Callable

LevelListener = Callable[[int], None]


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


class LevelSlider:
    """A vertical level control clamped between a minimum and a maximum.

    Listeners in ``level_changed`` hear every change; those in
    ``user_level_changed`` hear only changes made by wheel, press or drag.
    """

    def __init__(
        self,
        minimum: int = 0,
        maximum: int = 100,
        level: int = 0,
        step: int = 5,
        tick_count: int = 20,
        mouse_press: bool = False,
    ):
        self.minimum = minimum
        self.maximum = maximum
        self.level = level
        self.step = step
        self.tick_count = tick_count
        self.mouse_press_enabled = mouse_press
        self.level_changed: list[LevelListener] = []
        self.user_level_changed: list[LevelListener] = []

    def _emit(self, listeners: list[LevelListener]) -> None:
        for listener in listeners:
            listener(self.level)

    def _clamp(self, level: int) -> int:
        return max(self.minimum, min(self.maximum, level))

    def set_level(self, level: int) -> None:
        """Set the level, clamped to the range."""
        if level == self.level:
            return
        self.level = self._clamp(level)
        self._emit(self.level_changed)

    def set_minimum(self, minimum: int) -> None:
        """Lower bound; ignored unless below the maximum."""
        if minimum == self.minimum or minimum >= self.maximum:
            return
        self.minimum = minimum
        if self.level < minimum:
            self.level = minimum
            self._emit(self.level_changed)

    def set_maximum(self, maximum: int) -> None:
        """Upper bound; ignored unless above the minimum."""
        if maximum == self.maximum or maximum <= self.minimum:
            return
        self.maximum = maximum
        if self.level > maximum:
            self.level = maximum
            self._emit(self.level_changed)

    def set_step(self, step: int) -> None:
        """Wheel step; values below 1 are ignored."""
        if step >= 1:
            self.step = step

    def set_tick_count(self, count: int) -> None:
        """Number of scale ticks; negative values are ignored."""
        if count >= 0:
            self.tick_count = count

    def _user_set(self, level: int) -> bool:
        level = self._clamp(level)
        if level == self.level:
            return False
        self.set_level(level)
        self._emit(self.user_level_changed)
        return True

    def wheel(self, delta: int) -> bool:
        """Step up for a positive delta, down otherwise; True if it moved."""
        return self._user_set(self.level + (self.step if delta > 0 else -self.step))

    def _level_at(self, y: int, height: int) -> int:
        if height <= 0:
            raise ValueError("height must be positive")
        span = abs(self.maximum - self.minimum)
        return span - _trunc_div(span * y, height) + self.minimum

    def press(self, y: int, height: int) -> bool:
        """Jump to the level at ``y`` if mouse press is enabled; True if it moved."""
        if not self.mouse_press_enabled:
            return False
        return self._user_set(self._level_at(y, height))

    def drag(self, y: int, height: int) -> bool:
        """Follow a drag to ``y``; True if the level moved."""
        return self._user_set(self._level_at(y, height))

    def handle_offset(self, height: int, handle_height: int) -> int:
        """Top of the handle inside a track ``height`` pixels tall."""
        span = abs(self.maximum - self.minimum)
        above_minimum = abs(self.minimum - self.level)
        return _trunc_div((height - handle_height) * (span - above_minimum), span)