"""LED level meter model: level, peak hold and LED layout."""

from __future__ import annotations

from enum import Enum
from typing import Callable

LevelListener = Callable[[int], None]

PEAK_UP_MS = 80
PEAK_DOWN_MS = 2500
MIN_PEAK_HOLD_MS = 50
MAX_PEAK_HOLD_MS = 10000
LED_PITCH = 3

_PERCENT_MID = 15
_PERCENT_HIGH = 15


def _div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


class LedZone(Enum):
    """Colour band of an LED: low (bottom), middle, high (top)."""

    LOW = 1
    MID = 2
    HIGH = 3


class LedMeter:
    """A vertical LED bar showing a level with an optional peak-hold LED.

    LEDs are indexed from the top (0) to the bottom; lit LEDs grow upward
    from the bottom as the level rises.
    """

    def __init__(self, minimum: int = 0, maximum: int = 100):
        self.minimum = minimum
        self.maximum = maximum
        self.level = 0
        self.peak_level = 0
        self.peak_hold_ms = 500
        self.show_peak_hold = True
        self.level_changed: list[LevelListener] = []

        self.background_color = "#000000"
        self.on_colors = {
            LedZone.LOW: "#00ff00",
            LedZone.MID: "#ffff00",
            LedZone.HIGH: "#ff0000",
        }
        self.off_colors = {
            LedZone.LOW: "#003300",
            LedZone.MID: "#333300",
            LedZone.HIGH: "#330000",
        }

        self.led_count = 0
        self.low_count = 0
        self.mid_count = 0
        self.high_count = 0
        self.rows: list[int] = [0]

    @property
    def span(self) -> int:
        return abs(self.maximum) + abs(self.minimum)

    def set_level(self, value: int) -> None:
        """Set the level, clamped to the range, updating the peak hold."""
        if value == self.level:
            return
        self.level = max(self.minimum, min(self.maximum, value))
        if self.show_peak_hold and self.level > self.peak_level:
            self.peak_level = self.level
        for listener in self.level_changed:
            listener(self.level)

    def set_maximum(self, value: int) -> None:
        self.maximum = value

    def set_minimum(self, value: int) -> None:
        self.minimum = value

    def set_peak_hold_ms(self, ms: int) -> None:
        """Peak hold time, kept between 50 ms and 10 s."""
        self.peak_hold_ms = max(MIN_PEAK_HOLD_MS, min(MAX_PEAK_HOLD_MS, ms))

    def set_show_peak_hold(self, show: bool) -> None:
        self.show_peak_hold = show
        if not show:
            self.peak_level = 0

    def peak(self, value: int) -> tuple[tuple[int, int, int], ...]:
        """Flash the bar up to ``value`` and let it fall back to zero.

        Returns the animation segments as (start, end, duration_ms); the level
        passes through ``value`` and ends at zero.
        """
        if value == self.level:
            return ()
        start = self.level
        self.set_level(value)
        top = self.level
        segments = [(start, top, PEAK_UP_MS)]
        if top != 0:
            segments.append((top, 0, PEAK_DOWN_MS))
            self.set_level(0)
        return tuple(segments)

    def peak_hold_expired(self) -> bool:
        """The hold time ran out: drop the hold to the level.

        Returns True if the hold LED is still shown and a new hold starts.
        """
        self.peak_level = self.level
        return self.peak_level > 0

    def layout(self, height: int) -> list[int]:
        """Lay out LEDs for a bar ``height`` pixels tall; returns row boundaries."""
        self.led_count = height // LED_PITCH
        self.high_count = self.led_count * _PERCENT_HIGH // 100
        self.mid_count = self.led_count * _PERCENT_MID // 100
        self.low_count = self.led_count - (self.mid_count + self.high_count)
        self.rows = [0] + [LED_PITCH * (index + 1) for index in range(self.led_count)]
        return list(self.rows)

    def _leds_for(self, value: int) -> int:
        if self.span == 0:
            return 0
        return _div(self.led_count * value, self.span)

    def lit_leds(self) -> int:
        """Number of LEDs lit for the current level."""
        return self._leds_for(self.level)

    @property
    def peak_led(self) -> int | None:
        """Index from the top of the peak-hold LED, or None when not shown."""
        if not self.show_peak_hold or self.peak_level <= 0:
            return None
        return self.led_count - self._leds_for(self.peak_level)

    def zone(self, index: int) -> LedZone:
        """Colour band of the LED at ``index`` counted from the top."""
        if index > self.mid_count + self.high_count:
            return LedZone.LOW
        if index > self.high_count:
            return LedZone.MID
        return LedZone.HIGH