"""Mixer channel strip: mute, solo, level fader and level meter."""

from __future__ import annotations

from typing import Callable, Hashable

from .ledvu import LedMeter
from .slider import LevelSlider

StripListener = Callable[[Hashable, object], None]

CHANNEL_COUNT = 16

DEFAULT_STYLE = "font: bold 10pt; border-radius: 2px;border: 1px solid rgb(158, 158, 158);"
MUTE_STYLE = (
    "color: rgb(255, 255, 255);font: bold 10pt;border-radius: 2px;"
    "border: 1px solid rgb(158, 158, 158);background-color: rgb(229, 57, 53);"
)
SOLO_STYLE = (
    "color: rgb(255, 255, 255);font: bold 10pt;border-radius: 2px;"
    "border: 1px solid rgb(158, 158, 158);background-color: rgb(46, 184, 114);"
)


class ChannelStrip:
    """One strip of the mixer, identified by ``key``.

    ``key`` is a MIDI channel number or an instrument group; it is passed to
    every listener in ``mute_changed``, ``solo_changed`` and ``level_changed``
    together with the new value.
    """

    def __init__(self, key: Hashable = 0, slider_maximum: int = 127, level: int = 100):
        self.key = key
        self.mute = False
        self.solo = False
        self.name = ""
        self.tooltip = ""
        self.slider = LevelSlider(maximum=slider_maximum)
        self.slider.set_level(level)
        self.meter = LedMeter(maximum=127)
        self.mute_changed: list[StripListener] = []
        self.solo_changed: list[StripListener] = []
        self.level_changed: list[StripListener] = []

    @property
    def label(self) -> str:
        """One-based channel label for numeric keys."""
        return str(self.key + 1) if isinstance(self.key, int) else str(self.key)

    @property
    def level(self) -> int:
        return self.slider.level

    @property
    def level_tooltip(self) -> str:
        return str(self.slider.level)

    @property
    def mute_style(self) -> str:
        return MUTE_STYLE if self.mute else DEFAULT_STYLE

    @property
    def solo_style(self) -> str:
        return SOLO_STYLE if self.solo else DEFAULT_STYLE

    def _emit(self, listeners: list[StripListener], value) -> None:
        for listener in listeners:
            listener(self.key, value)

    def set_channel(self, channel: int) -> None:
        """Use MIDI channel ``channel`` (0-15); other values are ignored."""
        if 0 <= channel < CHANNEL_COUNT:
            self.key = channel

    def set_mute(self, mute: bool) -> None:
        """Show the mute state without notifying listeners."""
        self.mute = mute

    def set_solo(self, solo: bool) -> None:
        """Show the solo state without notifying listeners."""
        self.solo = solo

    def toggle_mute(self) -> bool:
        """Flip mute as the user would; returns the new state."""
        self.mute = not self.mute
        self._emit(self.mute_changed, self.mute)
        return self.mute

    def toggle_solo(self) -> bool:
        """Flip solo as the user would; returns the new state."""
        self.solo = not self.solo
        self._emit(self.solo_changed, self.solo)
        return self.solo

    def set_level(self, level: int) -> None:
        """Move the fader from playback without notifying listeners."""
        self.slider.set_level(level)

    def user_level(self, level: int) -> int:
        """Move the fader as the user would; returns the resulting level."""
        self.slider.set_level(level)
        self._emit(self.level_changed, self.slider.level)
        return self.slider.level

    def peak(self, value: int) -> None:
        """Flash the meter if ``value`` is above what it currently shows."""
        if value <= self.meter.level:
            return
        self.meter.peak(value)