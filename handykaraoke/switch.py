"""On/off switch model with a sliding knob."""

from __future__ import annotations

from typing import Callable

SwitchListener = Callable[[bool], None]

KNOB_MARGIN = 2


class Switch:
    """A two-state switch.

    ``switch_changed`` listeners hear every change; ``user_switch_changed``
    listeners hear only changes made through :meth:`toggle`.
    """

    def __init__(self, on_text: str = "ON", off_text: str = "OFF"):
        self.is_on = False
        self.on_text = on_text
        self.off_text = off_text
        self.switch_changed: list[SwitchListener] = []
        self.user_switch_changed: list[SwitchListener] = []

    @property
    def text(self) -> str:
        return self.on_text if self.is_on else self.off_text

    def _set(self, state: bool) -> None:
        if self.is_on == state:
            return
        self.is_on = state
        for listener in self.switch_changed:
            listener(state)

    def on(self) -> None:
        self._set(True)

    def off(self) -> None:
        self._set(False)

    def toggle(self) -> bool:
        """Flip the switch as a click would; returns the new state."""
        self._set(not self.is_on)
        for listener in self.user_switch_changed:
            listener(self.is_on)
        return self.is_on

    def knob_offset(self, width: int, height: int) -> int:
        """Left edge the knob rests at in a switch of the given size."""
        if self.is_on:
            return width - height + KNOB_MARGIN
        return KNOB_MARGIN