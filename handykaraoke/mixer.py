"""Sixteen-channel MIDI mixer: strips, selected-channel detail and playback events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Sequence

from .strips import CHANNEL_COUNT, ChannelStrip

VOICE_CHANNEL = 8
DRUM_CHANNEL = 9

VOLUME_CONTROLLER = 7
PAN_CONTROLLER = 10
REVERB_CONTROLLER = 91
CHORUS_CONTROLLER = 93

PAN_CENTER = 64
PAN_MAX = 127
DEFAULT_CHANNEL_LEVEL = 100

_DETAIL_CONTROLLERS = frozenset({PAN_CONTROLLER, REVERB_CONTROLLER, CHORUS_CONTROLLER})


class EventType(Enum):
    """Kinds of MIDI channel events the mixer receives during playback."""

    NOTE_OFF = 0x80
    NOTE_ON = 0x90
    AFTERTOUCH = 0xA0
    CONTROLLER = 0xB0
    PROGRAM_CHANGE = 0xC0
    CHANNEL_PRESSURE = 0xD0
    PITCH_BEND = 0xE0
    OTHER = 0xF0


class ChannelState(Protocol):
    instrument: int
    pan: int
    reverb: int
    chorus: int


class MixerPlayer(Protocol):
    """What the mixer needs from a player."""

    channels: Sequence[ChannelState]

    def set_volume(self, channel: int, value: int) -> None: ...
    def set_mute(self, channel: int, mute: bool) -> None: ...
    def set_solo(self, channel: int, solo: bool) -> None: ...
    def set_instrument(self, channel: int, program: int) -> None: ...
    def set_pan(self, channel: int, pan: int) -> None: ...
    def set_reverb(self, channel: int, value: int) -> None: ...
    def set_chorus(self, channel: int, value: int) -> None: ...


def pan_label(value: int) -> str:
    """Describe a pan value: left or right share in percent, or centre."""
    if value > PAN_CENTER:
        return f"ซ้าย  {100 * (value - PAN_CENTER) // 63}%"
    if value < PAN_CENTER:
        return f"ขวา  {100 * (63 - value) // 63}%"
    return "กึ่งกลาง"


@dataclass(frozen=True)
class ChannelDetail:
    """Settings of the selected channel as shown in the detail panel."""

    channel: int
    is_drum: bool
    instrument: int
    pan: int
    reverb: int
    chorus: int

    @property
    def pan_dial(self) -> int:
        return PAN_MAX - self.pan

    @property
    def pan_tooltip(self) -> str:
        return pan_label(self.pan)

    @property
    def reverb_tooltip(self) -> str:
        return f"เสียงก้อง  {self.reverb}"

    @property
    def chorus_tooltip(self) -> str:
        return f"เสียงประสาน  {self.chorus}"


def _check_channel(channel: int) -> None:
    if not 0 <= channel < CHANNEL_COUNT:
        raise ValueError(f"channel must be between 0 and {CHANNEL_COUNT - 1}: {channel}")


class ChannelMixer:
    """Routes strip actions to a player and follows the player's events."""

    def __init__(self, player: Optional[MixerPlayer] = None):
        self.player = player
        self.strips = [ChannelStrip(channel) for channel in range(CHANNEL_COUNT)]
        for strip in self.strips:
            strip.level_changed.append(self.set_volume)
            strip.mute_changed.append(self.set_mute)
            strip.solo_changed.append(self.set_solo)
        self.selected_channel = 0
        self.voice_muted = False
        self.detail: Optional[ChannelDetail] = None

    def set_player(self, player: MixerPlayer) -> None:
        self.player = player

    def peak(self, channel: int, value: int) -> None:
        self.strips[channel].peak(value)

    def show_detail(self, channel: int) -> Optional[ChannelDetail]:
        """Read the channel's settings from the player into ``detail``."""
        _check_channel(channel)
        if self.player is None:
            self.detail = None
            return None
        state = self.player.channels[channel]
        self.detail = ChannelDetail(
            channel=channel,
            is_drum=channel == DRUM_CHANNEL,
            instrument=state.instrument,
            pan=state.pan,
            reverb=state.reverb,
            chorus=state.chorus,
        )
        return self.detail

    def select_channel(self, channel: int) -> Optional[ChannelDetail]:
        """Make ``channel`` the one shown in the detail panel."""
        _check_channel(channel)
        self.selected_channel = channel
        return self.show_detail(channel)

    def on_loaded(self) -> None:
        """A new song was loaded: faders back to default, detail refreshed."""
        for strip in self.strips:
            strip.set_level(DEFAULT_CHANNEL_LEVEL)
        self.show_detail(self.selected_channel)

    def handle_event(self, event_type: EventType, channel: int, data1: int, data2: int) -> None:
        """Follow one event played by the player."""
        if event_type is EventType.NOTE_ON:
            self.strips[channel].peak(data2)
        elif event_type is EventType.CONTROLLER:
            if data1 == VOLUME_CONTROLLER:
                self.strips[channel].set_level(data2)
            if channel == self.selected_channel and data1 in _DETAIL_CONTROLLERS:
                self.show_detail(channel)
        elif event_type is EventType.PROGRAM_CHANGE:
            if channel == self.selected_channel:
                self.show_detail(channel)

    def set_volume(self, channel: int, value: int) -> None:
        if self.player is not None:
            self.player.set_volume(channel, value)

    def set_mute(self, channel: int, mute: bool) -> None:
        if self.player is None:
            return
        self.player.set_mute(channel, mute)
        if channel == VOICE_CHANNEL:
            self.voice_muted = mute

    def set_solo(self, channel: int, solo: bool) -> None:
        if self.player is not None:
            self.player.set_solo(channel, solo)

    def set_voice_muted(self, muted: bool) -> None:
        """Mute or unmute the melody voice channel and its strip."""
        if self.player is None:
            return
        self.voice_muted = muted
        self.player.set_mute(VOICE_CHANNEL, muted)
        self.strips[VOICE_CHANNEL].set_mute(muted)

    def set_instrument(self, program: int) -> None:
        if self.player is None:
            return
        self.player.set_instrument(self.selected_channel, program)
        self.show_detail(self.selected_channel)

    def set_pan(self, pan: int) -> None:
        if self.player is None:
            return
        self.player.set_pan(self.selected_channel, pan)
        self.show_detail(self.selected_channel)

    def set_reverb(self, value: int) -> None:
        if self.player is None:
            return
        self.player.set_reverb(self.selected_channel, value)
        self.show_detail(self.selected_channel)

    def set_chorus(self, value: int) -> None:
        if self.player is None:
            return
        self.player.set_chorus(self.selected_channel, value)
        self.show_detail(self.selected_channel)