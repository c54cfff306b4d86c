"""
nanoKONTROL2 control event types.

Provides the enumerations for the controller's physical layout and typed
dataclasses for every event the controller can emit.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum

# Name prefix of the ports on which the nanoKONTROL2 emits its MIDI input.
MIDI_INPUT_PORT_PREFIX = "nanoKONTROL2 SLIDER/KNOB"


class Strip(IntEnum):
    """One of the 8 vertical control strips, A through H."""
    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    @classmethod
    def from_index(cls, index: int) -> "Strip | None":
        """Return the strip for 0..7 (0 == A), or None for any other value."""
        if 0 <= index < len(_STRIPS):
            return _STRIPS[index]
        return None


_STRIPS = tuple(Strip)


class State(Enum):
    """Whether a button was pressed or released."""
    ON = "on"
    OFF = "off"

    @classmethod
    def from_value(cls, value: int) -> "State":
        return cls.OFF if value == 0 else cls.ON


class ButtonRow(Enum):
    """The three rows of per-strip buttons."""
    SOLO = "solo"
    MUTE = "mute"
    RECORD = "record"


class TrackButton(Enum):
    """The two track buttons on the upper left."""
    LEFT = "left"
    RIGHT = "right"


class MarkerButton(Enum):
    """The three marker buttons."""
    SET = "set"
    LEFT = "left"
    RIGHT = "right"


class Transport(Enum):
    """The five transport buttons."""
    REWIND = "rewind"
    FASTFORWARD = "fastforward"
    STOP = "stop"
    PLAY = "play"
    RECORD = "record"


@dataclass(frozen=True)
class Event:
    """Base class for controller events."""


@dataclass(frozen=True)
class RotarySliderEvent(Event):
    """A knob was turned. Values range from 0 to 127."""
    strip: Strip
    value: int

    def __str__(self) -> str:
        return f"RotarySlider strip={self.strip.name} val={self.value}"


@dataclass(frozen=True)
class VerticalSliderEvent(Event):
    """A fader was moved. Values range from 0 to 127."""
    strip: Strip
    value: int

    def __str__(self) -> str:
        return f"VerticalSlider strip={self.strip.name} val={self.value}"


@dataclass(frozen=True)
class ButtonEvent(Event):
    """A solo, mute or record button on one of the strips."""
    row: ButtonRow
    strip: Strip
    state: State

    def __str__(self) -> str:
        return f"Button row={self.row.value} strip={self.strip.name} state={self.state.value}"


@dataclass(frozen=True)
class TrackButtonEvent(Event):
    """One of the two track buttons."""
    button: TrackButton
    state: State

    def __str__(self) -> str:
        return f"TrackButton button={self.button.value} state={self.state.value}"


@dataclass(frozen=True)
class CycleButtonEvent(Event):
    """The single cycle button."""
    state: State

    def __str__(self) -> str:
        return f"CycleButton state={self.state.value}"


@dataclass(frozen=True)
class MarkerButtonEvent(Event):
    """One of the three marker buttons."""
    button: MarkerButton
    state: State

    def __str__(self) -> str:
        return f"MarkerButton button={self.button.value} state={self.state.value}"


@dataclass(frozen=True)
class TransportButtonEvent(Event):
    """Media playback-style control buttons."""
    transport: Transport
    state: State

    def __str__(self) -> str:
        return f"TransportButton transport={self.transport.value} state={self.state.value}"
