"""
Typed events for the Korg nanoKONTROL2.

Decodes the controller's raw MIDI Control Change messages into events.
"""

from .decoder import decode, decode_mido
from .events import (
    MIDI_INPUT_PORT_PREFIX,
    ButtonEvent,
    ButtonRow,
    CycleButtonEvent,
    Event,
    MarkerButton,
    MarkerButtonEvent,
    RotarySliderEvent,
    State,
    Strip,
    TrackButton,
    TrackButtonEvent,
    Transport,
    TransportButtonEvent,
    VerticalSliderEvent,
)

__all__ = [
    "MIDI_INPUT_PORT_PREFIX",
    "ButtonEvent",
    "ButtonRow",
    "CycleButtonEvent",
    "Event",
    "MarkerButton",
    "MarkerButtonEvent",
    "RotarySliderEvent",
    "State",
    "Strip",
    "TrackButton",
    "TrackButtonEvent",
    "Transport",
    "TransportButtonEvent",
    "VerticalSliderEvent",
    "decode",
    "decode_mido",
]
