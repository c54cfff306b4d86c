"""
Control Change decoding.

Translates raw nanoKONTROL2 MIDI messages into typed events.
"""

from typing import Sequence

from .events import (
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

# Control Change on channel 0
STATUS_CONTROL_CHANGE = 176

CC_KNOB_BASE = 16
CC_FADER_BASE = 0
CC_SOLO_BASE = 32
CC_MUTE_BASE = 48
CC_RECORD_BASE = 64
CC_CYCLE = 99
# Rewind when the value is 0, fastforward otherwise.
CC_REWIND_FASTFORWARD = 44

STRIP_COUNT = len(Strip)

SLIDERS = (
    (CC_KNOB_BASE, RotarySliderEvent),
    (CC_FADER_BASE, VerticalSliderEvent),
)

BUTTON_ROWS = (
    (CC_SOLO_BASE, ButtonRow.SOLO),
    (CC_MUTE_BASE, ButtonRow.MUTE),
    (CC_RECORD_BASE, ButtonRow.RECORD),
)

TRACK_BUTTONS = {
    58: TrackButton.LEFT,
    59: TrackButton.RIGHT,
}

MARKER_BUTTONS = {
    60: MarkerButton.SET,
    61: MarkerButton.LEFT,
    62: MarkerButton.RIGHT,
}

TRANSPORT_BUTTONS = {
    45: Transport.STOP,
    46: Transport.PLAY,
    47: Transport.RECORD,
}


def _strip_for(control: int, base: int) -> Strip | None:
    """Return the strip for a control inside an 8-wide range starting at base."""
    if base <= control < base + STRIP_COUNT:
        return Strip.from_index(control - base)
    return None


def decode(message: Sequence[int]) -> Event | None:
    """
    Decode a raw MIDI message into a controller event.

    Args:
        message: The raw message bytes, e.g. bytes, a bytearray or a list of ints.

    Returns:
        The decoded event, or None when the message is not a Control Change
        the nanoKONTROL2 sends.
    """
    if len(message) != 3:
        return None

    status, control, value = message
    if status != STATUS_CONTROL_CHANGE:
        return None

    for base, slider in SLIDERS:
        strip = _strip_for(control, base)
        if strip is not None:
            return slider(strip=strip, value=value)

    state = State.from_value(value)

    if control in TRACK_BUTTONS:
        return TrackButtonEvent(button=TRACK_BUTTONS[control], state=state)

    if control == CC_CYCLE:
        return CycleButtonEvent(state=state)

    if control in MARKER_BUTTONS:
        return MarkerButtonEvent(button=MARKER_BUTTONS[control], state=state)

    if control == CC_REWIND_FASTFORWARD:
        transport = Transport.REWIND if value == 0 else Transport.FASTFORWARD
        return TransportButtonEvent(transport=transport, state=state)

    if control in TRANSPORT_BUTTONS:
        return TransportButtonEvent(transport=TRANSPORT_BUTTONS[control], state=state)

    for base, row in BUTTON_ROWS:
        strip = _strip_for(control, base)
        if strip is not None:
            return ButtonEvent(row=row, strip=strip, state=state)

    return None


def decode_mido(msg) -> Event | None:
    """Decode a mido message into a controller event."""
    return decode(msg.bytes())
