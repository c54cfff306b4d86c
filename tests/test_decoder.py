"""
Control Change decoder tests
"""

import mido
import pytest

from nano_kontrol2.decoder import decode, decode_mido
from nano_kontrol2.events import (
    ButtonEvent,
    ButtonRow,
    CycleButtonEvent,
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

MAPPED_CONTROLS = (
    set(range(0, 8))
    | set(range(16, 24))
    | set(range(32, 40))
    | set(range(44, 48))
    | set(range(48, 56))
    | set(range(58, 63))
    | set(range(64, 72))
    | {99}
)


def test_rotary_sliders():
    """Controls 16..23 are the knobs of strips A..H"""
    for i in range(8):
        for value in range(128):
            assert decode(bytes([176, 16 + i, value])) == RotarySliderEvent(Strip(i), value)


def test_vertical_sliders():
    """Controls 0..7 are the faders of strips A..H"""
    for i in range(8):
        for value in range(128):
            assert decode(bytes([176, i, value])) == VerticalSliderEvent(Strip(i), value)


def test_cycle_button():
    """Control 99 is the cycle button"""
    assert decode(bytes([176, 99, 0])) == CycleButtonEvent(State.OFF)
    for value in range(1, 128):
        assert decode(bytes([176, 99, value])) == CycleButtonEvent(State.ON)


@pytest.mark.parametrize("control,button", [
    (58, TrackButton.LEFT),
    (59, TrackButton.RIGHT),
])
def test_track_buttons(control, button):
    assert decode(bytes([176, control, 127])) == TrackButtonEvent(button, State.ON)
    assert decode(bytes([176, control, 0])) == TrackButtonEvent(button, State.OFF)


@pytest.mark.parametrize("control,button", [
    (60, MarkerButton.SET),
    (61, MarkerButton.LEFT),
    (62, MarkerButton.RIGHT),
])
def test_marker_buttons(control, button):
    assert decode(bytes([176, control, 127])) == MarkerButtonEvent(button, State.ON)
    assert decode(bytes([176, control, 0])) == MarkerButtonEvent(button, State.OFF)


def test_rewind_fastforward_share_a_control():
    """Control 44 reports rewind on 0 and fastforward otherwise"""
    assert decode(bytes([176, 44, 0])) == TransportButtonEvent(Transport.REWIND, State.OFF)
    assert decode(bytes([176, 44, 1])) == TransportButtonEvent(Transport.FASTFORWARD, State.ON)
    assert decode(bytes([176, 44, 127])) == TransportButtonEvent(Transport.FASTFORWARD, State.ON)


@pytest.mark.parametrize("control,transport", [
    (45, Transport.STOP),
    (46, Transport.PLAY),
    (47, Transport.RECORD),
])
def test_transport_buttons(control, transport):
    assert decode(bytes([176, control, 127])) == TransportButtonEvent(transport, State.ON)
    assert decode(bytes([176, control, 0])) == TransportButtonEvent(transport, State.OFF)


@pytest.mark.parametrize("base,row", [
    (32, ButtonRow.SOLO),
    (48, ButtonRow.MUTE),
    (64, ButtonRow.RECORD),
])
def test_button_rows(base, row):
    """Each row is an 8-wide range of controls, one per strip"""
    for i in range(8):
        assert decode(bytes([176, base + i, 0])) == ButtonEvent(row, Strip(i), State.OFF)
        assert decode(bytes([176, base + i, 127])) == ButtonEvent(row, Strip(i), State.ON)
        assert decode(bytes([176, base + i, 1])) == ButtonEvent(row, Strip(i), State.ON)


@pytest.mark.parametrize("message", [
    b"",
    b"\xb0",
    b"\xb0\x10",
    b"\xb0\x10\x40\x00",
    bytes(range(64)),
])
def test_wrong_length_yields_nothing(message):
    assert decode(message) is None


def test_wrong_status_yields_nothing():
    assert decode(bytes([177, 16, 64])) is None
    assert decode(bytes([144, 16, 64])) is None
    assert decode(bytes([128, 0, 0])) is None


def test_unmapped_controls_yield_nothing():
    """Every control outside the layout is ignored"""
    assert decode(bytes([176, 100, 64])) is None
    for control in range(128):
        if control in MAPPED_CONTROLS:
            assert decode(bytes([176, control, 64])) is not None
        else:
            assert decode(bytes([176, control, 64])) is None


@pytest.mark.parametrize("message", [
    bytes([176, 19, 42]),
    bytearray([176, 19, 42]),
    [176, 19, 42],
    (176, 19, 42),
])
def test_accepts_any_byte_sequence(message):
    assert decode(message) == RotarySliderEvent(Strip.D, 42)


def test_decode_is_deterministic():
    message = bytes([176, 44, 0])
    results = [decode(message) for _ in range(10)]
    assert all(result == results[0] for result in results)


def test_decode_mido_control_change():
    msg = mido.Message("control_change", channel=0, control=2, value=100)
    assert decode_mido(msg) == VerticalSliderEvent(Strip.C, 100)


def test_decode_mido_other_channel_is_ignored():
    msg = mido.Message("control_change", channel=1, control=2, value=100)
    assert decode_mido(msg) is None


def test_decode_mido_non_control_change_is_ignored():
    assert decode_mido(mido.Message("note_on", note=60, velocity=100)) is None
    assert decode_mido(mido.Message("program_change", program=5)) is None
    assert decode_mido(mido.Message("sysex", data=[1, 2, 3])) is None
