"""
MIDI device management with asyncio.

Handles discovery, connection, and event streaming from nanoKONTROL2 ports.
"""

import asyncio
from dataclasses import dataclass
from typing import AsyncIterator, Callable

import mido

from .config import DeviceConfig
from .decoder import decode_mido
from .events import Event


@dataclass
class MidiDevice:
    """Represents a connected nanoKONTROL2 port."""
    name: str  # Friendly name from config
    port_name: str  # Actual MIDI port name
    port: mido.ports.BaseInput | None = None

    def __str__(self) -> str:
        return f"{self.name} ({self.port_name})"


def list_midi_ports() -> list[str]:
    """List all available MIDI input ports."""
    return mido.get_input_names()


def port_matches(match: str, port_name: str) -> bool:
    """Check a port name against a config match ("*" or a name prefix)."""
    return match == "*" or port_name.startswith(match)


def find_matching_ports(device_configs: list[DeviceConfig]) -> list[MidiDevice]:
    """
    Find MIDI ports matching the device configurations.

    Args:
        device_configs: List of device configurations to match.

    Returns:
        List of MidiDevice objects for matched ports.
    """
    available_ports = list_midi_ports()
    matched_devices: list[MidiDevice] = []

    for config in device_configs:
        if not config.enabled:
            continue

        for port_name in available_ports:
            if port_matches(config.match, port_name):
                matched_devices.append(MidiDevice(name=config.name, port_name=port_name))

    return matched_devices


def open_event_port(
    device: MidiDevice,
    queue: "asyncio.Queue[Event]",
) -> mido.ports.BaseInput:
    """
    Open a device in callback mode, feeding decoded events into a queue.

    mido calls back from its own thread, so events are handed to the
    running loop with call_soon_threadsafe(). Messages that do not decode
    to an event are dropped.
    """
    loop = asyncio.get_running_loop()

    def on_message(raw_msg):
        event = decode_mido(raw_msg)
        if event is not None:
            loop.call_soon_threadsafe(queue.put_nowait, event)

    port = mido.open_input(device.port_name, callback=on_message)
    device.port = port
    return port


def close_event_port(device: MidiDevice) -> None:
    if device.port is not None:
        device.port.close()
        device.port = None


async def read_events_async(
    device: MidiDevice,
    callback: Callable[[str, Event], None],
) -> None:
    """
    Read and decode events from a device until cancelled.

    Args:
        device: The MIDI device to read from.
        callback: Function to call with (device_name, event) for each event.
    """
    queue: asyncio.Queue[Event] = asyncio.Queue()

    try:
        open_event_port(device, queue)
    except Exception as e:
        print(f"Device {device} unavailable: {e}")
        return

    try:
        while True:
            event = await queue.get()
            callback(device.name, event)
    finally:
        close_event_port(device)


async def stream_events(
    device: MidiDevice,
) -> AsyncIterator[tuple[str, Event]]:
    """
    Stream decoded events from a device as an async iterator.

    The port stays open until the iterator is closed.

    Args:
        device: The MIDI device to read from.

    Yields:
        Tuples of (device_name, event).
    """
    queue: asyncio.Queue[Event] = asyncio.Queue()
    open_event_port(device, queue)

    try:
        while True:
            event = await queue.get()
            yield (device.name, event)
    finally:
        close_event_port(device)


class DeviceManager:
    """
    Listens on every nanoKONTROL2 port matched by the configuration.

    One listener task runs per port; stop() cancels them, which closes
    their ports.
    """

    def __init__(self, device_configs: list[DeviceConfig]):
        self.device_configs = device_configs
        self.devices: list[MidiDevice] = []
        self._listeners: dict[str, asyncio.Task] = {}

    def discover(self) -> list[MidiDevice]:
        """Discover and return matching devices."""
        self.devices = find_matching_ports(self.device_configs)
        return self.devices

    async def run(self, on_event: Callable[[str, Event], None]) -> None:
        """
        Listen on all discovered devices until stopped.

        Args:
            on_event: Callback for each decoded event (device_name, event).
        """
        if not self.devices:
            self.discover()

        if not self.devices:
            print("No nanoKONTROL2 ports found matching configuration.")
            return

        for device in self.devices:
            self._listeners[device.port_name] = asyncio.create_task(
                read_events_async(device, on_event),
                name=f"nanokontrol2-{device.port_name}",
            )
            print(f"Listening on: {device}")

        try:
            await asyncio.gather(*self._listeners.values(), return_exceptions=True)
        finally:
            await self.stop()

    async def stop(self) -> None:
        """Cancel all listeners and wait for their ports to close."""
        listeners = list(self._listeners.values())
        self._listeners.clear()
        for task in listeners:
            task.cancel()
        if listeners:
            await asyncio.gather(*listeners, return_exceptions=True)
