"""
Command-line interface for the nanoKONTROL2 decoder.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from .config import Config, default_config, load_config
from .decoder import decode
from .devices import DeviceManager, list_midi_ports, port_matches
from .events import Event


def resolve_config(args: argparse.Namespace) -> Config | None:
    """Load the config named on the command line, or the default one."""
    if args.config is None:
        return default_config()

    config_path = Path(args.config)
    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}")
        return None

    try:
        return load_config(config_path)
    except ValueError as e:
        print(f"Error: Invalid config {config_path}: {e}")
        return None


def print_event(device_name: str, event: Event) -> None:
    print(f"[{device_name}] {event}")


def cmd_monitor(args: argparse.Namespace) -> int:
    """Print decoded events from every matching port."""
    config = resolve_config(args)
    if config is None:
        return 1

    device_manager = DeviceManager(config.devices)
    devices = device_manager.discover()

    if not devices:
        print("No nanoKONTROL2 ports found matching configuration.")
        print("Available ports:")
        for port in list_midi_ports():
            print(f"  - {port}")
        return 1

    print("-" * 60)
    print("Press Ctrl+C to stop")
    print("-" * 60)
    print()

    try:
        asyncio.run(device_manager.run(print_event))
    except KeyboardInterrupt:
        print("\n" + "-" * 60)
        print("Stopped.")

    return 0


def cmd_list_devices(args: argparse.Namespace) -> int:
    """List available MIDI devices."""
    config = resolve_config(args)
    if config is None:
        return 1

    ports = list_midi_ports()

    if not ports:
        print("No MIDI input ports found.")
        return 0

    matches = [dev.match for dev in config.devices if dev.enabled]

    print("Available MIDI input ports:")
    print()
    for i, port in enumerate(ports, 1):
        marker = " *" if any(port_matches(m, port) for m in matches) else ""
        print(f"  [{i}] {port}{marker}")
    print()
    print("* matches configuration")

    return 0


def parse_byte(text: str) -> int:
    """Parse a decimal or 0x-prefixed hex byte."""
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a byte: {text!r}")
    if not 0 <= value <= 255:
        raise argparse.ArgumentTypeError(f"byte out of range: {text!r}")
    return value


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode a single message given on the command line."""
    event = decode(bytes(args.bytes))
    if event is None:
        print("No event")
    else:
        print(event)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nano_kontrol2",
        description="Decode Korg nanoKONTROL2 MIDI messages into control events",
    )
    parser.add_argument(
        "-c", "--config",
        default=None,
        help="Path to config file (default: match 'nanoKONTROL2 SLIDER/KNOB' ports)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # monitor command (default)
    monitor_parser = subparsers.add_parser("monitor", help="Print decoded events")
    monitor_parser.set_defaults(func=cmd_monitor)

    # list-devices command
    list_dev_parser = subparsers.add_parser("list-devices", help="List MIDI devices")
    list_dev_parser.set_defaults(func=cmd_list_devices)

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode a raw message")
    decode_parser.add_argument(
        "bytes",
        nargs="*",
        type=parse_byte,
        help="Message bytes, decimal or 0x hex (e.g. 176 16 64)",
    )
    decode_parser.set_defaults(func=cmd_decode)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Default to 'monitor' if no command specified
    if args.command is None:
        args.func = cmd_monitor

    # Ensure unbuffered output
    sys.stdout.reconfigure(line_buffering=True)

    sys.exit(args.func(args))
