"""
Configuration loading and validation.

Handles YAML config parsing with environment variable expansion.
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .events import MIDI_INPUT_PORT_PREFIX


@dataclass
class DeviceConfig:
    """Configuration for a nanoKONTROL2 input port."""
    name: str
    match: str = MIDI_INPUT_PORT_PREFIX  # Port name prefix, or "*" for any port
    enabled: bool = True


@dataclass
class Config:
    """Root configuration object."""
    devices: list[DeviceConfig] = field(default_factory=list)


def default_config() -> Config:
    """Configuration used when no config file is given."""
    return Config(devices=[DeviceConfig(name="nanoKONTROL2")])


def expand_env_vars(value: str) -> str:
    """Expand environment variables in a string.

    Supports ${VAR} syntax.
    """
    pattern = re.compile(r'\$\{([^}]+)\}')

    def replacer(match: re.Match) -> str:
        var_name = match.group(1)
        return os.environ.get(var_name, "")

    return pattern.sub(replacer, value)


def expand_env_vars_recursive(obj: Any) -> Any:
    """Recursively expand environment variables in a data structure."""
    if isinstance(obj, str):
        return expand_env_vars(obj)
    elif isinstance(obj, dict):
        return {k: expand_env_vars_recursive(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [expand_env_vars_recursive(item) for item in obj]
    return obj


def parse_device_config(data: Any, index: int) -> DeviceConfig:
    """Parse a single device entry from config data."""
    if not isinstance(data, dict):
        raise ValueError(f"Device entry {index} must be a mapping")
    if "name" not in data:
        raise ValueError(f"Device entry {index} is missing 'name'")

    return DeviceConfig(
        name=str(data["name"]),
        match=str(data.get("match", MIDI_INPUT_PORT_PREFIX)),
        enabled=bool(data.get("enabled", True)),
    )


def parse_config(raw: Any) -> Config:
    """Build a Config from already-loaded YAML data."""
    if raw is None:
        return default_config()
    if not isinstance(raw, dict):
        raise ValueError("Config root must be a mapping")

    raw = expand_env_vars_recursive(raw)

    if "devices" not in raw:
        return default_config()

    device_list = raw["devices"]
    if not isinstance(device_list, list):
        raise ValueError("'devices' must be a list")

    return Config(devices=[
        parse_device_config(dev_data, i) for i, dev_data in enumerate(device_list)
    ])


def load_config(path: Path) -> Config:
    """Load configuration from a YAML file."""
    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML: {e}") from e

    return parse_config(raw)
