"""
scorelink Configuration Management

Loads settings from config/default.json with environment variable overrides.
"""

import os
import json
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_SOCKET_URL = "https://livestats.gurleen.dev"


@dataclass
class SerialConfig:
    port: Optional[str] = None
    baudrate: int = 115200
    timeout: float = 10.0


@dataclass
class SocketConfig:
    url: str = DEFAULT_SOCKET_URL
    namespace: str = "/"
    event: str = "do_update"
    connect_timeout: float = 5.0
    enabled: bool = True


@dataclass
class SimulatorConfig:
    enabled: bool = False
    period_seconds: int = 720  # 12 minute quarters
    shot_clock_seconds: int = 24
    score_chance: float = 0.08
    foul_chance: float = 0.03
    speed_multiplier: float = 1.0


@dataclass
class Config:
    serial: SerialConfig = field(default_factory=SerialConfig)
    socket: SocketConfig = field(default_factory=SocketConfig)
    simulator: SimulatorConfig = field(default_factory=SimulatorConfig)
    skip_invalid_lines: bool = False
    debug: bool = False


def _env_flag(name: str) -> bool:
    return os.environ[name].lower() in ("true", "1", "yes")


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from JSON file with environment variable overrides.

    Priority (highest to lowest):
    1. Environment variables (SCORELINK_*)
    2. Config file values
    3. Default values
    """
    config = Config()

    # Determine config file path
    if config_path is None:
        base_dir = Path(__file__).parent.parent
        config_path = base_dir / "config" / "default.json"
    else:
        config_path = Path(config_path)

    # Load from JSON if exists
    if config_path.exists():
        with open(config_path, "r") as f:
            data = json.load(f)

        # Serial config
        if "serial" in data:
            config.serial.port = data["serial"].get("port", config.serial.port)
            config.serial.baudrate = data["serial"].get("baudrate", config.serial.baudrate)
            config.serial.timeout = data["serial"].get("timeout", config.serial.timeout)

        # Socket.IO config
        if "socket" in data:
            config.socket.url = data["socket"].get("url", config.socket.url)
            config.socket.namespace = data["socket"].get("namespace", config.socket.namespace)
            config.socket.event = data["socket"].get("event", config.socket.event)
            config.socket.connect_timeout = data["socket"].get("connect_timeout", config.socket.connect_timeout)
            config.socket.enabled = data["socket"].get("enabled", config.socket.enabled)

        # Simulator config
        if "simulator" in data:
            config.simulator.enabled = data["simulator"].get("enabled", config.simulator.enabled)
            config.simulator.period_seconds = data["simulator"].get("period_seconds", config.simulator.period_seconds)
            config.simulator.shot_clock_seconds = data["simulator"].get("shot_clock_seconds", config.simulator.shot_clock_seconds)
            config.simulator.score_chance = data["simulator"].get("score_chance", config.simulator.score_chance)
            config.simulator.foul_chance = data["simulator"].get("foul_chance", config.simulator.foul_chance)
            config.simulator.speed_multiplier = data["simulator"].get("speed_multiplier", config.simulator.speed_multiplier)

        config.skip_invalid_lines = data.get("skip_invalid_lines", config.skip_invalid_lines)
        config.debug = data.get("debug", config.debug)

    # Environment variable overrides
    if os.environ.get("SCORELINK_SERIAL_PORT"):
        config.serial.port = os.environ["SCORELINK_SERIAL_PORT"]
    if os.environ.get("SCORELINK_SERIAL_BAUDRATE"):
        config.serial.baudrate = int(os.environ["SCORELINK_SERIAL_BAUDRATE"])
    if os.environ.get("SCORELINK_SERIAL_TIMEOUT"):
        config.serial.timeout = float(os.environ["SCORELINK_SERIAL_TIMEOUT"])
    if os.environ.get("SCORELINK_SOCKET_URL"):
        config.socket.url = os.environ["SCORELINK_SOCKET_URL"]
    if os.environ.get("SCORELINK_SOCKET_ENABLED"):
        config.socket.enabled = _env_flag("SCORELINK_SOCKET_ENABLED")
    if os.environ.get("SCORELINK_SKIP_INVALID"):
        config.skip_invalid_lines = _env_flag("SCORELINK_SKIP_INVALID")
    if os.environ.get("SCORELINK_SIMULATOR"):
        config.simulator.enabled = _env_flag("SCORELINK_SIMULATOR")
    if os.environ.get("SCORELINK_DEBUG"):
        config.debug = _env_flag("SCORELINK_DEBUG")

    return config


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global config instance, loading it if necessary."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Config) -> None:
    """Set the global config instance."""
    global _config
    _config = config
