"""
scorelink - Scoreboard Live Link

Main entry point. Reads scoreboard lines from the serial port (or simulator)
and pushes every field to the live stats dashboard.
"""

import argparse
import logging
from typing import Optional

import serial

from . import __version__
from .config import Config, load_config, set_config
from .core.dispatcher import UpdateDispatcher
from .core.state import BridgeStats
from .output.livestats import DashboardDisconnected, LiveStatsClient, MockLiveStatsClient
from .parser.allsport import LineReadError, ParseError, parse_line, read_line
from .simulator.fake_serial import FakeSerial, GameSimulator

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False):
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )


def run_bridge(serial_port, dispatcher: UpdateDispatcher, stats: BridgeStats,
               skip_invalid: bool = False) -> None:
    """
    Main bridge loop.

    Reads one line at a time, parses it and dispatches its fields. Runs
    until the process is stopped or a fatal error is raised.

    Raises:
        LineReadError: Serial read failed or timed out
        ParseError: Unparseable line while skip_invalid is off
        DashboardDisconnected: Dashboard connection was lost
    """
    logger.info("Bridge started")

    while True:
        line = read_line(serial_port)
        stats.record_line(line)
        logger.debug(f"RX: {line!r}")

        try:
            update = parse_line(line)
        except ParseError as e:
            stats.record_rejected()
            if not skip_invalid:
                raise
            logger.warning(f"Skipping line: {e}")
            continue

        stats.record_parsed()
        results = dispatcher.dispatch(update)
        stats.record_dispatch(results)

        # No reconnect: a lost dashboard ends the run
        if not dispatcher.connected:
            raise DashboardDisconnected("Lost connection to the live stats dashboard")


def open_serial_port(config: Config):
    """Open the configured serial port, or a simulated one."""
    if config.simulator.enabled:
        sim = config.simulator
        port = FakeSerial(
            timeout=config.serial.timeout,
            simulator=GameSimulator(
                period_seconds=sim.period_seconds,
                shot_clock_seconds=sim.shot_clock_seconds,
                score_chance=sim.score_chance,
                foul_chance=sim.foul_chance,
                speed_multiplier=sim.speed_multiplier
            )
        )
        port.open()
        return port

    port = serial.Serial(
        port=config.serial.port,
        baudrate=config.serial.baudrate,
        timeout=config.serial.timeout
    )
    logger.info(f"Opened serial port: {config.serial.port}")
    return port


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scorelink",
        description="scorelink - push scoreboard serial data to a live stats dashboard"
    )
    parser.add_argument(
        "--port", "-p",
        help="Serial device the scoreboard controller is attached to",
        default=None
    )
    parser.add_argument(
        "--socket-url", "-s",
        help="Live stats Socket.IO server URL",
        default=None
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to config file",
        default=None
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--simulate",
        action="store_true",
        help="Read from a simulated scoreboard (no hardware required)"
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Log and skip unparseable lines instead of exiting"
    )
    parser.add_argument(
        "--no-socket",
        action="store_true",
        help="Log updates without connecting to the dashboard"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load configuration
    config = load_config(args.config)

    # Apply command line overrides
    if args.port:
        config.serial.port = args.port
    if args.socket_url:
        config.socket.url = args.socket_url
    if args.debug:
        config.debug = True
    if args.simulate:
        config.simulator.enabled = True
    if args.skip_invalid:
        config.skip_invalid_lines = True
    if args.no_socket:
        config.socket.enabled = False

    if not config.serial.port and not config.simulator.enabled:
        parser.error("a serial port is required (--port, SCORELINK_SERIAL_PORT or config file)")

    set_config(config)

    # Setup logging
    setup_logging(config.debug)

    source = "simulator" if config.simulator.enabled else config.serial.port
    logger.info(f"Connecting {source} to {config.socket.url}")

    try:
        serial_port = open_serial_port(config)
    except serial.SerialException as e:
        logger.error(f"Failed to open serial port: {e}")
        return 1

    if config.socket.enabled:
        client = LiveStatsClient()
    else:
        client = MockLiveStatsClient()
        logger.info("Dashboard disabled, using mock client")

    if not client.connect():
        serial_port.close()
        return 1

    stats = BridgeStats()
    exit_code = 0

    try:
        run_bridge(
            serial_port,
            UpdateDispatcher(client),
            stats,
            skip_invalid=config.skip_invalid_lines
        )
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except LineReadError as e:
        logger.error(f"Error reading from port: {e}")
        exit_code = 1
    except ParseError as e:
        logger.error(f"Error parsing line: {e}")
        exit_code = 1
    except DashboardDisconnected as e:
        logger.error(f"Dashboard error: {e}")
        exit_code = 1
    finally:
        serial_port.close()
        client.disconnect()
        logger.info(f"Bridge stopped: {stats.to_json()}")

    return exit_code
