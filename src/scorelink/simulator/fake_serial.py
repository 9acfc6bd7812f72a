"""
Fake Serial Port for Testing

Simulates All Sport scoreboard controller output for testing without hardware.
"""

import random
import threading
import logging
from typing import Optional, Callable
from ..parser.allsport import EOT

logger = logging.getLogger(__name__)


class GameSimulator:
    """
    Simulates a basketball game for testing.

    Generates realistic game data including:
    - Countdown game clock (tenths shown in the last minute)
    - Shot clock, reset on every score, blank when longer than the game clock
    - Random scoring and team fouls
    - Period transitions
    """

    def __init__(
        self,
        period_seconds: int = 720,
        shot_clock_seconds: int = 24,
        score_chance: float = 0.08,
        foul_chance: float = 0.03,
        speed_multiplier: float = 1.0,
        periods: int = 4,
        rng: Optional[random.Random] = None
    ):
        self.period_seconds = period_seconds
        self.shot_clock_seconds = shot_clock_seconds
        self.score_chance = score_chance
        self.foul_chance = foul_chance
        self.speed_multiplier = speed_multiplier
        self.periods = periods
        self._rng = rng or random.Random()

        # Game state, clocks in tenths of a second
        self.home_score = 0
        self.away_score = 0
        self.home_fouls = 0
        self.away_fouls = 0
        self.period = 1
        self.clock_tenths = period_seconds * 10
        self.shot_tenths = shot_clock_seconds * 10

        # Simulation control
        self._running = False
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._on_update: Optional[Callable[[str], None]] = None

    def format_clock(self) -> str:
        """Format game clock as M:SS, or 0:SS.t in the last minute."""
        if self.clock_tenths < 600:
            seconds, tenths = divmod(self.clock_tenths, 10)
            return f"0:{seconds:02d}.{tenths}"
        minutes, seconds = divmod(self.clock_tenths // 10, 60)
        return f"{minutes}:{seconds:02d}"

    def format_shot_clock(self) -> str:
        """Format shot clock as whole seconds, blank when switched off."""
        if self.shot_tenths > self.clock_tenths:
            return ""
        return str(-(-self.shot_tenths // 10))

    def format_line(self) -> str:
        """Render the current state as a scoreboard line (without EOT)."""
        return (
            f"{self.format_clock()} {self.format_shot_clock():>2}  "
            f"{self.home_score:>3} {self.away_score:>3} "
            f"{self.home_fouls} {self.away_fouls}"
        )

    def _score(self) -> None:
        points = self._rng.choice([1, 2, 2, 2, 3])
        if self._rng.random() < 0.5:
            self.home_score += points
            logger.info(f"SIM: Home +{points} ({self.home_score}-{self.away_score})")
        else:
            self.away_score += points
            logger.info(f"SIM: Away +{points} ({self.home_score}-{self.away_score})")
        self.shot_tenths = self.shot_clock_seconds * 10

    def _foul(self) -> None:
        # Away fouls are a single digit on the wire
        if self._rng.random() < 0.5:
            self.home_fouls = min(9, self.home_fouls + 1)
            logger.info(f"SIM: Home foul ({self.home_fouls})")
        else:
            self.away_fouls = min(9, self.away_fouls + 1)
            logger.info(f"SIM: Away foul ({self.away_fouls})")

    def tick(self) -> str:
        """
        Advance simulation by one clock step: a second, or a tenth
        of a second in the last minute of a period.

        Returns:
            Current scoreboard line
        """
        step = 10 if self.clock_tenths >= 600 else 1

        # Countdown clocks
        self.clock_tenths = max(0, self.clock_tenths - step)
        self.shot_tenths = max(0, self.shot_tenths - step)
        if self.shot_tenths == 0:
            self.shot_tenths = self.shot_clock_seconds * 10

        if self._rng.random() < self.score_chance / (10 // step):
            self._score()
        if self._rng.random() < self.foul_chance / (10 // step):
            self._foul()

        # Period transition
        if self.clock_tenths <= 0 and self.period < self.periods:
            self.period += 1
            self.clock_tenths = self.period_seconds * 10
            self.shot_tenths = self.shot_clock_seconds * 10
            self.home_fouls = 0
            self.away_fouls = 0
            logger.info(f"SIM: Period {self.period}")

        return self.format_line()

    def set_on_update(self, callback: Callable[[str], None]) -> None:
        """Set callback for new scoreboard lines."""
        self._on_update = callback

    def start(self) -> None:
        """Start simulation in background thread."""
        if self._running:
            return

        self._running = True
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run_loop, daemon=True)
        self._thread.start()
        logger.info("Game simulation started")

    def stop(self) -> None:
        """Stop simulation."""
        self._running = False
        self._stop_event.set()
        if self._thread:
            self._thread.join(timeout=2.0)
            self._thread = None
        logger.info("Game simulation stopped")

    def reset(self) -> None:
        """Reset game to initial state."""
        self.home_score = 0
        self.away_score = 0
        self.home_fouls = 0
        self.away_fouls = 0
        self.period = 1
        self.clock_tenths = self.period_seconds * 10
        self.shot_tenths = self.shot_clock_seconds * 10
        logger.info("Game simulation reset")

    def _run_loop(self) -> None:
        """Main simulation loop."""
        while self._running:
            last_minute = self.clock_tenths < 600
            line = self.tick()
            if self._on_update:
                try:
                    self._on_update(line)
                except Exception as e:
                    logger.error(f"Update callback error: {e}")

            tick_interval = (0.1 if last_minute else 1.0) / self.speed_multiplier
            self._stop_event.wait(tick_interval)


class FakeSerial:
    """
    Fake serial port that mimics pyserial interface.

    Generates EOT-terminated scoreboard lines from simulated game data.
    read() blocks up to `timeout` seconds like a real port.
    """

    def __init__(
        self,
        port: str = "SIM",
        baudrate: int = 115200,
        timeout: Optional[float] = 10.0,
        simulator: Optional[GameSimulator] = None,
        **kwargs
    ):
        self.port = port
        self.baudrate = baudrate
        self.timeout = timeout

        self._simulator = simulator or GameSimulator()
        self._buffer = bytearray()
        self._data_ready = threading.Condition()
        self._running = False

        # Start line generation
        self._simulator.set_on_update(self.feed_line)

    def feed_line(self, line: str) -> None:
        """Queue a scoreboard line followed by EOT."""
        with self._data_ready:
            self._buffer.extend(line.encode("latin-1"))
            self._buffer.append(EOT)
            self._data_ready.notify_all()

    @property
    def is_open(self) -> bool:
        return self._running

    def open(self) -> None:
        """Open the fake serial port (start simulation)."""
        self._running = True
        self._simulator.start()
        logger.info(f"FakeSerial opened on {self.port}")

    def close(self) -> None:
        """Close the fake serial port (stop simulation)."""
        with self._data_ready:
            self._running = False
            self._data_ready.notify_all()
        self._simulator.stop()
        logger.info("FakeSerial closed")

    def read(self, size: int = 1) -> bytes:
        """Read bytes from the fake serial buffer, waiting up to timeout."""
        with self._data_ready:
            if not self._buffer:
                self._data_ready.wait_for(
                    lambda: self._buffer or not self._running,
                    timeout=self.timeout
                )
            data = bytes(self._buffer[:size])
            del self._buffer[:size]
            return data

    @property
    def in_waiting(self) -> int:
        """Number of bytes in receive buffer."""
        with self._data_ready:
            return len(self._buffer)

    def reset_input_buffer(self) -> None:
        """Clear input buffer."""
        with self._data_ready:
            self._buffer.clear()

    # Context manager support
    def __enter__(self):
        self.open()
        return self

    def __exit__(self, *args):
        self.close()

    # Simulator access
    def get_simulator(self) -> GameSimulator:
        """Get the underlying game simulator."""
        return self._simulator
