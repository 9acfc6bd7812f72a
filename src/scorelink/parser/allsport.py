"""
All Sport Line Protocol Parser

Decodes text lines from All Sport style basketball scoreboard controllers.

Protocol Overview:
- Lines are terminated by EOT (0x04); there is no start delimiter
- One byte is one character
- Each line carries the full game state, in order:
    game clock   M:SS or MM:SS, optional tenths (e.g. "2:15.4")
    marker       optional literal "s"
    shot clock   0-2 digits, blank when the shot clock is off
    home score, away score, home fouls, away fouls (away fouls one digit)

Example: "2:15.4 10  45 42 3 2"
"""

import logging
import re
from dataclasses import dataclass, asdict

import serial

logger = logging.getLogger(__name__)

# Line terminator
EOT = 0x04  # End of Transmission

# Away fouls is a single digit on the wire, home fouls is not.
LINE_PATTERN = re.compile(
    r"(?P<game_clock>\d{1,2}:\d{2}(?:\.\d)?)"
    r"\s*(?:\s*s)?\s*"
    r"(?P<shot_clock>\d{0,2})"
    r"\s+(?P<home_score>\d+)"
    r"\s+(?P<away_score>\d+)"
    r"\s+(?P<home_fouls>\d+)"
    r"\s+(?P<away_fouls>\d)"
)


class LineReadError(IOError):
    """Raised when the serial source fails while a line is being read."""


class LineReadTimeout(LineReadError):
    """Raised when the serial read timeout elapses before EOT arrives."""


class ParseError(ValueError):
    """Raised when a line does not match the scoreboard line format."""

    def __init__(self, line: str):
        super().__init__(f"Unparseable scoreboard line: {line!r}")
        self.line = line


@dataclass(frozen=True)
class ScoreboardUpdate:
    """Parsed scoreboard fields, kept as the raw text from the line."""
    game_clock: str
    shot_clock: str
    home_score: str
    away_score: str
    home_fouls: str
    away_fouls: str

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


def read_line(source) -> str:
    """
    Read one EOT-terminated line from a byte source.

    Args:
        source: Object with a pyserial-style read(size) method

    Returns:
        The line text, without the EOT byte

    Raises:
        LineReadTimeout: A read returned no data (serial timeout elapsed)
        LineReadError: The underlying read failed
    """
    buffer = bytearray()

    while True:
        try:
            data = source.read(1)
        except (serial.SerialException, OSError) as e:
            raise LineReadError(f"Serial read failed: {e}") from e

        if not data:
            raise LineReadTimeout(
                f"Timed out waiting for line terminator ({len(buffer)} bytes discarded)"
            )

        if data[0] == EOT:
            return buffer.decode("latin-1")
        buffer.extend(data[:1])


def parse_line(line: str) -> ScoreboardUpdate:
    """
    Parse a scoreboard line into its six fields.

    The whole line must match; fields are returned verbatim.

    Raises:
        ParseError: The line does not match the scoreboard format
    """
    match = LINE_PATTERN.fullmatch(line)
    if match is None:
        logger.debug(f"Line did not match pattern: {line!r}")
        raise ParseError(line)

    return ScoreboardUpdate(**match.groupdict())
