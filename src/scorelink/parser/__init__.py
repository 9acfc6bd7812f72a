"""scorelink Protocol Parsers"""

from .allsport import (
    EOT,
    LineReadError,
    LineReadTimeout,
    ParseError,
    ScoreboardUpdate,
    parse_line,
    read_line,
)

__all__ = [
    "EOT",
    "LineReadError",
    "LineReadTimeout",
    "ParseError",
    "ScoreboardUpdate",
    "parse_line",
    "read_line",
]
