"""
scorelink Run Statistics

Counters for the bridge loop, logged when the bridge stops.
"""

import json
from dataclasses import dataclass
from typing import Optional
from datetime import datetime


@dataclass
class BridgeStats:
    """Counters for one bridge run. Nothing here is persisted."""
    lines_read: int = 0
    lines_parsed: int = 0
    lines_rejected: int = 0
    updates_dispatched: int = 0
    publish_failures: int = 0
    last_line: Optional[str] = None
    last_update: Optional[datetime] = None

    def record_line(self, line: str) -> None:
        self.lines_read += 1
        self.last_line = line

    def record_parsed(self) -> None:
        self.lines_parsed += 1

    def record_rejected(self) -> None:
        self.lines_rejected += 1

    def record_dispatch(self, results: dict) -> None:
        """Record the per-key publish results of one dispatched update."""
        self.updates_dispatched += 1
        self.publish_failures += sum(1 for ok in results.values() if not ok)
        self.last_update = datetime.now()

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "lines_read": self.lines_read,
            "lines_parsed": self.lines_parsed,
            "lines_rejected": self.lines_rejected,
            "updates_dispatched": self.updates_dispatched,
            "publish_failures": self.publish_failures,
            "last_line": self.last_line,
            "last_update": self.last_update.isoformat() if self.last_update else None
        }

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict())
