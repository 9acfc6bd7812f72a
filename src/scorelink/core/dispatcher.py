"""
Update Dispatcher

Maps parsed scoreboard fields to dashboard keys and publishes them.
"""

import logging
from typing import Dict

from ..parser.allsport import ScoreboardUpdate

logger = logging.getLogger(__name__)

# (field, dashboard key) in publish order
FIELD_KEYS = (
    ("home_score", "fade:Home-Score"),
    ("away_score", "fade:Away-Score"),
    ("game_clock", "Clock"),
    ("shot_clock", "Shot-Clock"),
    ("home_fouls", "Home-Fouls"),
    ("away_fouls", "Away-Fouls"),
)


class UpdateDispatcher:
    """
    Publishes each field of a ScoreboardUpdate as its own keyed update.

    Delivery is best-effort per field: a failed publish is logged and the
    remaining fields are still sent.
    """

    def __init__(self, client):
        """
        Args:
            client: Publisher with a publish(key, value) -> bool method
                and a `connected` attribute
        """
        self._client = client

    @property
    def connected(self) -> bool:
        """Whether the publisher is still connected."""
        return bool(self._client.connected)

    def dispatch(self, update: ScoreboardUpdate) -> Dict[str, bool]:
        """
        Publish all six fields of an update.

        Returns:
            Mapping of dashboard key to publish success
        """
        results = {}

        for field_name, key in FIELD_KEYS:
            value = getattr(update, field_name)
            logger.info(f"{key} = {value}")
            ok = self._client.publish(key, value)
            if not ok:
                logger.error(f"Failed to publish {key}")
            results[key] = ok

        return results
