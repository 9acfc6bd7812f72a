"""scorelink Core Components"""

from .state import BridgeStats
from .dispatcher import UpdateDispatcher, FIELD_KEYS

__all__ = ["BridgeStats", "UpdateDispatcher", "FIELD_KEYS"]
