"""scorelink Output Modules"""

from .livestats import DashboardDisconnected, LiveStatsClient, MockLiveStatsClient

__all__ = ["DashboardDisconnected", "LiveStatsClient", "MockLiveStatsClient"]
