"""
Live Stats Socket.IO Client

Pushes keyed scoreboard updates to the live stats dashboard over Socket.IO.
"""

import logging
from typing import Optional

import socketio

from ..config import get_config

logger = logging.getLogger(__name__)


class DashboardDisconnected(ConnectionError):
    """Raised when the dashboard connection is lost while the bridge runs."""


class LiveStatsClient:
    """
    Socket.IO client for the live stats dashboard.

    Every update is a single emit of the configured event with a
    one-entry payload, e.g. "do_update" {"Clock": "2:15.4"}.
    """

    def __init__(self, url: Optional[str] = None, namespace: Optional[str] = None,
                 event: Optional[str] = None, connect_timeout: Optional[float] = None,
                 sio: Optional[socketio.Client] = None):
        """
        Initialize the dashboard client.

        Args:
            url: Dashboard server URL (default from config)
            namespace: Socket.IO namespace (default from config)
            event: Event name for updates (default from config)
            connect_timeout: Seconds to wait for the namespace connection
            sio: Preconfigured Socket.IO client (default: new client, no reconnection)
        """
        config = get_config()
        self.url = url or config.socket.url
        self.namespace = namespace or config.socket.namespace
        self.event = event or config.socket.event
        if connect_timeout is None:
            connect_timeout = config.socket.connect_timeout
        self.connect_timeout = connect_timeout
        self._sio = sio if sio is not None else socketio.Client(reconnection=False)

        self._sio.on("connect_error", self._on_error, namespace=self.namespace)
        self._sio.on("error", self._on_error, namespace=self.namespace)
        self._sio.on("disconnect", self._on_disconnect, namespace=self.namespace)

    @property
    def connected(self) -> bool:
        """Check if connected to the dashboard."""
        return bool(self._sio.connected)

    def _on_error(self, data=None) -> None:
        logger.error(f"Socket error: {data}")

    def _on_disconnect(self, *args) -> None:
        logger.warning(f"Disconnected from {self.url}")

    def connect(self) -> bool:
        """
        Connect to the dashboard server.

        Returns:
            True if connection successful, False otherwise
        """
        if self.connected:
            return True

        try:
            self._sio.connect(
                self.url,
                namespaces=[self.namespace],
                wait_timeout=self.connect_timeout,
            )
            logger.info(f"Connected to live stats at {self.url}")
            return True
        except socketio.exceptions.ConnectionError as e:
            logger.error(f"Failed to connect to {self.url}: {e}")
            return False

    def disconnect(self) -> None:
        """Disconnect from the dashboard server."""
        if self.connected:
            self._sio.disconnect()
        logger.info("Disconnected from live stats")

    def publish(self, key: str, value: str) -> bool:
        """
        Emit a single keyed update.

        Args:
            key: Dashboard field key, e.g. "fade:Home-Score"
            value: Field text

        Returns:
            True if emitted, False otherwise
        """
        try:
            self._sio.emit(self.event, {key: value}, namespace=self.namespace)
            logger.debug(f"Emitted {self.event}: {key}={value!r}")
            return True
        except socketio.exceptions.SocketIOError as e:
            logger.error(f"Error emitting value: {e}")
            return False


# Mock client for running without a dashboard
class MockLiveStatsClient(LiveStatsClient):
    """
    Mock dashboard client for testing.

    Records all updates instead of sending them.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._updates: list = []
        self._mock_connected = False

    @property
    def connected(self) -> bool:
        return self._mock_connected

    def connect(self) -> bool:
        self._mock_connected = True
        logger.info("MockLiveStatsClient: Simulated connection")
        return True

    def disconnect(self) -> None:
        self._mock_connected = False
        logger.info("MockLiveStatsClient: Simulated disconnect")

    def publish(self, key: str, value: str) -> bool:
        self._updates.append((key, value))
        logger.debug(f"MockLiveStatsClient: {key}={value!r}")
        return True

    def get_updates(self) -> list:
        """Get list of all (key, value) updates published."""
        return self._updates.copy()

    def clear_updates(self) -> None:
        """Clear update history."""
        self._updates.clear()
