from __future__ import annotations

import socketio

from scorelink.config import DEFAULT_SOCKET_URL
from scorelink.output.livestats import LiveStatsClient, MockLiveStatsClient


def test_publish_emits_single_key_payload(make_sio) -> None:
    sio = make_sio()
    client = LiveStatsClient(sio=sio)

    assert client.publish("Clock", "2:15.4") is True
    assert sio.emitted == [("do_update", {"Clock": "2:15.4"}, "/")]


def test_publish_failure_returns_false(make_sio) -> None:
    sio = make_sio(emit_error=socketio.exceptions.BadNamespaceError("/ is not a connected namespace."))
    client = LiveStatsClient(sio=sio)

    assert client.publish("fade:Home-Score", "45") is False


def test_defaults_come_from_config(make_sio) -> None:
    client = LiveStatsClient(sio=make_sio())

    assert client.url == DEFAULT_SOCKET_URL
    assert client.namespace == "/"
    assert client.event == "do_update"


def test_connect_joins_namespace(make_sio) -> None:
    sio = make_sio()
    client = LiveStatsClient(url="http://localhost:5000", sio=sio, connect_timeout=2.0)

    assert client.connect() is True
    assert client.connected is True
    assert sio.connect_calls == [
        ("http://localhost:5000", {"namespaces": ["/"], "wait_timeout": 2.0}),
    ]

    # Already connected: no second attempt
    assert client.connect() is True
    assert len(sio.connect_calls) == 1


def test_explicit_zero_connect_timeout_is_kept(make_sio) -> None:
    sio = make_sio()
    client = LiveStatsClient(url="http://localhost:5000", sio=sio, connect_timeout=0)

    client.connect()

    assert client.connect_timeout == 0
    assert sio.connect_calls[0][1]["wait_timeout"] == 0


def test_connect_failure_returns_false(make_sio) -> None:
    sio = make_sio(connect_error=socketio.exceptions.ConnectionError("Connection refused"))
    client = LiveStatsClient(sio=sio)

    assert client.connect() is False
    assert client.connected is False


def test_disconnect(make_sio) -> None:
    sio = make_sio()
    client = LiveStatsClient(sio=sio)
    client.connect()

    client.disconnect()

    assert client.connected is False


def test_error_events_are_handled(make_sio) -> None:
    sio = make_sio()
    LiveStatsClient(sio=sio)

    assert ("connect_error", "/") in sio.handlers
    assert ("error", "/") in sio.handlers
    assert ("disconnect", "/") in sio.handlers

    # Handlers only log
    sio.handlers[("connect_error", "/")]({"message": "boom"})
    sio.handlers[("disconnect", "/")]()


def test_mock_client_records_updates(make_sio) -> None:
    client = MockLiveStatsClient(sio=make_sio())

    assert client.connect() is True
    assert client.publish("Clock", "1:00") is True
    assert client.publish("Shot-Clock", "") is True
    assert client.get_updates() == [("Clock", "1:00"), ("Shot-Clock", "")]

    client.clear_updates()
    assert client.get_updates() == []
