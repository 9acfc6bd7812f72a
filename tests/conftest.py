from __future__ import annotations

import os
from typing import Dict, List, Tuple

import pytest

from scorelink.config import Config, set_config
from scorelink.parser.allsport import ScoreboardUpdate


@pytest.fixture(autouse=True)
def default_config(monkeypatch: pytest.MonkeyPatch) -> Config:
    for name in list(os.environ):
        if name.startswith("SCORELINK_"):
            monkeypatch.delenv(name)
    config = Config()
    set_config(config)
    yield config
    set_config(None)


class RecordingClient:
    """Publisher that records every attempt and fails for chosen keys."""

    def __init__(self, fail_keys=()):
        self.fail_keys = set(fail_keys)
        self.attempts: List[Tuple[str, str]] = []
        self.connected = True

    def publish(self, key: str, value: str) -> bool:
        self.attempts.append((key, value))
        return key not in self.fail_keys


class StubSocketIO:
    """Stands in for socketio.Client."""

    def __init__(self, emit_error: Exception | None = None,
                 connect_error: Exception | None = None):
        self.emit_error = emit_error
        self.connect_error = connect_error
        self.connected = False
        self.handlers: Dict[Tuple[str, str], object] = {}
        self.emitted: list = []
        self.connect_calls: list = []

    def on(self, event, handler=None, namespace=None):
        self.handlers[(event, namespace)] = handler

    def connect(self, url, **kwargs):
        self.connect_calls.append((url, kwargs))
        if self.connect_error is not None:
            raise self.connect_error
        self.connected = True

    def disconnect(self):
        self.connected = False

    def emit(self, event, data=None, namespace=None, callback=None):
        if self.emit_error is not None:
            raise self.emit_error
        self.emitted.append((event, data, namespace))


@pytest.fixture
def recording_client() -> RecordingClient:
    return RecordingClient()


@pytest.fixture
def make_client():
    return RecordingClient


@pytest.fixture
def make_sio():
    return StubSocketIO


@pytest.fixture
def sample_update() -> ScoreboardUpdate:
    return ScoreboardUpdate(
        game_clock="2:15.4",
        shot_clock="10",
        home_score="45",
        away_score="42",
        home_fouls="3",
        away_fouls="2",
    )
