"""Shared fixtures: a recording transport stands in for the ROS node."""
from __future__ import annotations

import threading

import pytest

from talker.core import SharedState


class RecordingTransport:
    """Collects what the emitter hands to the transport, in call order."""

    def __init__(self):
        self.calls = []
        self.lock = threading.Lock()

    def publish(self, record):
        with self.lock:
            self.calls.append(("publish", record))

    def broadcast_transform(self, snap):
        with self.lock:
            self.calls.append(("tf", snap))

    @property
    def records(self):
        with self.lock:
            return [c[1] for c in self.calls if c[0] == "publish"]

    @property
    def transforms(self):
        with self.lock:
            return [c[1] for c in self.calls if c[0] == "tf"]


@pytest.fixture
def shared():
    return SharedState()


@pytest.fixture
def transport():
    return RecordingTransport()
