"""Pytest fixtures for tests."""

import pytest

from launchgrid.devices import StatefulSurface


class FakeOutputPort:
    """Output endpoint that records every message sent to it."""

    def __init__(self):
        self.sent = []
        self.closed = False

    def send(self, msg) -> None:
        self.sent.append(msg)

    def close(self) -> None:
        self.closed = True

    @property
    def sent_bytes(self) -> list[list[int]]:
        return [msg.bytes() for msg in self.sent]


class FakeInputPort:
    """Input endpoint; tests push messages through its callback."""

    def __init__(self):
        self.callback = None
        self.closed = False

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def output_port():
    """Create a recording output port."""
    return FakeOutputPort()


@pytest.fixture
def input_port():
    """Create an input port without a callback."""
    return FakeInputPort()


@pytest.fixture
def surface(input_port, output_port):
    """Create a StatefulSurface bound to fake ports."""
    return StatefulSurface(input_port, output_port)
