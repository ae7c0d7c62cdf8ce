import asyncio
import threading

import pytest

from transcription_api.routes import transcribe


class StubRequest:
    """Reports a disconnect after the given number of connected checks."""

    def __init__(self, connected_checks: int):
        self.checks = 0
        self._connected_checks = connected_checks

    async def is_disconnected(self) -> bool:
        self.checks += 1
        return self.checks > self._connected_checks


@pytest.fixture(autouse=True)
def fast_checks(monkeypatch):
    monkeypatch.setattr(transcribe, "DISCONNECT_CHECK_SECONDS", 0)


@pytest.mark.unit
class TestCancelOnDisconnect:
    def test_sets_event_when_client_disconnects(self):
        request = StubRequest(connected_checks=2)
        cancel_event = threading.Event()

        asyncio.run(transcribe._cancel_on_disconnect(request, cancel_event))

        assert cancel_event.is_set()
        assert request.checks == 3

    def test_stops_watching_once_event_is_set(self):
        request = StubRequest(connected_checks=10)
        cancel_event = threading.Event()
        cancel_event.set()

        asyncio.run(transcribe._cancel_on_disconnect(request, cancel_event))

        assert request.checks == 0
