import pytest

from lap_timer.controller import TimerController
from lap_timer.view_dummy import TimerViewDummy

class FakeClock:
    def __init__(self, now: int = 1_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms

@pytest.fixture
def clock():
    return FakeClock()

@pytest.fixture
def view():
    return TimerViewDummy()

@pytest.fixture
def controller(view, clock):
    # No refresh loop: these tests run without an event loop.
    return TimerController(view, clock=clock, refresh_interval_ms=None)
