from __future__ import annotations

from tictac.client.pygame_app.timers import Countdown


def test_fires_once_after_delay() -> None:
    timer: Countdown[int] = Countdown()
    timer.schedule(0.5, 7)
    assert timer.tick(0.25) is None
    assert timer.active
    assert timer.tick(0.25) == 7
    assert not timer.active
    assert timer.tick(1.0) is None


def test_cancel_prevents_fire() -> None:
    timer: Countdown[int] = Countdown()
    timer.schedule(0.1, 1)
    timer.cancel()
    assert timer.tick(1.0) is None


def test_reschedule_replaces_token() -> None:
    timer: Countdown[str] = Countdown()
    timer.schedule(1.0, "old")
    timer.schedule(0.0, "new")
    assert timer.tick(0.0) == "new"
