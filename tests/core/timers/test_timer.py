"""Tests for the thread-backed Timer."""

from __future__ import annotations

import threading
import time

import pytest

from island.core.timers.duration import Duration
from island.core.timers.timer import Timer
from island.errors import IslandRuntimeError, NullArgumentError, ValidationError

WAIT = 2.0  # seconds; upper bound for callbacks that are expected to fire


@pytest.fixture
def fired() -> threading.Event:
    return threading.Event()


class TestOneShot:
    def test_fires_once(self, fired: threading.Event) -> None:
        calls: list[int] = []

        def callback() -> None:
            calls.append(1)
            fired.set()

        timer = Timer(10, callback)
        timer.start()
        assert fired.wait(WAIT)
        timer.join(WAIT)
        assert calls == [1]
        assert timer.is_active is False

    def test_accepts_duration(self, fired: threading.Event) -> None:
        timer = Timer(Duration(10), fired.set)
        assert timer.duration == Duration(10)
        timer.start()
        assert fired.wait(WAIT)

    def test_run_is_zero_delay_and_not_started(self, fired: threading.Event) -> None:
        timer = Timer.run(fired.set)
        assert timer.duration == Duration.ZERO
        assert timer.is_active is False
        assert timer.is_interval is False
        timer.start()
        assert fired.wait(WAIT)

    def test_active_until_fired(self, fired: threading.Event) -> None:
        timer = Timer(Duration(seconds=30), fired.set)
        timer.start()
        try:
            assert timer.is_active is True
        finally:
            timer.cancel()

    def test_cancel_prevents_callback(self, fired: threading.Event) -> None:
        timer = Timer(200, fired.set)
        timer.start()
        timer.cancel()
        assert timer.is_active is False
        timer.join(WAIT)
        assert not fired.is_set()

    def test_restart_after_fire(self) -> None:
        count = 0
        done = threading.Event()

        def callback() -> None:
            nonlocal count
            count += 1
            done.set()

        timer = Timer(0, callback)
        timer.start()
        assert done.wait(WAIT)
        timer.join(WAIT)
        done.clear()
        timer.start()
        assert done.wait(WAIT)
        assert count == 2

    def test_start_while_active_raises(self, fired: threading.Event) -> None:
        timer = Timer(Duration(seconds=30), fired.set)
        timer.start()
        try:
            with pytest.raises(IslandRuntimeError, match="already active"):
                timer.start()
        finally:
            timer.cancel()

    def test_cancel_inactive_is_noop(self, fired: threading.Event) -> None:
        timer = Timer(10, fired.set)
        timer.cancel()
        assert timer.is_active is False

    def test_none_callback_raises(self) -> None:
        with pytest.raises(NullArgumentError):
            Timer(10, None)  # type: ignore[arg-type]


class TestInterval:
    def test_repeats_until_cancelled(self) -> None:
        ticks: list[float] = []
        third = threading.Event()

        def callback() -> None:
            ticks.append(time.monotonic())
            if len(ticks) >= 3:
                third.set()

        timer = Timer.interval(Duration(10), callback)
        assert timer.is_interval is True
        timer.start()
        try:
            assert third.wait(WAIT)
            assert timer.is_active is True
        finally:
            timer.cancel()
        timer.join(WAIT)
        settled = len(ticks)
        time.sleep(0.05)
        assert len(ticks) == settled

    @pytest.mark.parametrize("duration", [0, -5, Duration.ZERO])
    def test_non_positive_duration_rejected(self, duration: float | Duration) -> None:
        with pytest.raises(ValidationError, match="Interval duration must be positive"):
            Timer.interval(duration, lambda: None)

    @pytest.mark.filterwarnings("ignore::pytest.PytestUnhandledThreadExceptionWarning")
    def test_failing_callback_deactivates(self) -> None:
        def callback() -> None:
            raise RuntimeError("tick failed")

        timer = Timer.interval(10, callback)
        timer.start()
        timer.join(WAIT)
        assert timer.is_active is False
