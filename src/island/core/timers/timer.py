"""Timer — one-shot and repeating callbacks on host threads.

Each ``start()`` spawns a daemon thread that waits on a stop event, so
``cancel()`` takes effect immediately instead of at the next tick.
"""

from __future__ import annotations

import logging
import threading

from island.core.functions import VoidFunction
from island.core.nominal import NominalGuard
from island.core.timers.duration import Duration
from island.errors import IslandRuntimeError, NullArgumentError

logger = logging.getLogger(__name__)

_interval_milliseconds: NominalGuard[float, float] = NominalGuard(
    lambda ms: ms > 0 or "Interval duration must be positive",
    name="IntervalMilliseconds",
)


class Timer:
    """Run *callback* once after *duration*, or every *duration* for intervals.

    Args:
        duration: Delay in milliseconds, or a :class:`Duration`.
        callback: Zero-argument callable to run.
    """

    def __init__(self, duration: float | Duration, callback: VoidFunction) -> None:
        if callback is None:
            raise NullArgumentError("Argument 'callback' must not be None", argument="callback")
        if isinstance(duration, Duration):
            self._duration = duration.in_milliseconds
        else:
            self._duration = duration
        self._action = callback
        self._is_interval = False
        self._is_active = False
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None

    @classmethod
    def run(cls, callback: VoidFunction) -> Timer:
        """Create a zero-delay one-shot timer. Call ``start()`` to schedule it."""
        return cls(0, callback)

    @classmethod
    def interval(cls, duration: float | Duration, callback: VoidFunction) -> Timer:
        """Create a repeating timer. *duration* must be positive."""
        timer = cls(duration, callback)
        _interval_milliseconds.assert_(timer._duration)
        timer._is_interval = True
        return timer

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_interval(self) -> bool:
        return self._is_interval

    @property
    def duration(self) -> Duration:
        return Duration(self._duration)

    def start(self) -> None:
        """Schedule the callback.

        Raises:
            IslandRuntimeError: If the timer is already active.
        """
        with self._lock:
            if self._is_active:
                raise IslandRuntimeError("Timer is already active")
            self._is_active = True
            stopped = threading.Event()
            self._stopped = stopped
            target = self._run_interval if self._is_interval else self._run_once
            self._thread = threading.Thread(
                target=target,
                args=(stopped,),
                name=f"island-timer-{id(self):x}",
                daemon=True,
            )
            self._thread.start()
        logger.debug(
            "Started %s timer (%sms)", "interval" if self._is_interval else "one-shot", self._duration
        )

    def cancel(self) -> None:
        """Stop further invocations. Safe to call on an inactive timer."""
        with self._lock:
            self._stopped.set()
            self._is_active = False

    def join(self, timeout: float | None = None) -> None:
        """Wait for the backing thread to finish (seconds, like ``Thread.join``)."""
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def _seconds(self) -> float:
        return max(self._duration, 0) / Duration.MILLISECONDS_PER_SECOND

    def _run_once(self, stopped: threading.Event) -> None:
        if stopped.wait(self._seconds()):
            return
        with self._lock:
            if stopped.is_set():
                return
            stopped.set()
            self._is_active = False
        self._invoke(stopped)

    def _run_interval(self, stopped: threading.Event) -> None:
        seconds = self._seconds()
        while not stopped.wait(seconds):
            self._invoke(stopped)

    def _invoke(self, stopped: threading.Event) -> None:
        try:
            self._action()
        except Exception:
            logger.exception("Timer callback failed")
            with self._lock:
                stopped.set()
                if self._stopped is stopped:
                    self._is_active = False
            raise
