from __future__ import annotations

import logging
import math
import threading
from numbers import Real
from typing import Any, Callable

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def validate_backup_interval(minutes: Any) -> float:
    if isinstance(minutes, bool) or not isinstance(minutes, Real):
        raise ConfigurationError("Backup interval must be a positive number")
    if not (math.isfinite(minutes) and minutes > 0):
        raise ConfigurationError("Backup interval must be a positive number")
    return float(minutes)


class BackupScheduler:
    """
    Calls *on_tick* every *interval_minutes* on a daemon thread until stopped.

    Restarting cancels the running timer and starts a fresh one, so the
    first tick after a restart comes a full new interval later.
    """

    def __init__(self, on_tick: Callable[[], None], interval_minutes: float, *, name: str = "pathstore-backup"):
        self._on_tick = on_tick
        self._interval = validate_backup_interval(interval_minutes)
        self._name = name
        self._guard = threading.Lock()
        self._stop: threading.Event | None = None
        self._thread: threading.Thread | None = None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    def start(self) -> None:
        with self._guard:
            if self.is_running:
                return
            stop = threading.Event()
            thread = threading.Thread(target=self._loop, args=(stop, self._interval * 60.0), name=self._name, daemon=True)
            self._stop, self._thread = stop, thread
            thread.start()

    def stop(self) -> None:
        with self._guard:
            stop, thread = self._stop, self._thread
            self._stop, self._thread = None, None
        if stop is not None:
            stop.set()
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=2.0)

    def restart(self, interval_minutes: float) -> None:
        interval = validate_backup_interval(interval_minutes)
        self.stop()
        self._interval = interval
        self.start()

    def _loop(self, stop: threading.Event, period: float) -> None:
        while not stop.wait(period):
            try:
                self._on_tick()
            except Exception:  # noqa: BLE001
                logger.exception("Scheduled backup failed")
