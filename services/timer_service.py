# -*- coding: utf-8 -*-

import logging
from typing import Any, Callable, List, Optional

from core.constants import TICK_MS
from core.timer_engine import SessionTimer
from domain.models import SessionState

log = logging.getLogger(__name__)


class TimerService:
    """
    Single owner of the session timer:
    - SessionTimer state (only toggle_running / tick mutate it)
    - the pending 1s registration on the scheduler
    - callbacks for UI

    `scheduler` needs Tk's signature: after(ms, fn) -> handle, after_cancel(handle).
    Every transition cancels the pending tick and, if still running,
    schedules a fresh one.
    """

    def __init__(self, scheduler: Any, timer: Optional[SessionTimer] = None):
        self.scheduler = scheduler
        self.timer = timer or SessionTimer()

        self._tick_job = None
        self._generation = 0
        self._closed = False

        self._on_tick: List[Callable[[SessionState], None]] = []
        self._on_mode_change: List[Callable[[SessionState], None]] = []
        self._on_state_change: List[Callable[[SessionState], None]] = []

    # ----- Callbacks -----
    def add_on_tick(self, fn: Callable[[SessionState], None]) -> None:
        self._on_tick.append(fn)

    def add_on_mode_change(self, fn: Callable[[SessionState], None]) -> None:
        self._on_mode_change.append(fn)

    def add_on_state_change(self, fn: Callable[[SessionState], None]) -> None:
        self._on_state_change.append(fn)

    def _emit(self, fns: List[Callable[[SessionState], None]]) -> None:
        snap = self.timer.state
        for fn in list(fns):
            fn(snap)

    # ----- Public API -----
    def get_state(self) -> SessionState:
        return self.timer.state

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def has_pending_tick(self) -> bool:
        return self._tick_job is not None

    def toggle_running(self) -> None:
        if self._closed:
            log.debug("toggle ignored, service closed")
            return

        self.timer.toggle_running()
        state = self.timer.state
        log.info(
            "timer %s (%s, %ss left)",
            "started" if state.is_running else "stopped",
            state.mode.value,
            state.seconds_remaining,
        )
        self._reschedule()
        self._emit(self._on_state_change)

    def tick(self) -> None:
        """
        Advance one second. No-op while stopped or after close().
        """
        if self._closed or not self.timer.is_running:
            return

        mode_changed = self.timer.tick()
        self._reschedule()

        self._emit(self._on_tick)

        if mode_changed:
            state = self.timer.state
            log.info(
                "mode switched to %s (%ss)", state.mode.value, state.seconds_remaining
            )
            self._emit(self._on_mode_change)

    def close(self) -> None:
        """Cancel the pending tick; the service ignores events afterwards."""
        if self._closed:
            return
        self._cancel_pending()
        self._closed = True
        log.debug("timer service closed")

    # ----- Tick registration internals -----
    def _reschedule(self) -> None:
        self._cancel_pending()
        if self._closed or not self.timer.is_running:
            return

        self._generation += 1
        generation = self._generation
        self._tick_job = self.scheduler.after(
            TICK_MS, lambda: self._on_scheduled_tick(generation)
        )

    def _cancel_pending(self) -> None:
        # invalidates any callback already queued by the scheduler
        self._generation += 1
        job, self._tick_job = self._tick_job, None
        if job is None:
            return
        try:
            self.scheduler.after_cancel(job)
        except Exception:
            # handle already fired or scheduler torn down
            log.debug("after_cancel failed for %r", job, exc_info=True)

    def _on_scheduled_tick(self, generation: int) -> None:
        if generation != self._generation:
            log.debug("stale tick dropped")
            return
        self._tick_job = None
        self.tick()
