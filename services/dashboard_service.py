# -*- coding: utf-8 -*-

import datetime as dt
import logging
from typing import Callable, List, Optional

from core import formatting
from core.calendar_grid import build_grid
from core.constants import WEEKDAY_LABELS
from domain.models import SessionState, ViewSnapshot
from services.timer_service import TimerService

log = logging.getLogger(__name__)


class DashboardService:
    """
    Orchestrates:
    - anchor date (read once from today_provider)
    - calendar grid (built once for the anchor)
    - read-only view snapshots pushed after every timer transition
    """

    def __init__(
        self,
        timer_service: TimerService,
        today_provider: Callable[[], dt.date] = dt.date.today,
    ):
        self.timer_service = timer_service

        today = today_provider()
        if isinstance(today, dt.datetime):
            today = today.date()
        self.anchor: dt.date = today

        self._cells = tuple(build_grid(self.anchor))
        self._month_label = formatting.format_month_label(self.anchor)
        log.debug("calendar built for %s (%s)", self.anchor, self._month_label)

        self._subscribers: List[Callable[[ViewSnapshot], None]] = []

        self.timer_service.add_on_state_change(self._publish)
        self.timer_service.add_on_tick(self._publish)

    def subscribe(self, fn: Callable[[ViewSnapshot], None]) -> None:
        self._subscribers.append(fn)

    def snapshot(self, state: Optional[SessionState] = None) -> ViewSnapshot:
        state = state or self.timer_service.get_state()
        return ViewSnapshot(
            cells=self._cells,
            month_label=self._month_label,
            weekday_labels=WEEKDAY_LABELS,
            mode=state.mode,
            seconds_remaining=state.seconds_remaining,
            is_running=state.is_running,
            formatted_time=formatting.format_time(state.seconds_remaining),
            progress_fraction=formatting.progress_fraction(state),
            mode_label=formatting.mode_label(state.mode),
            status_text=formatting.status_text(state.mode),
            toggle_label=formatting.toggle_label(state.is_running),
        )

    def toggle_running(self) -> None:
        self.timer_service.toggle_running()

    def _publish(self, state: SessionState) -> None:
        snap = self.snapshot(state)
        for fn in list(self._subscribers):
            fn(snap)
