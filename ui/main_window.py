# -*- coding: utf-8 -*-

import logging
import tkinter as tk
from tkinter import ttk

from domain.models import ViewSnapshot
from services.dashboard_service import DashboardService
from services.timer_service import TimerService
from ui.calendar_widget import CalendarWidget
from ui.markdown_renderer import MarkdownRenderer
from ui.pomodoro_widget import PomodoroWidget
from ui.status_panel import MascotPanel, StatusPanel

log = logging.getLogger(__name__)


class MainWindow:
    def __init__(self, root: tk.Tk, timer_service: TimerService, dashboard: DashboardService):
        self.root = root
        self.timer_service = timer_service
        self.dashboard = dashboard
        self._md = MarkdownRenderer()

        self.root.title("Focus Calendar")
        self.root.geometry("1180x640")
        self.root.configure(bg=self._md.theme.panel)

        self._build_ui()

        self.dashboard.subscribe(self._render)
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        self.root.report_callback_exception = self._report_callback_exception

        # initial render
        self._render(self.dashboard.snapshot())

    def _build_ui(self):
        outer = tk.Frame(self.root, bg=self._md.theme.panel, padx=16, pady=16)
        outer.pack(fill="both", expand=True)
        outer.columnconfigure(0, weight=3)
        outer.columnconfigure(1, weight=2)
        outer.rowconfigure(0, weight=1)

        # LEFT: calendar + timer
        left = tk.Frame(outer, bg=self._md.theme.panel)
        left.grid(row=0, column=0, sticky="nsew", padx=(0, 16))
        left.columnconfigure(0, weight=1)

        snap = self.dashboard.snapshot()
        self.calendar = CalendarWidget(
            left,
            month_label=snap.month_label,
            weekday_labels=snap.weekday_labels,
            cells=snap.cells,
        )
        self.calendar.grid(row=0, column=0, sticky="nsew")

        timer_card = ttk.Frame(left)
        timer_card.grid(row=1, column=0, sticky="ew", pady=(12, 0))
        timer_card.columnconfigure(0, weight=1)
        timer_card.columnconfigure(1, weight=1)

        self.pomodoro = PomodoroWidget(timer_card, on_toggle=self._toggle)
        self.pomodoro.grid(row=0, column=0, sticky="nsew")

        self.status = StatusPanel(timer_card, self._md)
        self.status.grid(row=0, column=1, sticky="nsew")

        # RIGHT: mascot space
        self.mascot = MascotPanel(outer, self._md)
        self.mascot.grid(row=0, column=1, sticky="nsew")

    def run(self):
        self.root.mainloop()

    # ----- actions -----
    def _toggle(self):
        self.dashboard.toggle_running()

    def _render(self, snap: ViewSnapshot):
        self.pomodoro.render(snap)
        self.status.render(snap)

    def _on_close(self):
        self.timer_service.close()
        self.root.destroy()

    def _report_callback_exception(self, exc_type, exc_value, exc_traceback):
        log.critical(
            "Uncaught exception in Tk callback",
            exc_info=(exc_type, exc_value, exc_traceback),
        )
