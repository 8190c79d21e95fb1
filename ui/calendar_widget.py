# -*- coding: utf-8 -*-

import tkinter as tk
from typing import List, Sequence

from core.calendar_grid import weeks
from domain.models import CalendarCell

BG = "#0F172A"
TODAY_BG = "#164E63"
TODAY_FG = "#FFFFFF"
MONTH_BG = "#1E293B"
MONTH_FG = "#F1F5F9"
OTHER_BG = "#111827"
OTHER_FG = "#64748B"
HEAD_FG = "#E2E8F0"


def cell_colors(cell: CalendarCell):
    """(bg, fg) for a cell: today > current month > other month."""
    if cell.is_today:
        return TODAY_BG, TODAY_FG
    if cell.is_current_month:
        return MONTH_BG, MONTH_FG
    return OTHER_BG, OTHER_FG


class CalendarWidget(tk.Frame):
    """Static 6x7 month grid; built once, the anchor date never changes."""

    def __init__(
        self,
        master,
        month_label: str,
        weekday_labels: Sequence[str],
        cells: Sequence[CalendarCell],
    ):
        super().__init__(master, bg=BG, padx=12, pady=12)
        self._cell_labels: List[tk.Label] = []
        self._build_ui(month_label, weekday_labels, cells)

    def _build_ui(self, month_label, weekday_labels, cells):
        head = tk.Frame(self, bg=BG)
        head.pack(fill="x", pady=(0, 8))
        tk.Label(
            head,
            text="今日のスケジュール",
            bg=BG,
            fg="#A5F3FC",
            font=("Sans", 9),
        ).pack(anchor="w")
        tk.Label(
            head, text=month_label, bg=BG, fg=HEAD_FG, font=("Sans", 18, "bold")
        ).pack(anchor="w")

        grid = tk.Frame(self, bg=BG)
        grid.pack(fill="both", expand=True)
        for col in range(len(weekday_labels)):
            grid.columnconfigure(col, weight=1, uniform="day")

        for col, name in enumerate(weekday_labels):
            tk.Label(
                grid, text=name, bg=BG, fg=HEAD_FG, font=("Sans", 9, "bold")
            ).grid(row=0, column=col, sticky="ew", pady=(0, 4))

        for r, wk in enumerate(weeks(cells), start=1):
            for c, cell in enumerate(wk):
                bg, fg = cell_colors(cell)
                lbl = tk.Label(
                    grid,
                    text=str(cell.day_number),
                    bg=bg,
                    fg=fg,
                    width=4,
                    height=2,
                    font=("Sans", 10, "bold" if cell.is_today else "normal"),
                )
                lbl.grid(row=r, column=c, sticky="nsew", padx=1, pady=1)
                self._cell_labels.append(lbl)
