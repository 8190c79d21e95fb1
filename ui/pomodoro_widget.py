# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk
from typing import Callable

from domain.models import SessionMode, ViewSnapshot

FOCUS_BG = "#22D3EE"
RUNNING_BG = "#F59E0B"


class PomodoroWidget(ttk.Frame):
    def __init__(self, master, on_toggle: Callable[[], None]):
        super().__init__(master, padding=10)
        self.on_toggle = on_toggle
        self._build_ui()

    def _build_ui(self):
        self.columnconfigure(1, weight=1)

        self.time_var = tk.StringVar(value="25:00")
        self.mode_var = tk.StringVar(value="")
        self.progress_var = tk.DoubleVar(value=0.0)

        left = ttk.Frame(self)
        left.grid(row=0, column=0, sticky="nw", padx=(0, 16))

        self.toggle_btn = tk.Button(
            left,
            text="Start",
            command=self.on_toggle,
            width=10,
            relief="flat",
            bd=0,
            bg=FOCUS_BG,
            fg="#0F172A",
            font=("Sans", 10, "bold"),
        )
        self.toggle_btn.grid(row=0, column=0, sticky="w")

        self.time_label = ttk.Label(
            left, textvariable=self.time_var, font=("Sans", 36, "bold")
        )
        self.time_label.grid(row=1, column=0, sticky="w", pady=(8, 4))

        self.mode_label = ttk.Label(left, textvariable=self.mode_var)
        self.mode_label.grid(row=2, column=0, sticky="w")

        self.progress = ttk.Progressbar(
            self, orient="horizontal", maximum=100.0, variable=self.progress_var
        )
        self.progress.grid(row=0, column=1, sticky="ew")

    def render(self, snap: ViewSnapshot):
        self.time_var.set(snap.formatted_time)
        self.mode_var.set(snap.mode_label)
        self.progress_var.set(snap.progress_fraction * 100)
        self.toggle_btn.config(
            text=snap.toggle_label,
            bg=RUNNING_BG if snap.is_running else FOCUS_BG,
            activebackground=RUNNING_BG if snap.is_running else FOCUS_BG,
        )
        if snap.mode is SessionMode.BREAK:
            self.time_label.configure(foreground="#7ED321")
        else:
            self.time_label.configure(foreground="")
