# -*- coding: utf-8 -*-

import datetime as dt

from core.constants import MODE_LABELS, MODE_NAMES, MONTH_LABEL_FMT, STATUS_HINT
from domain.models import SessionMode, SessionState


def format_time(seconds: int) -> str:
    m = max(0, seconds) // 60
    s = max(0, seconds) % 60
    return f"{m:02d}:{s:02d}"


def progress_fraction(state: SessionState) -> float:
    duration = state.mode.duration
    elapsed = duration - state.seconds_remaining
    return elapsed / duration


def format_month_label(anchor: dt.date) -> str:
    return MONTH_LABEL_FMT.format(year=anchor.year, month=anchor.month)


def mode_label(mode: SessionMode) -> str:
    return MODE_LABELS[mode.value]


def status_text(mode: SessionMode) -> str:
    return f"現在は{MODE_NAMES[mode.value]}中です。{STATUS_HINT}"


def toggle_label(is_running: bool) -> str:
    return "Stop" if is_running else "Start"
