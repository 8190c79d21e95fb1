# -*- coding: utf-8 -*-

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from core.constants import BREAK_SEC, FOCUS_SEC


class SessionMode(Enum):
    FOCUS = "focus"
    BREAK = "break"

    @property
    def duration(self) -> int:
        return FOCUS_SEC if self is SessionMode.FOCUS else BREAK_SEC

    def other(self) -> "SessionMode":
        return SessionMode.BREAK if self is SessionMode.FOCUS else SessionMode.FOCUS


@dataclass(frozen=True)
class SessionState:
    mode: SessionMode
    seconds_remaining: int
    is_running: bool

    def __post_init__(self):
        if not 0 <= self.seconds_remaining <= self.mode.duration:
            raise ValueError(
                f"seconds_remaining={self.seconds_remaining} out of range "
                f"for {self.mode.value} (0..{self.mode.duration})"
            )

    @classmethod
    def initial(cls) -> "SessionState":
        return cls(
            mode=SessionMode.FOCUS,
            seconds_remaining=SessionMode.FOCUS.duration,
            is_running=False,
        )


@dataclass(frozen=True)
class CalendarCell:
    date: dt.date
    day_number: int
    is_today: bool
    is_current_month: bool
    key: str  # iso date, render identity only


@dataclass(frozen=True)
class ViewSnapshot:
    cells: Tuple[CalendarCell, ...]
    month_label: str
    weekday_labels: Tuple[str, ...]
    mode: SessionMode
    seconds_remaining: int
    is_running: bool
    formatted_time: str
    progress_fraction: float
    mode_label: str
    status_text: str
    toggle_label: str
