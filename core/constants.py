# -*- coding: utf-8 -*-

FOCUS_SEC = 25 * 60
BREAK_SEC = 5 * 60

TICK_MS = 1000

GRID_DAYS = 42  # 6 weeks, always
WEEK_LEN = 7

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

MONTH_LABEL_FMT = "{year}年{month}月"

MODE_LABELS = {
    "focus": "25分の学習タイム",
    "break": "5分の休憩タイム",
}
MODE_NAMES = {
    "focus": "集中",
    "break": "休憩",
}
STATUS_HINT = "スタート/ストップで一時停止できます。"

LOG_LEVEL_ENV = "FOCUS_CALENDAR_LOG_LEVEL"
LOG_FILE_ENV = "FOCUS_CALENDAR_LOG_FILE"
