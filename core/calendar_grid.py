# -*- coding: utf-8 -*-

"""Month grid calculations, no UI dependencies."""

import calendar
import datetime as dt
from typing import List, Sequence

from core.constants import GRID_DAYS, WEEK_LEN
from domain.models import CalendarCell


def _as_date(anchor) -> dt.date:
    # datetime is a date subclass; drop the time-of-day
    if isinstance(anchor, dt.datetime):
        return anchor.date()
    return anchor


def month_bounds(anchor: dt.date):
    """Return (first, last) day of the anchor's month."""
    anchor = _as_date(anchor)
    _, days_in_month = calendar.monthrange(anchor.year, anchor.month)
    first = anchor.replace(day=1)
    last = anchor.replace(day=days_in_month)
    return first, last


def first_grid_day(anchor: dt.date) -> dt.date:
    """Sunday on or before the first of the anchor's month."""
    first, _ = month_bounds(anchor)
    # date.weekday(): Monday=0 .. Sunday=6; shift so Sunday=0
    sunday_index = (first.weekday() + 1) % WEEK_LEN
    return first - dt.timedelta(days=sunday_index)


def build_grid(anchor: dt.date) -> List[CalendarCell]:
    """Return the 42 cells (6 weeks, Sunday first) around the anchor's month.

    Exactly one cell is flagged as today: the anchor itself.
    """
    anchor = _as_date(anchor)
    start = first_grid_day(anchor)

    cells: List[CalendarCell] = []
    for i in range(GRID_DAYS):
        d = start + dt.timedelta(days=i)
        cells.append(
            CalendarCell(
                date=d,
                day_number=d.day,
                is_today=d == anchor,
                is_current_month=(d.year, d.month) == (anchor.year, anchor.month),
                key=d.isoformat(),
            )
        )
    return cells


def weeks(cells: Sequence[CalendarCell]) -> List[List[CalendarCell]]:
    """Split a flat grid into rows of 7."""
    return [list(cells[i : i + WEEK_LEN]) for i in range(0, len(cells), WEEK_LEN)]
