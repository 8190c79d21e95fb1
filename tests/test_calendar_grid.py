import calendar
import datetime
import unittest

from core.calendar_grid import build_grid, first_grid_day, month_bounds, weeks


def _sample_dates():
    for year in (1999, 2000, 2023, 2024, 2026, 2100):
        for month in range(1, 13):
            last = calendar.monthrange(year, month)[1]
            for day in (1, 15, last):
                yield datetime.date(year, month, day)


class TestCalendarGrid(unittest.TestCase):
    def test_always_42_cells_ascending_from_sunday(self):
        for d in _sample_dates():
            cells = build_grid(d)
            self.assertEqual(len(cells), 42, d)
            self.assertEqual(cells[0].date.weekday(), 6, d)  # Sunday
            for a, b in zip(cells, cells[1:]):
                self.assertEqual(b.date - a.date, datetime.timedelta(days=1))

    def test_exactly_one_today_cell(self):
        for d in _sample_dates():
            today = [c for c in build_grid(d) if c.is_today]
            self.assertEqual(len(today), 1, d)
            self.assertEqual(today[0].date, d)
            self.assertEqual(today[0].day_number, d.day)

    def test_current_month_cells_cover_month(self):
        for d in _sample_dates():
            in_month = [c for c in build_grid(d) if c.is_current_month]
            days = calendar.monthrange(d.year, d.month)[1]
            self.assertEqual(len(in_month), days, d)
            self.assertEqual([c.day_number for c in in_month], list(range(1, days + 1)))

    def test_keys_are_unique_iso_dates(self):
        cells = build_grid(datetime.date(2026, 10, 17))
        keys = [c.key for c in cells]
        self.assertEqual(len(set(keys)), 42)
        self.assertEqual(keys[0], "2026-09-27")
        self.assertEqual(keys[-1], "2026-11-07")

    def test_month_starting_on_sunday_has_no_leading_cells(self):
        # 2026-02-01 is a Sunday, February has 28 days
        cells = build_grid(datetime.date(2026, 2, 10))
        self.assertEqual(cells[0].date, datetime.date(2026, 2, 1))
        self.assertTrue(cells[0].is_current_month)
        self.assertEqual(sum(1 for c in cells if not c.is_current_month), 14)
        self.assertFalse(cells[-1].is_current_month)

    def test_leading_and_trailing_cells_are_out_of_month(self):
        cells = build_grid(datetime.date(2026, 10, 17))
        self.assertEqual(cells[0].date, datetime.date(2026, 9, 27))
        self.assertFalse(cells[0].is_current_month)
        self.assertEqual(cells[0].day_number, 27)
        self.assertFalse(cells[-1].is_current_month)

    def test_datetime_anchor_ignores_time_of_day(self):
        cells = build_grid(datetime.datetime(2024, 2, 29, 23, 59, 59))
        today = [c for c in cells if c.is_today]
        self.assertEqual([c.key for c in today], ["2024-02-29"])

    def test_year_boundary(self):
        cells = build_grid(datetime.date(2025, 1, 1))
        self.assertEqual(cells[0].date, datetime.date(2024, 12, 29))
        self.assertTrue(cells[3].is_today)
        self.assertTrue(cells[3].is_current_month)

    def test_month_bounds_and_first_grid_day(self):
        first, last = month_bounds(datetime.date(2024, 2, 10))
        self.assertEqual(first, datetime.date(2024, 2, 1))
        self.assertEqual(last, datetime.date(2024, 2, 29))
        self.assertEqual(first_grid_day(datetime.date(2024, 2, 10)), datetime.date(2024, 1, 28))

    def test_weeks_splits_into_rows_of_seven(self):
        rows = weeks(build_grid(datetime.date(2026, 10, 17)))
        self.assertEqual(len(rows), 6)
        self.assertTrue(all(len(r) == 7 for r in rows))
        self.assertTrue(all(r[0].date.weekday() == 6 for r in rows))


if __name__ == "__main__":
    unittest.main()
