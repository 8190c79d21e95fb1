import datetime
import unittest

from core import formatting
from domain.models import SessionMode, SessionState


class TestFormatting(unittest.TestCase):
    def test_format_time(self):
        self.assertEqual(formatting.format_time(125), "02:05")
        self.assertEqual(formatting.format_time(0), "00:00")
        self.assertEqual(formatting.format_time(3599), "59:59")
        self.assertEqual(formatting.format_time(1500), "25:00")
        self.assertEqual(formatting.format_time(-3), "00:00")

    def test_progress_fraction(self):
        self.assertEqual(formatting.progress_fraction(SessionState.initial()), 0.0)
        s = SessionState(SessionMode.FOCUS, 750, True)
        self.assertAlmostEqual(formatting.progress_fraction(s), 0.5)
        s = SessionState(SessionMode.BREAK, 60, False)
        self.assertAlmostEqual(formatting.progress_fraction(s), 0.8)

    def test_month_label(self):
        self.assertEqual(formatting.format_month_label(datetime.date(2026, 10, 17)), "2026年10月")
        self.assertEqual(formatting.format_month_label(datetime.date(2024, 2, 1)), "2024年2月")

    def test_labels(self):
        self.assertEqual(formatting.mode_label(SessionMode.FOCUS), "25分の学習タイム")
        self.assertEqual(formatting.mode_label(SessionMode.BREAK), "5分の休憩タイム")
        self.assertTrue(formatting.status_text(SessionMode.FOCUS).startswith("現在は集中中です。"))
        self.assertTrue(formatting.status_text(SessionMode.BREAK).startswith("現在は休憩中です。"))
        self.assertEqual(formatting.toggle_label(True), "Stop")
        self.assertEqual(formatting.toggle_label(False), "Start")


if __name__ == "__main__":
    unittest.main()
