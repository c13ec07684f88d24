from __future__ import annotations

import unittest

import htmlcal
import htmlcal.api as api


class TestPublicApiContract(unittest.TestCase):
    def test_all_names_resolve(self) -> None:
        for name in api.__all__:
            with self.subTest(name=name):
                self.assertTrue(hasattr(api, name))
                self.assertIs(getattr(htmlcal, name), getattr(api, name))

    def test_package_all_matches_api(self) -> None:
        self.assertEqual(list(htmlcal.__all__), list(api.__all__))

    def test_errors_share_a_base(self) -> None:
        for name in ("ConfigError", "InvalidEvent", "InvalidInterval", "InvalidStartDate", "InvalidTimeRange"):
            with self.subTest(name=name):
                self.assertTrue(issubclass(getattr(api, name), api.CalendarError))
        self.assertTrue(issubclass(api.CalendarError, ValueError))

    def test_end_to_end_through_package(self) -> None:
        cal = htmlcal.Calendar()
        cal.add_event("2025-01-06T09:00:00", "2025-01-06T10:00:00", "Standup")
        html = htmlcal.render_week(
            cal,
            htmlcal.WeekOptions(start_date="2025-01-06", time_interval=30, start_time="09:00", end_time="11:00"),
        )
        self.assertIn('rowspan="2"', html)
        self.assertEqual(htmlcal.time_slots("09:00", "11:00", 30), ["09:00", "09:30", "10:00", "10:30"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
