from __future__ import annotations

import unittest

from htmlcal.errors import InvalidInterval, InvalidTimeRange
from htmlcal.util.timeparse import parse_hhmm, slot_end_label, time_slots


class TestTimeSlotsContract(unittest.TestCase):
    def test_half_hour_slots_exclude_end(self) -> None:
        self.assertEqual(time_slots("09:00", "11:00", 30), ["09:00", "09:30", "10:00", "10:30"])

    def test_equal_start_and_end_spans_full_day(self) -> None:
        slots = time_slots("00:00", "00:00", 60)
        self.assertEqual(len(slots), 24)
        self.assertEqual(slots[0], "00:00")
        self.assertEqual(slots[-1], "23:00")
        self.assertEqual(len(set(slots)), 24)

    def test_full_day_from_non_midnight_start_wraps(self) -> None:
        slots = time_slots("08:00", "08:00", 90)
        self.assertEqual(len(slots), 16)
        self.assertEqual(slots[0], "08:00")
        self.assertEqual(slots[-1], "06:30")

    def test_trailing_partial_slot_is_kept(self) -> None:
        self.assertEqual(time_slots("09:00", "10:45", 30), ["09:00", "09:30", "10:00", "10:30"])

    def test_interval_longer_than_range_gives_one_slot(self) -> None:
        self.assertEqual(time_slots("09:00", "09:20", 60), ["09:00"])

    def test_single_digit_hour_is_accepted(self) -> None:
        self.assertEqual(parse_hhmm("9:05"), (9, 5))
        self.assertEqual(time_slots("9:00", "10:00", 30), ["09:00", "09:30"])

    def test_invalid_clock_times_raise(self) -> None:
        for bad in ("9am", "24:00", "12:60", "", "12"):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidTimeRange):
                    time_slots(bad, "18:00", 30)

    def test_inverted_range_raises(self) -> None:
        with self.assertRaises(InvalidTimeRange):
            time_slots("18:00", "09:00", 30)

    def test_invalid_interval_raises(self) -> None:
        for bad in (0, -15, "30", 1.5, True, None):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidInterval):
                    time_slots("09:00", "10:00", bad)  # type: ignore[arg-type]

    def test_errors_are_value_errors(self) -> None:
        with self.assertRaises(ValueError):
            time_slots("nope", "10:00", 30)

    def test_slot_end_label_wraps_past_midnight(self) -> None:
        self.assertEqual(slot_end_label("09:00", 30), "09:30")
        self.assertEqual(slot_end_label("23:00", 60), "00:00")
        self.assertEqual(slot_end_label("23:30", 45), "00:15")


if __name__ == "__main__":
    unittest.main(verbosity=2)
