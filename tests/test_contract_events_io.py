from __future__ import annotations

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr
from pathlib import Path

from htmlcal.calendar import Calendar
from htmlcal.errors import InvalidEvent
from htmlcal.events_io import load_events, normalize_event


def _write(td: str, data) -> Path:
    p = Path(td) / "events.json"
    p.write_text(json.dumps(data), encoding="utf-8")
    return p


class TestEventsIoContract(unittest.TestCase):
    def test_object_with_events_list(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = _write(
                td,
                {
                    "events": [
                        {"start": "2025-01-06T09:00:00", "end": "2025-01-06T10:00:00", "summary": "Standup"},
                        {"start": "2025-01-07T09:00:00", "end": "2025-01-07T10:00:00", "title": "Review", "className": "x"},
                    ]
                },
            )
            cal = Calendar()
            added = load_events(p, cal)
        self.assertEqual([e.summary for e in added], ["Standup", "Review"])
        self.assertEqual(added[1].classes, "x")
        self.assertEqual(len(cal), 2)

    def test_bare_list(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = _write(td, [{"start": "2025-01-06T09:00:00", "end": "2025-01-06T10:00:00", "summary": "A", "mask": 1}])
            added = load_events(str(p), Calendar())
        self.assertTrue(added[0].mask)

    def test_strict_mode_raises_on_invalid_entry(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = _write(td, [{"start": "2025-01-06T10:00:00", "end": "2025-01-06T09:00:00", "summary": "Inverted"}])
            with self.assertRaises(InvalidEvent) as cm:
                load_events(p, Calendar())
        self.assertIn("events[0]", str(cm.exception))

    def test_lenient_mode_skips_with_warning(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = _write(
                td,
                [
                    "not an object",
                    {"start": "2025-01-06T09:00:00", "end": "2025-01-06T10:00:00", "summary": "Good"},
                ],
            )
            err = io.StringIO()
            cal = Calendar()
            with redirect_stderr(err):
                added = load_events(p, cal, strict=False)
        self.assertEqual([e.summary for e in added], ["Good"])
        self.assertIn("[htmlcal.events_io] WARN: skipping events[0]", err.getvalue())

    def test_unreadable_files_raise(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(InvalidEvent):
                load_events(Path(td) / "missing.json", Calendar())
            bad = Path(td) / "bad.json"
            bad.write_text("[{", encoding="utf-8")
            with self.assertRaises(InvalidEvent):
                load_events(bad, Calendar())
            wrong = _write(td, {"items": []})
            with self.assertRaises(InvalidEvent):
                load_events(wrong, Calendar())

    def test_normalize_event_aliases(self) -> None:
        fields = normalize_event({"start": "s", "end": "e", "description": "Desc", "class": "c"})
        self.assertEqual(fields["summary"], "Desc")
        self.assertEqual(fields["classes"], "c")
        self.assertFalse(fields["mask"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
