from __future__ import annotations

import datetime as dt
import json
import tempfile
import unittest
from pathlib import Path

from htmlcal.config import Config, config_from_mapping, load_config
from htmlcal.errors import ConfigError


class TestConfigContract(unittest.TestCase):
    def test_defaults(self) -> None:
        c = Config()
        self.assertEqual(c.starting_day, 1)
        self.assertEqual(c.locale, "en")
        self.assertEqual(c.timezone, "UTC")
        self.assertEqual(c.time_interval, 60)
        self.assertEqual((c.start_time, c.end_time), ("08:00", "20:00"))
        self.assertEqual(c.hidden_days, ())
        self.assertFalse(c.day_should_be_hidden(dt.date(2025, 1, 11)))

    def test_invalid_values_raise_config_error(self) -> None:
        with self.assertRaises(ConfigError):
            Config(starting_day=2)
        with self.assertRaises(ConfigError):
            Config(locale="xx_not_a_locale")
        with self.assertRaises(ConfigError):
            Config(timezone="No/Such_Zone")
        with self.assertRaises(ConfigError):
            Config(hidden_days=("funday",))
        with self.assertRaises(ConfigError):
            Config(hidden_dates=("11/01/2025",))

    def test_hidden_days_accept_names_and_indices(self) -> None:
        c = Config(hidden_days=("Saturday", 0, "sun"))
        self.assertEqual(c.hidden_days, (0, 6))
        self.assertTrue(c.day_should_be_hidden(dt.date(2025, 1, 11)))  # Saturday
        self.assertTrue(c.day_should_be_hidden(dt.date(2025, 1, 12)))  # Sunday
        self.assertFalse(c.day_should_be_hidden(dt.date(2025, 1, 13)))  # Monday

    def test_hidden_dates(self) -> None:
        c = Config(hidden_dates=("2025-12-25", dt.date(2025, 12, 26)))
        self.assertTrue(c.day_should_be_hidden(dt.date(2025, 12, 25)))
        self.assertTrue(c.day_should_be_hidden(dt.date(2025, 12, 26)))
        self.assertFalse(c.day_should_be_hidden(dt.date(2025, 12, 24)))

    def test_with_overrides_ignores_none(self) -> None:
        c = Config(locale="fr")
        self.assertIs(c.with_overrides(locale=None, timezone=None), c)
        c2 = c.with_overrides(locale="de", starting_day=0)
        self.assertEqual((c2.locale, c2.starting_day), ("de", 0))
        self.assertEqual(c.locale, "fr")

    def test_timezone_is_normalized(self) -> None:
        self.assertEqual(Config(timezone="gmt").timezone, "UTC")
        self.assertEqual(Config(timezone="Europe/Berlin").tzinfo.name, "Europe/Berlin")

    def test_mapping_aliases(self) -> None:
        c = config_from_mapping(
            {
                "startingDay": "sunday",
                "tableClasses": "striped",
                "timeInterval": 15,
                "startTime": "07:00",
                "endTime": "19:00",
                "hiddenDays": ["saturday"],
                "unknown": True,
            }
        )
        self.assertEqual(c.starting_day, 0)
        self.assertEqual(c.table_classes, "striped")
        self.assertEqual(c.time_interval, 15)
        self.assertEqual((c.start_time, c.end_time), ("07:00", "19:00"))
        self.assertEqual(c.hidden_days, (6,))

    def test_mapping_rejects_bad_shapes(self) -> None:
        with self.assertRaises(ConfigError):
            config_from_mapping(["not", "an", "object"])  # type: ignore[arg-type]
        with self.assertRaises(ConfigError):
            config_from_mapping({"hidden_days": "saturday"})

    def test_load_config_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "cal.json"
            p.write_text(json.dumps({"locale": "fr", "starting_day": 0, "tz": "+01:00"}), encoding="utf-8")
            c = load_config(str(p))
        self.assertEqual((c.locale, c.starting_day, c.timezone), ("fr", 0, "+01:00"))

    def test_load_config_errors(self) -> None:
        self.assertEqual(load_config(None), Config())
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(ConfigError):
                load_config(str(Path(td) / "missing.json"))
            bad = Path(td) / "bad.json"
            bad.write_text("{not json", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_config(str(bad))


if __name__ == "__main__":
    unittest.main(verbosity=2)
