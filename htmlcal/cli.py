from __future__ import annotations

import argparse
import os
import sys
import webbrowser
from pathlib import Path

from .calendar import Calendar
from .config import load_config
from .errors import CalendarError
from .events_io import load_events
from .options import WeekOptions
from .render.page import build_page
from .render.week import WeekView


def main(argv: list[str] | None = None) -> None:
    default_out = os.path.join("build", "week.html")
    ap = argparse.ArgumentParser(description="Render a week-view HTML calendar from a JSON list of events.")
    ap.add_argument("--events", default=None, help="Events JSON file (list, or object with an 'events' list)")
    ap.add_argument("--config", default=os.getenv("HTMLCAL_CONFIG"), help="Config JSON file (default: env HTMLCAL_CONFIG)")
    ap.add_argument("--start", default=None, help="Any date in the week to show, YYYY-MM-DD (default: today)")
    ap.add_argument("--interval", type=int, default=None, help="Minutes per row (default: from config, 60)")
    ap.add_argument("--start-time", default=None, help="First row clock time HH:MM (default: from config)")
    ap.add_argument("--end-time", default=None, help="End clock time HH:MM; equal to start means 24h (default: from config)")
    ap.add_argument("--color", default="", help="Color variant class added to the table, e.g. green")
    ap.add_argument("--starting-day", type=int, choices=(0, 1), default=None, help="0 = Sunday, 1 = Monday")
    ap.add_argument(
        "--locale",
        default=os.getenv("HTMLCAL_LOCALE"),
        help="Locale for day/month names (default: env HTMLCAL_LOCALE or config)",
    )
    ap.add_argument(
        "--tz",
        default=os.getenv("HTMLCAL_TZ"),
        help="Timezone for naive event times and 'today' (default: env HTMLCAL_TZ or config)",
    )
    ap.add_argument("--title", default="Week calendar", help="Page title")
    ap.add_argument("--fragment", action="store_true", help="Write only the calendar fragment, not a full page")
    ap.add_argument("--lenient", action="store_true", help="Skip invalid events instead of failing")
    ap.add_argument("--out", default=default_out, help="Output HTML path (default: ./build/week.html)")
    ap.add_argument("--no-open", action="store_true", help="Do not open the generated HTML in a browser")

    args = ap.parse_args(argv)

    try:
        config = load_config(args.config).with_overrides(
            locale=args.locale,
            timezone=args.tz,
            starting_day=args.starting_day,
        )
    except CalendarError as e:
        raise SystemExit(f"Invalid configuration: {e}")

    calendar = Calendar(config)
    if args.events:
        try:
            load_events(args.events, calendar, strict=not args.lenient)
        except CalendarError as e:
            raise SystemExit(f"Failed to load events: {e}")

    options = WeekOptions(
        color=args.color,
        start_date=args.start,
        time_interval=args.interval,
        start_time=args.start_time,
        end_time=args.end_time,
    )
    try:
        fragment = WeekView(config, calendar).render(options)
    except CalendarError as e:
        raise SystemExit(f"Invalid options: {e}")

    html = fragment if args.fragment else build_page(fragment, title=args.title, lang=config.locale)

    out_path = os.path.abspath(args.out)
    try:
        Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        # Default relative path from an unwritable CWD: fall back to a user-writable location.
        if args.out == default_out:
            fallback = Path.home() / ".htmlcal" / "build" / "week.html"
            fallback.parent.mkdir(parents=True, exist_ok=True)
            out_path = str(fallback)
            print(
                f"[htmlcal] WARN: default output directory is not writable; using {out_path}",
                file=sys.stderr,
            )
        else:
            raise SystemExit(f"Cannot create output directory '{Path(out_path).parent}': {e}")
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(html)

    print(out_path)

    if not args.no_open:
        try:
            webbrowser.open("file://" + out_path)
        except webbrowser.Error as e:
            print(f"[htmlcal] WARN: could not open browser: {e}", file=sys.stderr)


if __name__ == "__main__":
    main()
