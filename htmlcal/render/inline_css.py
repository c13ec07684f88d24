# htmlcal/render/inline_css.py
from __future__ import annotations

CSS_BLOCK = r""":root {
  --cal-border: #d9dde3;
  --cal-head-bg: #f5f6f8;
  --cal-today-bg: #fff8e1;
  --cal-event-bg: #e3f0ff;
  --cal-event-fg: #123a66;
  --cal-mask: #7aa7d9;
}
body { font-family: system-ui, -apple-system, "Segoe UI", sans-serif; margin: 16px; color: #222; }
.weekly-calendar-container { overflow-x: auto; }
table.weekly-calendar { border-collapse: collapse; width: 100%; table-layout: fixed; }
table.weekly-calendar th, table.weekly-calendar td { border: 1px solid var(--cal-border); padding: 0; vertical-align: top; }
.calendar-header th { background: var(--cal-head-bg); padding: 6px 4px; text-align: center; }
.calendar-header th:first-child { width: 110px; }
.cal-weekview-dow { font-weight: 600; }
.cal-weekview-day { font-size: 1.4em; line-height: 1.2; }
.cal-weekview-month { font-size: 0.8em; color: #666; }
.cal-weekview-time-th { background: var(--cal-head-bg); font-size: 0.8em; white-space: nowrap; }
.cal-weekview-time-th div { padding: 4px 6px; }
.cal-weekview-time { height: 28px; }
.cal-weekview-time.today { background: var(--cal-today-bg); }
.cal-weekview-event { height: 100%; box-sizing: border-box; padding: 3px 6px; font-size: 0.85em;
  background: var(--cal-event-bg); color: var(--cal-event-fg); }
.cal-weekview-event:empty { padding: 0; }
.cal-weekview-event.multi-row-event { min-height: 56px; }
.cal-weekview-event.mask-start { border-left: 4px solid var(--cal-mask); }
.cal-weekview-event.mask { border-left: 4px dotted var(--cal-mask); }
.cal-weekview-event.mask-end { border-left: 4px dashed var(--cal-mask); }

/* color variants */
.weekly-calendar.green .cal-weekview-event { background: #e3f6e8; color: #1d5b2c; }
.weekly-calendar.red .cal-weekview-event { background: #fde7e7; color: #7a1f1f; }
.weekly-calendar.grey .cal-weekview-event { background: #eceff1; color: #37474f; }
.weekly-calendar.turquoise .cal-weekview-event { background: #e0f7f5; color: #0f5c55; }
.weekly-calendar.purple .cal-weekview-event { background: #efe7fb; color: #4a2a7a; }
.weekly-calendar.orange .cal-weekview-event { background: #fff0e0; color: #7a4310; }
"""
