"""
Plain-text renderings of a schedule range: CSV rows, a JSON document and a
human-readable statistics report.
"""

import csv
import io
import json
from datetime import date, time
from typing import Optional

from app.services.scheduling.types import Assignment, ScheduleStatistics

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

CSV_HEADER = [
    "date",
    "weekday",
    "shift",
    "start_time",
    "end_time",
    "hours",
    "note",
    "actual_start_time",
    "actual_end_time",
]


def _fmt_time(t: Optional[time]) -> str:
    return t.strftime("%H:%M") if t else ""


def to_csv(
    assignments: list[Assignment],
    start_date: date,
    end_date: date,
    exported_on: Optional[date] = None,
) -> str:
    exported_on = exported_on or date.today()
    buf = io.StringIO()

    buf.write("Schedule export\n")
    buf.write(f"Exported: {exported_on.isoformat()}\n")
    buf.write(f"Range: {start_date.isoformat()} to {end_date.isoformat()}\n")
    buf.write("\n")

    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for a in sorted(assignments, key=lambda a: a.date):
        writer.writerow([
            a.date.isoformat(),
            WEEKDAY_NAMES[a.date.weekday()],
            a.shift.name,
            _fmt_time(a.shift.start_time),
            _fmt_time(a.shift.end_time),
            a.shift.duration,
            a.note or "",
            _fmt_time(a.actual_start_time),
            _fmt_time(a.actual_end_time),
        ])

    return buf.getvalue()


def to_json(
    assignments: list[Assignment],
    statistics: ScheduleStatistics,
    start_date: date,
    end_date: date,
    exported_on: Optional[date] = None,
) -> str:
    exported_on = exported_on or date.today()
    document = {
        "export_info": {
            "export_date": exported_on.isoformat(),
            "start_date": start_date.isoformat(),
            "end_date": end_date.isoformat(),
        },
        "statistics": {
            "total_days": statistics.total_days,
            "work_days": statistics.work_days,
            "rest_days": statistics.rest_days,
            "calendar_days": statistics.calendar_days,
            "total_hours": statistics.total_hours,
            "shift_distribution": statistics.shift_distribution,
        },
        "schedules": [
            {
                "date": a.date.isoformat(),
                "shift": a.shift.name,
                "start_time": _fmt_time(a.shift.start_time),
                "end_time": _fmt_time(a.shift.end_time),
                "duration": a.shift.duration,
                "note": a.note,
            }
            for a in sorted(assignments, key=lambda a: a.date)
        ],
    }
    return json.dumps(document, ensure_ascii=False, indent=2)


def statistics_report(
    statistics: ScheduleStatistics,
    start_date: date,
    end_date: date,
    generated_on: Optional[date] = None,
) -> str:
    generated_on = generated_on or date.today()
    rule = "=" * 31
    lines = [
        rule,
        "      Schedule statistics",
        rule,
        "",
        f"Period: {start_date.isoformat()} to {end_date.isoformat()}",
        f"Generated: {generated_on.isoformat()}",
        "",
        "[Overview]",
        f"Total days: {statistics.total_days}",
        f"Work days: {statistics.work_days}",
        f"Rest days: {statistics.rest_days}",
        f"Total hours: {statistics.total_hours:.1f}",
        f"Average hours per work day: {statistics.average_hours_per_work_day:.1f}",
        "",
        "[Shift distribution]",
    ]
    for name, days in statistics.shift_distribution.items():
        lines.append(f"{name}: {days} days ({statistics.percentage_of(name):.1f}%)")
    lines.append("")
    lines.append(rule)
    return "\n".join(lines) + "\n"
