"""
Export formatters.

Usage:
    from app.services.export import to_csv, to_json, statistics_report

    text = to_csv(assignments, start_date, end_date)
"""

from .formatters import to_csv, to_json, statistics_report

__all__ = [
    "to_csv",
    "to_json",
    "statistics_report",
]
