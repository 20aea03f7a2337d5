"""Output Formatting — human-readable dates and numeric durations.

Invariants:
    - Dates render as "Mon Jan 01 2024" (weekday, month, zero-padded day, year)
    - Integral durations render as int, fractional ones as float

Design Decisions:
    - Names are spelled out in English rather than taken from strftime("%a"),
      so rendering does not follow the process locale
"""

from datetime import date

from exercise_tracker.core.domain_types import Duration

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_human_date(value: date) -> str:
    """Render a calendar date as e.g. "Mon Jan 01 2024"."""
    return (
        f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )


def normalize_duration(value: float) -> Duration:
    """30.0 -> 30, 12.5 -> 12.5."""
    if float(value).is_integer():
        return int(value)
    return float(value)
