"""Output Formatting — human-readable dates and duration normalization."""

from datetime import date

from exercise_tracker.core.format_dates import format_human_date, normalize_duration


def test_format_human_date_pads_day():
    assert format_human_date(date(2024, 1, 1)) == "Mon Jan 01 2024"


def test_format_human_date_weekday_and_month():
    assert format_human_date(date(2023, 12, 31)) == "Sun Dec 31 2023"
    assert format_human_date(date(2024, 2, 29)) == "Thu Feb 29 2024"


def test_normalize_duration_integral_to_int():
    result = normalize_duration(30.0)
    assert result == 30
    assert isinstance(result, int)


def test_normalize_duration_keeps_fraction():
    assert normalize_duration(12.5) == 12.5
