"""Input Parsing — turns loosely typed request fields into validated domain records.

Invariants:
    - Pure functions: no IO, no clock access (callers pass `today`)
    - Each parser raises the FIRST failure it finds, checking fields in a fixed order
    - Whitespace-only strings count as absent
    - Numbers must be finite; booleans are never numbers
    - limit is capped at MAX_LIMIT so the store never sees an unbindable integer

Design Decisions:
    - Values arrive as str (forms, query strings) or JSON scalars: every field
      is normalized through _as_text before validation
    - Exercise dates are parsed separately (resolve_exercise_date) because the
      user lookup sits between the duration check and the date check
"""

import math
import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any
from uuid import UUID

from exercise_tracker.core.domain_types import (
    ExerciseFields, LogQuery, NewUser, UserId,
)
from exercise_tracker.core.errors import FieldValidationError
from exercise_tracker.core.format_dates import normalize_duration

_NUMBER = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

DATE_FORMAT_HINT = "Use YYYY-MM-DD"

# Largest LIMIT every supported driver binds; anything above it means "all rows"
MAX_LIMIT = 2**31 - 1


def _as_text(value: Any) -> str | None:
    """Normalize a raw field to stripped text; None when absent or blank."""
    if value is None:
        return None
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    text = text.strip()
    return text or None


def parse_number(value: Any) -> float | None:
    """Numeric coercion of a raw field. None when not a finite number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    else:
        text = _as_text(value)
        if text is None or not _NUMBER.match(text):
            return None
        number = float(text)
    if not math.isfinite(number):
        return None
    return number


def parse_calendar_date(value: Any) -> date | None:
    """Parse YYYY-MM-DD (or a full ISO timestamp) to a date. None when invalid."""
    text = _as_text(value)
    if text is None:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def parse_user_id(raw: str) -> UserId | None:
    """Path identifier to UserId. Malformed identifiers resolve to None."""
    try:
        return UserId(UUID(raw.strip()))
    except (ValueError, AttributeError):
        return None


def parse_new_user(payload: Mapping[str, Any]) -> NewUser:
    username = _as_text(payload.get("username"))
    if username is None:
        raise FieldValidationError("Username is required", "username")
    return NewUser(username=username)


def parse_exercise_fields(payload: Mapping[str, Any]) -> ExerciseFields:
    """Presence check for description/duration, then duration coercion."""
    description = _as_text(payload.get("description"))
    raw_duration = payload.get("duration")
    if description is None or _as_text(raw_duration) is None:
        raise FieldValidationError(
            "Description and duration are required", "description",
        )

    duration = parse_number(raw_duration)
    if duration is None:
        raise FieldValidationError("Duration must be a number", "duration")

    return ExerciseFields(
        description=description,
        duration=normalize_duration(duration),
        raw_date=_as_text(payload.get("date")),
    )


def resolve_exercise_date(raw_date: str | None, today: date) -> date:
    """Validated exercise date; `today` when no date was supplied."""
    if raw_date is None:
        return today
    parsed = parse_calendar_date(raw_date)
    if parsed is None:
        raise FieldValidationError(
            f"Invalid date format. {DATE_FORMAT_HINT}", "date",
        )
    return parsed


def _parse_bound(params: Mapping[str, Any], name: str) -> date | None:
    raw = _as_text(params.get(name))
    if raw is None:
        return None
    parsed = parse_calendar_date(raw)
    if parsed is None:
        raise FieldValidationError(
            f'Invalid "{name}" date format. {DATE_FORMAT_HINT}', name,
        )
    return parsed


def parse_limit(value: Any) -> int | None:
    if _as_text(value) is None:
        return None
    number = parse_number(value)
    if number is None or number <= 0 or not number.is_integer():
        raise FieldValidationError("Limit must be a positive number", "limit")
    return min(int(number), MAX_LIMIT)


def parse_log_query(params: Mapping[str, Any]) -> LogQuery:
    """Validate from, to and limit, in that order."""
    date_from = _parse_bound(params, "from")
    date_to = _parse_bound(params, "to")
    limit = parse_limit(params.get("limit"))
    return LogQuery(date_from=date_from, date_to=date_to, limit=limit)
