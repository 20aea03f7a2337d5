"""Domain Types — typed records produced by input parsing, consumed by the service.

Invariants:
    - UserId wraps UUID; never pass raw path strings into the service past parsing
    - Records are frozen: once validated, input never mutates
    - Duration is a finite number of minutes (int when integral)

Design Decisions:
    - NewType for identities: zero runtime cost, full type-checker support
    - Frozen dataclasses over Pydantic for internal records: Pydantic stays at the
      HTTP boundary (schemas/), core stays dependency-free
"""

from dataclasses import dataclass
from datetime import date
from typing import NewType, Union
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

Duration = Union[int, float]


# ─── Validated Records ───────────────────────────────────────────

@dataclass(frozen=True)
class NewUser:
    """Registration request after validation."""
    username: str


@dataclass(frozen=True)
class ExerciseFields:
    """Exercise body after the presence and duration checks.

    raw_date is kept unparsed: the date is validated only after the
    user lookup succeeds.
    """
    description: str
    duration: Duration
    raw_date: str | None


@dataclass(frozen=True)
class NewExercise:
    """Exercise ready to persist."""
    user_id: UserId
    description: str
    duration: Duration
    date: date


@dataclass(frozen=True)
class LogQuery:
    """Log filter: inclusive date bounds and an optional result cap."""
    date_from: date | None = None
    date_to: date | None = None
    limit: int | None = None


@dataclass(frozen=True)
class UserRecord:
    """User as read from the store."""
    id: UserId
    username: str


@dataclass(frozen=True)
class ExerciseRecord:
    """Exercise as read from the store."""
    description: str
    duration: Duration
    date: date
