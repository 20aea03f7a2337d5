"""Exercise Schemas — exercise confirmation and exercise log responses.

Invariants:
    - Dates are human-readable strings ("Mon Jan 01 2024"), never ISO
    - LogResponse.count always equals len(LogResponse.log)
    - duration keeps int/float distinction (30 stays 30, not 30.0)
"""

from pydantic import BaseModel, model_validator

from exercise_tracker.core.domain_types import ExerciseRecord, UserRecord
from exercise_tracker.core.format_dates import format_human_date


class ExerciseResponse(BaseModel):
    """Confirmation for a logged exercise, keyed by the owning user's id."""
    id: str
    username: str
    date: str
    duration: int | float
    description: str

    @classmethod
    def from_records(
        cls, user: UserRecord, exercise: ExerciseRecord,
    ) -> "ExerciseResponse":
        return cls(
            id=str(user.id),
            username=user.username,
            date=format_human_date(exercise.date),
            duration=exercise.duration,
            description=exercise.description,
        )


class LogEntry(BaseModel):
    """One exercise inside a log."""
    description: str
    duration: int | float
    date: str

    @classmethod
    def from_record(cls, exercise: ExerciseRecord) -> "LogEntry":
        return cls(
            description=exercise.description,
            duration=exercise.duration,
            date=format_human_date(exercise.date),
        )


class LogResponse(BaseModel):
    """A user's filtered exercise log."""
    id: str
    username: str
    count: int
    log: list[LogEntry]

    @model_validator(mode="after")
    def check_count_matches_log(self) -> "LogResponse":
        if self.count != len(self.log):
            raise ValueError("count must equal the number of log entries")
        return self

    @classmethod
    def from_records(
        cls, user: UserRecord, exercises: list[ExerciseRecord],
    ) -> "LogResponse":
        entries = [LogEntry.from_record(e) for e in exercises]
        return cls(
            id=str(user.id),
            username=user.username,
            count=len(entries),
            log=entries,
        )
