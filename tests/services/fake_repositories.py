"""In-memory repositories implementing the core store protocols for service tests."""

import uuid
from datetime import date

from exercise_tracker.core.domain_types import (
    ExerciseRecord, LogQuery, NewExercise, UserId, UserRecord,
)
from exercise_tracker.core.errors import UsernameConflictError


class FakeUserRepository:
    def __init__(self):
        self.users: list[UserRecord] = []
        self.create_calls = 0

    async def get_by_id(self, user_id: UserId) -> UserRecord | None:
        return next((u for u in self.users if u.id == user_id), None)

    async def get_by_username(self, username: str) -> UserRecord | None:
        return next((u for u in self.users if u.username == username), None)

    async def create(self, username: str) -> UserRecord:
        self.create_calls += 1
        if any(u.username == username for u in self.users):
            raise UsernameConflictError(username)
        user = UserRecord(id=UserId(uuid.uuid4()), username=username)
        self.users.append(user)
        return user

    async def list_all(self) -> list[UserRecord]:
        return list(self.users)


class RacingUserRepository(FakeUserRepository):
    """Pre-check misses, insert hits the uniqueness constraint."""

    async def get_by_username(self, username: str) -> UserRecord | None:
        return None


class FakeExerciseRepository:
    def __init__(self):
        self.rows: list[tuple[UserId, ExerciseRecord]] = []

    async def create(self, exercise: NewExercise) -> ExerciseRecord:
        record = ExerciseRecord(
            description=exercise.description,
            duration=exercise.duration,
            date=exercise.date,
        )
        self.rows.append((exercise.user_id, record))
        return record

    async def find_for_user(
        self, user_id: UserId, query: LogQuery,
    ) -> list[ExerciseRecord]:
        matches = [
            r for uid, r in self.rows
            if uid == user_id
            and (query.date_from is None or r.date >= query.date_from)
            and (query.date_to is None or r.date <= query.date_to)
        ]
        matches.sort(key=lambda r: r.date)
        return matches[:query.limit] if query.limit else matches


class BrokenRepository:
    """Every call fails like an unreachable store."""

    def __getattr__(self, name):
        async def _fail(*args, **kwargs):
            raise ConnectionError("store unreachable")
        return _fail


FIXED_TODAY = date(2024, 3, 15)
