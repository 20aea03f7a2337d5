"""SQL Repositories — AsyncSession-backed implementations of the core store protocols.

Invariants:
    - Every write commits immediately (one logical write per operation, no multi-call transactions)
    - A uniqueness violation on users.username becomes UsernameConflictError after rollback
    - Reads return core records, never ORM instances

Design Decisions:
    - Repositories receive the request's AsyncSession (from get_db), they do not open their own
    - Log ordering: date ascending, created_at as tie-breaker; limit applied after ordering
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.domain_types import (
    ExerciseRecord, LogQuery, NewExercise, UserId, UserRecord,
)
from exercise_tracker.core.errors import UsernameConflictError
from exercise_tracker.core.format_dates import normalize_duration
from exercise_tracker.models.exercise import Exercise
from exercise_tracker.models.user import User

logger = logging.getLogger(__name__)


def _to_user_record(user: User) -> UserRecord:
    return UserRecord(id=UserId(user.id), username=user.username)


def _to_exercise_record(exercise: Exercise) -> ExerciseRecord:
    return ExerciseRecord(
        description=exercise.description,
        duration=normalize_duration(exercise.duration),
        date=exercise.date,
    )


class SqlUserRepository:
    """UserRepository over the users table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def get_by_id(self, user_id: UserId) -> UserRecord | None:
        result = await self._db.execute(
            select(User).where(User.id == user_id),
        )
        user = result.scalar_one_or_none()
        return _to_user_record(user) if user else None

    async def get_by_username(self, username: str) -> UserRecord | None:
        result = await self._db.execute(
            select(User).where(User.username == username),
        )
        user = result.scalar_one_or_none()
        return _to_user_record(user) if user else None

    async def create(self, username: str) -> UserRecord:
        user = User(username=username)
        self._db.add(user)
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            logger.warning(
                f"Username uniqueness violated on insert: {e.orig}",
                extra={"username": username},
            )
            raise UsernameConflictError(username)
        await self._db.refresh(user)
        return _to_user_record(user)

    async def list_all(self) -> list[UserRecord]:
        result = await self._db.execute(
            select(User).order_by(User.created_at.asc(), User.username.asc()),
        )
        return [_to_user_record(u) for u in result.scalars().all()]


class SqlExerciseRepository:
    """ExerciseRepository over the exercises table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, exercise: NewExercise) -> ExerciseRecord:
        row = Exercise(
            user_id=exercise.user_id,
            description=exercise.description,
            duration=float(exercise.duration),
            date=exercise.date,
        )
        self._db.add(row)
        await self._db.commit()
        await self._db.refresh(row)
        return _to_exercise_record(row)

    async def find_for_user(
        self, user_id: UserId, query: LogQuery,
    ) -> list[ExerciseRecord]:
        stmt = select(Exercise).where(Exercise.user_id == user_id)
        if query.date_from is not None:
            stmt = stmt.where(Exercise.date >= query.date_from)
        if query.date_to is not None:
            stmt = stmt.where(Exercise.date <= query.date_to)
        stmt = stmt.order_by(Exercise.date.asc(), Exercise.created_at.asc())
        if query.limit is not None:
            stmt = stmt.limit(query.limit)

        result = await self._db.execute(stmt)
        return [_to_exercise_record(e) for e in result.scalars().all()]
