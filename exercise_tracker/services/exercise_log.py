"""Exercise Log Service — register users, log exercises, and read filtered exercise logs.

Invariants:
    - Validation completes before any store write
    - Validation order per operation is fixed (first failure wins):
        log_exercise: presence -> duration number -> user exists -> date
        fetch_log:    user exists -> from -> to -> limit
    - register_user checks for an existing username BEFORE inserting; a uniqueness
      violation on insert (concurrent registration) surfaces as 409
    - Unclassified failures become InternalError with the operation's message;
      the cause is logged, never returned

Design Decisions:
    - Repositories injected (core protocols): the SQL store in production, fakes in tests
    - `today` injected as a callable so the default exercise date is testable
    - Store calls awaited sequentially; no operation needs parallel sub-tasks
"""

import logging
from collections.abc import Callable, Mapping
from datetime import date
from typing import Any

from exercise_tracker.core.domain_types import NewExercise, UserRecord
from exercise_tracker.core.errors import (
    ExerciseTrackerError, InternalError, UserNotFoundError,
)
from exercise_tracker.core.parse_input import (
    parse_exercise_fields, parse_log_query, parse_new_user, parse_user_id,
    resolve_exercise_date,
)
from exercise_tracker.core.repository_protocols import (
    ExerciseRepository, UserRepository,
)
from exercise_tracker.schemas.exercise import ExerciseResponse, LogResponse
from exercise_tracker.schemas.user import UserResponse

logger = logging.getLogger(__name__)


class ExerciseLogService:
    """The four request operations over users and exercises."""

    def __init__(
        self,
        users: UserRepository,
        exercises: ExerciseRepository,
        today: Callable[[], date] = date.today,
    ):
        self._users = users
        self._exercises = exercises
        self._today = today

    async def register_user(self, payload: Mapping[str, Any]) -> UserResponse:
        """Return the existing user for this username, or create one."""
        new_user = parse_new_user(payload)
        try:
            existing = await self._users.get_by_username(new_user.username)
            if existing:
                logger.info(
                    "Username already registered, returning existing user",
                    extra={"user_id": existing.id, "username": existing.username},
                )
                return UserResponse.from_record(existing)

            created = await self._users.create(new_user.username)
        except ExerciseTrackerError:
            raise
        except Exception as e:
            raise _internal_error("User creation failed", "register_user", e)

        logger.info(
            "User registered",
            extra={"user_id": created.id, "username": created.username},
        )
        return UserResponse.from_record(created)

    async def list_users(self) -> list[UserResponse]:
        try:
            users = await self._users.list_all()
        except Exception as e:
            raise _internal_error(
                "Failed to retrieve user list", "list_users", e,
            )
        return [UserResponse.from_record(u) for u in users]

    async def log_exercise(
        self, raw_user_id: str, payload: Mapping[str, Any],
    ) -> ExerciseResponse:
        fields = parse_exercise_fields(payload)
        try:
            user = await self._require_user(raw_user_id)
            exercise = NewExercise(
                user_id=user.id,
                description=fields.description,
                duration=fields.duration,
                date=resolve_exercise_date(fields.raw_date, self._today()),
            )
            saved = await self._exercises.create(exercise)
        except ExerciseTrackerError:
            raise
        except Exception as e:
            raise _internal_error(
                "Exercise could not be added", "log_exercise", e,
            )

        logger.info(
            f"Exercise logged for {saved.date.isoformat()}",
            extra={"user_id": user.id},
        )
        return ExerciseResponse.from_records(user, saved)

    async def fetch_log(
        self, raw_user_id: str, params: Mapping[str, Any],
    ) -> LogResponse:
        try:
            user = await self._require_user(raw_user_id)
            query = parse_log_query(params)
            exercises = await self._exercises.find_for_user(user.id, query)
        except ExerciseTrackerError:
            raise
        except Exception as e:
            raise _internal_error("Could not retrieve logs", "fetch_log", e)
        return LogResponse.from_records(user, exercises)

    async def _require_user(self, raw_user_id: str) -> UserRecord:
        user_id = parse_user_id(raw_user_id)
        user = await self._users.get_by_id(user_id) if user_id is not None else None
        if user is None:
            raise UserNotFoundError(raw_user_id)
        return user


def _internal_error(
    message: str, operation: str, cause: Exception,
) -> InternalError:
    logger.error(
        f"{operation} failed: {cause}",
        exc_info=cause,
        extra={"operation": operation},
    )
    return InternalError(message, operation)
