"""Boundary Protocols — contracts between the service and the store.

Invariants:
    - The service NEVER imports from infrastructure — dependency arrows point inward only
    - All store IO accessed through Protocol types
    - Implementations provided by the shell via dependency injection (SQL in
      production, in-memory fakes in tests)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - UserRepository.create raises UsernameConflictError on a uniqueness violation;
      every other store failure propagates as-is for the service to classify
"""

from typing import Protocol

from exercise_tracker.core.domain_types import (
    ExerciseRecord, LogQuery, NewExercise, UserId, UserRecord,
)


class UserRepository(Protocol):
    """Contract for user persistence."""
    async def get_by_id(self, user_id: UserId) -> UserRecord | None: ...
    async def get_by_username(self, username: str) -> UserRecord | None: ...
    async def create(self, username: str) -> UserRecord: ...
    async def list_all(self) -> list[UserRecord]: ...


class ExerciseRepository(Protocol):
    """Contract for exercise persistence."""
    async def create(self, exercise: NewExercise) -> ExerciseRecord: ...
    async def find_for_user(
        self, user_id: UserId, query: LogQuery,
    ) -> list[ExerciseRecord]: ...
