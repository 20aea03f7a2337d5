"""Users Routes — user registration/listing, exercise logging, and exercise logs.

Invariants:
    - Handlers only read input and delegate to ExerciseLogService
    - user_id path parameter is passed through as text; the service resolves it
      (malformed ids are "User not found", not a 422)

Design Decisions:
    - Registration returns 200 for both new and existing usernames: the operation
      is lookup-or-create, so the status does not reveal which path ran
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query

from exercise_tracker.api.dependencies import (
    get_exercise_log_service, read_payload,
)
from exercise_tracker.schemas.exercise import ExerciseResponse, LogResponse
from exercise_tracker.schemas.user import UserResponse
from exercise_tracker.services.exercise_log import ExerciseLogService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse)
async def register_user(
    payload: dict[str, Any] = Depends(read_payload),
    service: ExerciseLogService = Depends(get_exercise_log_service),
):
    """Create a user, or return the existing one with the same username."""
    return await service.register_user(payload)


@router.get("", response_model=list[UserResponse])
async def list_users(
    service: ExerciseLogService = Depends(get_exercise_log_service),
):
    return await service.list_users()


@router.post("/{user_id}/exercises", response_model=ExerciseResponse)
async def log_exercise(
    user_id: str,
    payload: dict[str, Any] = Depends(read_payload),
    service: ExerciseLogService = Depends(get_exercise_log_service),
):
    """Log an exercise; date defaults to today."""
    return await service.log_exercise(user_id, payload)


@router.get("/{user_id}/logs", response_model=LogResponse)
async def get_exercise_log(
    user_id: str,
    date_from: str | None = Query(None, alias="from"),
    date_to: str | None = Query(None, alias="to"),
    limit: str | None = Query(None),
    service: ExerciseLogService = Depends(get_exercise_log_service),
):
    """Exercise log sorted by date, optionally bounded by from/to and capped by limit."""
    params = {"from": date_from, "to": date_to, "limit": limit}
    return await service.fetch_log(user_id, params)
