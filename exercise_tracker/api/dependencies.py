"""Request Dependencies — service wiring and body reading for route handlers.

Invariants:
    - One ExerciseLogService per request, bound to that request's AsyncSession
    - Bodies may be JSON objects or HTML form fields; anything else is an empty payload
    - Malformed JSON is a 400, never a 500

Design Decisions:
    - Body read manually instead of a Pydantic body model: field validation order and
      messages belong to core/parse_input.py, not to FastAPI's generic 422 output
"""

import json
from typing import Any

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.errors import FieldValidationError
from exercise_tracker.infrastructure.database import get_db
from exercise_tracker.infrastructure.repositories import (
    SqlExerciseRepository, SqlUserRepository,
)
from exercise_tracker.services.exercise_log import ExerciseLogService

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_exercise_log_service(
    db: AsyncSession = Depends(get_db),
) -> ExerciseLogService:
    return ExerciseLogService(
        users=SqlUserRepository(db),
        exercises=SqlExerciseRepository(db),
    )


async def read_payload(request: Request) -> dict[str, Any]:
    """Request body as a flat dict of fields."""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        return {k: v for k, v in form.items() if isinstance(v, str)}

    body = await request.body()
    if not body.strip():
        return {}
    try:
        data = json.loads(body)
    except ValueError:
        raise FieldValidationError(
            "Request body must be valid JSON or form data", "body",
        )
    return data if isinstance(data, dict) else {}
