"""Exercise ORM — persists one logged exercise.

Invariants:
    - user_id is a weak reference: no ForeignKey, existence checked by the service
    - date is a calendar date (no time component), so range bounds are whole days
    - Rows are never updated or deleted

Design Decisions:
    - Composite index (user_id, date): the log query filters on both and sorts by date
    - created_at breaks ties between exercises logged for the same date
"""

import uuid
from datetime import date as calendar_date, datetime, timezone

from sqlalchemy import Text, Float, Date, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from exercise_tracker.db.base import Base


class Exercise(Base):
    """Exercise entry belonging to a user."""
    __tablename__ = "exercises"
    __table_args__ = (
        Index("ix_exercises_user_id_date", "user_id", "date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[calendar_date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
