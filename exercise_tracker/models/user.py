"""User ORM — persists a registered username.

Invariants:
    - id is UUID primary key (generated on insert)
    - username is non-nullable and unique across all users
    - Rows are never updated or deleted

Design Decisions:
    - No relationship() to exercises: the link is a lookup key only
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from exercise_tracker.db.base import Base


class User(Base):
    """Registered user."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        Text, nullable=False, unique=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
