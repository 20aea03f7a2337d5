"""ORM Models — SQLAlchemy declarative models for users and exercises.

Invariants:
    - All models inherit from Base (db/base.py)
    - Exercises reference users by id only (no FK, no cascade)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata knows every table before create_all runs
"""

from exercise_tracker.models.user import User  # noqa: F401
from exercise_tracker.models.exercise import Exercise  # noqa: F401
