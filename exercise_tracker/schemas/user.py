"""User Schemas — public projection of a user.

Invariants:
    - Only username and id are ever exposed
"""

from pydantic import BaseModel

from exercise_tracker.core.domain_types import UserRecord


class UserResponse(BaseModel):
    """User as returned by registration and listing."""
    username: str
    id: str

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserResponse":
        return cls(username=user.username, id=str(user.id))
