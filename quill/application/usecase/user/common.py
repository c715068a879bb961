"""Models and validators shared by user use cases."""

from datetime import datetime

from pydantic import BaseModel

from quill.domain.model import User
from quill.domain.value import Role
from quill.util.password import MAX_PASSWORD_BYTES, fits_bcrypt


def check_password_bytes(password: str) -> str:
    """Validate that a new password can be hashed by bcrypt.

    Field length limits count characters; bcrypt counts UTF-8 bytes.
    """
    if not fits_bcrypt(password):
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return password


class UserResponse(BaseModel):
    """Public view of a user. Never includes the password hash."""

    id: str
    email: str
    username: str
    name: str | None
    last_name: str | None
    bio: str | None
    role: Role
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            email=user.email,
            username=user.username,
            name=user.name,
            last_name=user.last_name,
            bio=user.bio,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
