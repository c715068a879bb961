"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import Role, UserId


class User(DomainModel):
    """Registered user.

    ``password`` always holds a bcrypt hash once the user has been saved.
    """

    id: UserId
    email: str
    username: str = Field(min_length=3, max_length=20)
    password: str
    name: Optional[str] = None
    last_name: Optional[str] = None
    bio: Optional[str] = None
    role: Role = Role.USER
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN
