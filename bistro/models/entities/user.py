"""User entity - represents a user account in the database"""

from typing import Optional

from .base import BaseEntity

ADMIN_ROLE = "admin"


class User(BaseEntity):
    email: str
    name: Optional[str] = None
    photo: Optional[str] = None
    role: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE
