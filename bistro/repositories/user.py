"""User repository for database operations"""

from typing import List, Optional

from pymongo.database import Database
from pymongo.results import UpdateResult

from bistro.models.entities import ADMIN_ROLE, User
from .base import BaseRepository, CollectionName


class UserRepository(BaseRepository[User]):
    """Repository for user entities"""

    def __init__(self, db: Database):
        super().__init__(db, CollectionName.USERS, User)

    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email"""
        return self.find_one({"email": email})

    def list_all(self) -> List[User]:
        return self.find_many({}, sort=[("_id", 1)])

    def promote_to_admin(self, user_id: str) -> UpdateResult:
        return self.update_one(user_id, {"role": ADMIN_ROLE})
