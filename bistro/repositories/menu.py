"""Menu repository for database operations"""

from typing import List

from pymongo.database import Database

from bistro.models.entities import MenuItem
from .base import BaseRepository, CollectionName


class MenuRepository(BaseRepository[MenuItem]):
    def __init__(self, db: Database):
        super().__init__(db, CollectionName.MENU, MenuItem)

    def list_all(self) -> List[MenuItem]:
        """List all menu items in insertion order"""
        return self.find_many({}, sort=[("_id", 1)])
