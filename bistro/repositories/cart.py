"""Cart repository for database operations"""

from typing import List

from pymongo.database import Database

from bistro.models.entities import CartItem
from .base import BaseRepository, CollectionName


class CartRepository(BaseRepository[CartItem]):
    def __init__(self, db: Database):
        super().__init__(db, CollectionName.CARTS, CartItem)

    def list_by_email(self, email: str) -> List[CartItem]:
        """List the cart items owned by a user"""
        return self.find_many({"email": email}, sort=[("_id", 1)])
