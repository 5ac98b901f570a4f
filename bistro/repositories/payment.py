from typing import List

from pymongo.database import Database

from bistro.models.entities import Payment
from .base import BaseRepository, CollectionName


class PaymentRepository(BaseRepository[Payment]):
    def __init__(self, db: Database):
        super().__init__(db, CollectionName.PAYMENTS, Payment)

    def list_by_email(self, email: str) -> List[Payment]:
        """Payments made by a user, newest first"""
        return self.find_many({"email": email}, sort=[("_id", -1)])
