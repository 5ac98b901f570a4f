from typing import List

from pymongo.database import Database

from bistro.models.entities import Review
from .base import BaseRepository, CollectionName


class ReviewRepository(BaseRepository[Review]):
    def __init__(self, db: Database):
        super().__init__(db, CollectionName.REVIEWS, Review)

    def list_all(self) -> List[Review]:
        return self.find_many({}, sort=[("_id", 1)])
