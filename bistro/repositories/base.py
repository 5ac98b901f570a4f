"""Base repository providing common MongoDB CRUD helpers."""

from abc import ABC
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar, Union

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.results import UpdateResult


class CollectionName(str, Enum):
    MENU = "menu"
    REVIEWS = "reviews"
    CARTS = "carts"
    USERS = "users"
    PAYMENTS = "payments"


T = TypeVar("T", bound=BaseModel)


class BaseRepository(ABC, Generic[T]):
    """Base repository providing common CRUD operations for MongoDB collections.

    Identifiers are parsed strictly: a malformed id raises
    ``bson.errors.InvalidId`` and surfaces as a store failure.
    """

    def __init__(
        self,
        db: Database,
        collection_name: Union[CollectionName, str],
        model_class: Type[T],
    ):
        self.db = db
        self.collection_name: str = (
            collection_name.value
            if isinstance(collection_name, CollectionName)
            else collection_name
        )
        self.collection: Collection = db[self.collection_name]
        self.model_class = model_class

    def find_by_id(self, entity_id: Union[str, ObjectId]) -> Optional[T]:
        doc = self.collection.find_one({"_id": self._to_object_id(entity_id)})
        return self._to_model(doc)

    def find_one(self, query: Dict[str, Any]) -> Optional[T]:
        doc = self.collection.find_one(query)
        return self._to_model(doc)

    def find_many(
        self,
        query: Dict[str, Any],
        sort: Optional[List[tuple]] = None,
    ) -> List[T]:
        cursor = self.collection.find(query)
        if sort:
            cursor = cursor.sort(sort)
        return [self._to_model(doc) for doc in cursor if doc]

    def insert_one(self, document: Union[T, Dict[str, Any]]) -> T:
        if isinstance(document, BaseModel):
            doc_dict = document.model_dump(by_alias=True, exclude_none=True)
        else:
            doc_dict = dict(document)
        doc_dict.setdefault("created_at", datetime.now(timezone.utc))

        result = self.collection.insert_one(doc_dict)
        doc_dict["_id"] = result.inserted_id
        return self._to_model(doc_dict)

    def update_one(
        self, entity_id: Union[str, ObjectId], updates: Dict[str, Any]
    ) -> UpdateResult:
        updates = {**updates, "updated_at": datetime.now(timezone.utc)}
        return self.collection.update_one(
            {"_id": self._to_object_id(entity_id)}, {"$set": updates}
        )

    def delete_one(self, entity_id: Union[str, ObjectId]) -> int:
        result = self.collection.delete_one({"_id": self._to_object_id(entity_id)})
        return result.deleted_count

    def delete_by_ids(self, entity_ids: Iterable[ObjectId]) -> int:
        identifiers = list(entity_ids)
        if not identifiers:
            return 0
        result = self.collection.delete_many({"_id": {"$in": identifiers}})
        return result.deleted_count

    def _to_model(self, doc: Optional[Dict[str, Any]]) -> Optional[T]:
        if not doc:
            return None
        return self.model_class.model_validate(doc)

    @staticmethod
    def _to_object_id(value: Union[str, ObjectId]) -> ObjectId:
        if isinstance(value, ObjectId):
            return value
        return ObjectId(value)

    @staticmethod
    def parse_object_ids(values: Iterable[str]) -> tuple[List[ObjectId], List[str]]:
        """Split raw ids into parsed ObjectIds and the ones that were malformed."""
        parsed: List[ObjectId] = []
        rejected: List[str] = []
        for value in values:
            try:
                parsed.append(ObjectId(value))
            except (InvalidId, TypeError):
                rejected.append(value)
        return parsed, rejected
