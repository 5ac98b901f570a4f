"""MongoDB connection helpers.

The client is created once by the application lifespan and kept on
``app.state``; handlers receive the database through :func:`get_db`.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from fastapi import Request
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

from bistro.repositories.base import CollectionName

logger = logging.getLogger(__name__)


def create_client(uri: str, **kwargs: Any) -> MongoClient:
    """Build a MongoClient; PyMongo manages pooling behind it."""
    logger.info("Connecting to MongoDB at %s", uri.split("@")[-1])
    return MongoClient(uri, **kwargs)


def ensure_indexes(db: Database) -> None:
    """Create the indexes the API relies on."""
    db[CollectionName.USERS.value].create_index(
        [("email", ASCENDING)], unique=True
    )
    db[CollectionName.CARTS.value].create_index([("email", ASCENDING)])
    db[CollectionName.PAYMENTS.value].create_index([("email", ASCENDING)])
    logger.info("MongoDB indexes ensured")


def get_db(request: Request) -> Iterator[Database]:
    """
    FastAPI dependency that yields the shared database handle.
    """
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database not initialized; application lifespan not started")
    yield db
