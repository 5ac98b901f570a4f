"""Shared setup for API tests: an in-memory MongoDB and a mocked gateway."""

import unittest
from unittest.mock import MagicMock

import mongomock
from fastapi.testclient import TestClient

from bistro.api.deps import get_payment_gateway
from bistro.database.mongo import ensure_indexes, get_db
from bistro.main import create_app
from bistro.services.auth_service import create_access_token


class ApiTestCase(unittest.TestCase):
    def setUp(self):
        self.db = mongomock.MongoClient()["bistro_test"]
        ensure_indexes(self.db)
        self.gateway = MagicMock()

        self.app = create_app()
        self.app.dependency_overrides[get_db] = lambda: self.db
        self.app.dependency_overrides[get_payment_gateway] = lambda: self.gateway
        # Not used as a context manager: the lifespan would dial a real MongoDB
        self.client = TestClient(self.app)

    def tearDown(self):
        self.app.dependency_overrides.clear()

    def auth_headers(self, email: str) -> dict:
        return {"Authorization": f"Bearer {create_access_token(email)}"}

    def add_user(self, email: str, role=None):
        doc = {"email": email, "name": email.split("@")[0]}
        if role:
            doc["role"] = role
        return self.db.users.insert_one(doc).inserted_id

    def add_admin(self, email: str = "admin@bistro.com"):
        self.add_user(email, role="admin")
        return email
