"""Shared test cases: a fresh in-memory schema per test and an API client helper."""

import unittest
from typing import Any

from fastapi.testclient import TestClient

from aione.core.database import SessionLocal, engine
from aione.main import app
from aione.models import Base


class DatabaseTestCase(unittest.TestCase):
    """Creates all tables before each test and drops them afterwards."""

    def setUp(self) -> None:
        Base.metadata.create_all(engine)
        self.db = SessionLocal()

    def tearDown(self) -> None:
        self.db.close()
        Base.metadata.drop_all(engine)


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient and helpers for registering users."""

    def setUp(self) -> None:
        super().setUp()
        self.client = TestClient(app)

    def register(
        self,
        username: str = "alice",
        email: str = "alice@example.com",
        password: str = "secret123",
        role: str | None = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"username": username, "email": email, "password": password}
        if role is not None:
            body["role"] = role
        resp = self.client.post("/api/auth/register", json=body)
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def auth_headers(self, token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    def create_aircraft(self, token: str, **overrides: Any) -> dict[str, Any]:
        body: dict[str, Any] = {
            "tailNumber": "N12345",
            "model": "737-800",
            "manufacturer": "Boeing",
            "year": 2015,
        }
        body.update(overrides)
        resp = self.client.post("/api/aircraft", json=body, headers=self.auth_headers(token))
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["data"]
