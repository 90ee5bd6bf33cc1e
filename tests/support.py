"""Shared base for API tests: fresh schema per test and small request helpers."""

import unittest
from typing import Any

from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.database import engine
from app.main import app
from app.models import Base

API = settings.API_V1_PREFIX
DEFAULT_PASSWORD = "password123"
# Well-formed integer far beyond any INTEGER primary key
OUT_OF_RANGE_ID = 2**70


def recipe_payload(**overrides: Any) -> dict[str, Any]:
    """Minimal valid recipe body in wire (camelCase) format."""
    body: dict[str, Any] = {
        "title": "Test Pasta",
        "description": "Delicious test pasta",
        "ingredients": ["Pasta", "Tomato sauce"],
        "instructions": ["Boil pasta", "Add sauce"],
        "cookTime": 30,
        "servings": 4,
        "difficulty": "MEDIUM",
        "category": "MAIN_COURSE",
    }
    body.update(overrides)
    return body


class ApiTestCase(unittest.TestCase):
    """Creates all tables before each test and drops them after."""

    def setUp(self) -> None:
        Base.metadata.create_all(bind=engine)
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self.client.close()
        Base.metadata.drop_all(bind=engine)

    def signup(
        self,
        username: str,
        email: str | None = None,
        password: str = DEFAULT_PASSWORD,
        full_name: str | None = None,
    ) -> dict[str, Any]:
        """Register a user and return the AuthResponse body."""
        response = self.client.post(
            f"{API}/auth/signup",
            json={
                "username": username,
                "email": email or f"{username}@example.com",
                "password": password,
                "fullName": full_name,
            },
        )
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    @staticmethod
    def auth(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    def create_recipe(self, token: str, **overrides: Any) -> dict[str, Any]:
        response = self.client.post(
            f"{API}/recipes", json=recipe_payload(**overrides), headers=self.auth(token)
        )
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def add_review(
        self, token: str, recipe_id: int, rating: int = 4, comment: str = "Great recipe!"
    ) -> dict[str, Any]:
        response = self.client.post(
            f"{API}/recipes/{recipe_id}/reviews",
            json={"rating": rating, "comment": comment},
            headers=self.auth(token),
        )
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()
