"""Shared fixtures for API tests: in-memory SQLite wired into the app through get_db."""

import unittest
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from coinhub.core.database import get_db
from coinhub.main import app
from coinhub.models import Base, User
from coinhub.services.accounts import create_user


class ApiTestCase(unittest.TestCase):
    """Fresh database and TestClient per test."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, autocommit=False)

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self.engine.dispose()

    def register(self, username: str, email: str, password: str) -> Any:
        return self.client.post(
            "/api/auth/register",
            json={"username": username, "email": email, "password": password},
        )

    def login(self, username: str, password: str) -> Any:
        return self.client.post(
            "/api/auth/login", json={"username": username, "password": password}
        )

    def token_for(self, username: str, password: str) -> str:
        resp = self.login(username, password)
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()["token"]

    def create_admin(self, username: str = "root", password: str = "rootpw") -> str:
        """Insert an admin directly and return a token for it."""
        with self.SessionLocal() as db:
            create_user(db, username, f"{username}@example.com", password, coins=999999, role="admin")
        return self.token_for(username, password)

    def get_user_row(self, username: str) -> User | None:
        with self.SessionLocal() as db:
            user = db.query(User).filter(User.username == username).first()
            if user is not None:
                db.expunge(user)
            return user

    def set_status(self, username: str, status: str) -> None:
        with self.SessionLocal() as db:
            db.query(User).filter(User.username == username).update({"status": status})
            db.commit()


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
