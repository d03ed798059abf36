"""CLI: python -m coinhub.scripts.create_user."""

import unittest
from unittest.mock import patch

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from coinhub.models import Base, User
from coinhub.scripts.create_user import main


class TestCreateUserScript(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, autocommit=False)
        patcher = patch("coinhub.scripts.create_user.SessionLocal", self.SessionLocal)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self.engine.dispose()

    def _user(self, username: str) -> User | None:
        with self.SessionLocal() as db:
            return db.query(User).filter(User.username == username).first()

    def test_creates_admin_with_admin_balance(self) -> None:
        self.assertEqual(main(["boss", "boss@example.com", "pw", "admin"]), 0)
        user = self._user("boss")
        self.assertEqual((user.role, user.coins), ("admin", 999999))

    def test_creates_user_with_explicit_coins(self) -> None:
        self.assertEqual(main(["bob", "bob@example.com", "pw", "--coins", "5"]), 0)
        self.assertEqual(self._user("bob").coins, 5)

    def test_duplicate_fails(self) -> None:
        main(["bob", "bob@example.com", "pw"])
        with patch("sys.stderr"):
            self.assertEqual(main(["bob", "other@example.com", "pw"]), 1)

    def test_invalid_input(self) -> None:
        with patch("sys.stderr"):
            self.assertEqual(main(["bob", "no-at-sign", "pw"]), 1)
            self.assertEqual(main(["bob", "bob@example.com", "pw", "--coins", "-1"]), 1)
        self.assertIsNone(self._user("bob"))


if __name__ == "__main__":
    unittest.main()
