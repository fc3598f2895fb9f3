"""Shared builders for tests: throwaway databases and an app wired to them."""

import random
import unittest
from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from roster.core.database import build_engine, get_db, init_db
from roster.core.security import USER_COOKIE_NAME
from roster.core.tokens import TokenGenerator
from roster.main import create_app


def make_database(url: str = "sqlite://") -> tuple[Engine, sessionmaker]:
    """Fresh database with the schema created; returns the engine and a bound sessionmaker."""
    engine = build_engine(url)
    init_db(engine)
    return engine, sessionmaker(autocommit=False, autoflush=False, bind=engine)


class DatabaseTestCase(unittest.TestCase):
    """Gives each test its own in-memory database and a seeded token generator."""

    def setUp(self) -> None:
        self.engine, self.SessionTest = make_database()
        self.db = self.SessionTest()
        self.generator = TokenGenerator(random.Random(1234))

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()


class AppTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient whose get_db points at the test database."""

    def setUp(self) -> None:
        super().setUp()
        self.app = create_app(self.generator)

        def override_get_db() -> Generator[Session, None, None]:
            db = self.SessionTest()
            try:
                yield db
            finally:
                db.close()

        self.app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(self.app, follow_redirects=False)

    def signup(self, username: str, password: str = "password1", confirm: str | None = None):
        return self.client.post(
            "/signup",
            data={
                "username": username,
                "password": password,
                "confirm_password": password if confirm is None else confirm,
            },
        )

    def login(self, username: str, password: str = "password1"):
        return self.client.post("/login", data={"username": username, "password": password})

    def session_cookie(self) -> str | None:
        return self.client.cookies.get(USER_COOKIE_NAME)
