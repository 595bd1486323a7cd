"""Shared fixtures: in-memory SQLite sessions and an API client bound to them."""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lostfound.core.database import get_db
from lostfound.main import app
from lostfound.models import Base

PASSWORD = "pw123456"


def make_engine() -> Engine:
    """Fresh in-memory database with all tables; one shared connection."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


class DbTestCase(unittest.TestCase):
    """Gives each test its own empty database and an open session (self.db)."""

    def setUp(self) -> None:
        self.engine = make_engine()
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.db: Session = self.session_factory()

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()


class ApiTestCase(DbTestCase):
    """DbTestCase plus a TestClient whose get_db yields sessions on the test database."""

    def setUp(self) -> None:
        super().setUp()

        def override_get_db():
            db = self.session_factory()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        super().tearDown()

    def register(self, username: str, email: str, password: str = PASSWORD):
        return self.client.post(
            "/auth/register",
            json={"username": username, "email": email, "password": password},
        )

    def login(self, email: str, password: str = PASSWORD):
        return self.client.post("/auth/login", json={"email": email, "password": password})

    def signup(self, username: str, email: str) -> tuple[int, dict[str, str]]:
        """Register and log in; return (user id, Authorization headers)."""
        self.assertEqual(self.register(username, email).status_code, 200)
        body = self.login(email).json()
        return body["user"]["id"], {"Authorization": f"Bearer {body['token']}"}

    def create_item(self, headers: dict[str, str], **fields):
        data = {
            "name": "Black Backpack",
            "description": "Left at bus stop",
            "location": "Main St",
            "type": "lost",
        }
        data.update(fields)
        return self.client.post("/items", data=data, headers=headers)
