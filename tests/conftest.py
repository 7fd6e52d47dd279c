"""Shared test fixtures.

Runs the app against an in-memory SQLite database and replaces the Firebase
authentication gate with a switchable logged-in user.
"""

import os
from collections.abc import Generator

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("APP_LOCALE", "ja")

import pytest  # noqa: E402
from fastapi import Depends, HTTPException  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from app.auth import get_current_user  # noqa: E402
from app.database import Base, SessionLocal, engine, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.messages import get_message  # noqa: E402
from app.models import User  # noqa: E402


class LoginStub:
    """Holds the ID of the user the fake authentication gate returns"""

    def __init__(self):
        self.user_id = None

    def login(self, user: User) -> None:
        self.user_id = user.id

    def logout(self) -> None:
        self.user_id = None


@pytest.fixture()
def db() -> Generator[Session, None, None]:
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def owner(db: Session) -> User:
    user = User(id=1, firebase_uid="uid-owner", username="testuser")
    db.add(user)
    db.commit()
    return user


@pytest.fixture()
def other_user(db: Session) -> User:
    user = User(id=2, firebase_uid="uid-other", username="another")
    db.add(user)
    db.commit()
    return user


@pytest.fixture()
def login_stub(db: Session) -> Generator[LoginStub, None, None]:
    stub = LoginStub()

    def fake_current_user(session: Session = Depends(get_db)) -> User:
        if stub.user_id is None:
            raise HTTPException(status_code=401, detail=get_message("not_authenticated"))
        return session.get(User, stub.user_id)

    app.dependency_overrides[get_current_user] = fake_current_user
    yield stub
    app.dependency_overrides.pop(get_current_user, None)


@pytest.fixture()
def client(login_stub: LoginStub, owner: User) -> Generator[TestClient, None, None]:
    """TestClient logged in as ``owner``"""
    login_stub.login(owner)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def create_schedule(client: TestClient):
    """POST a new schedule and return its ID from the redirect"""

    def _create(**overrides) -> str:
        body = {"scheduleName": "テスト予定1", "memo": "テストメモ1", "candidates": "テスト候補1"}
        body.update(overrides)
        res = client.post("/schedules", json=body, follow_redirects=False)
        assert res.status_code == 302
        return res.headers["location"].split("/schedules/")[1]

    return _create
