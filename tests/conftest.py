# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["SEED_DEFAULT_TAGS"] = "false"

from threadline.core.security import create_access_token
from threadline.db.session import Base
from threadline.db.session import get_db as app_get_session
from threadline.main import app as fastapi_app
from threadline.models import Post, User
from threadline.models.user import ROLE_ADMIN, ROLE_USER
from threadline.services import PostStore

TEST_DB_URL = "sqlite://"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Services commit, so every test starts from empty tables instead.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


def _make_user(db_session: Session, email: str, name: str, role: str) -> User:
    user = User(
        email=email,
        name=name,
        avatar=f"https://img.example.com/{name.lower()}.png",
        role=role,
        membership="no",
        user_status="bronze",
        posts=0,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture()
def test_user(db_session: Session) -> User:
    """Create and return a persisted regular user."""
    return _make_user(db_session, "alice@example.com", "Alice", ROLE_USER)


@pytest.fixture()
def other_user(db_session: Session) -> User:
    """Create and return a second regular user."""
    return _make_user(db_session, "bob@example.com", "Bob", ROLE_USER)


@pytest.fixture()
def admin_user(db_session: Session) -> User:
    """Create and return a user holding the admin role."""
    return _make_user(db_session, "mod@example.com", "Mod", ROLE_ADMIN)


@pytest.fixture()
def make_headers() -> Callable[..., dict[str, str]]:
    """Return a factory producing bearer headers for an arbitrary email."""

    def _make(email: str, name: str = "", picture: str = "") -> dict[str, str]:
        token = create_access_token(email, name=name or None, picture=picture or None)
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture()
def auth_token(test_user: User, make_headers) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return make_headers(test_user.email, test_user.name, test_user.avatar)


@pytest.fixture()
def other_auth_token(other_user: User, make_headers) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    return make_headers(other_user.email, other_user.name)


@pytest.fixture()
def admin_auth_token(admin_user: User, make_headers) -> dict[str, str]:
    """Return authorization headers for the admin user."""
    return make_headers(admin_user.email, admin_user.name)


@pytest.fixture()
def post_store(db_session: Session) -> PostStore:
    return PostStore(db_session)


@pytest.fixture()
def test_post(post_store: PostStore, test_user: User) -> Post:
    """Create a baseline post for tests."""
    return post_store.create(
        author_name=test_user.name,
        author_email=test_user.email,
        author_image=test_user.avatar,
        title="Why does my loop never end?",
        description="The counter is never incremented.",
        tag="loop",
    )
