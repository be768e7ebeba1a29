from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from datetime import UTC, datetime, timedelta
from itertools import count

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from commentbox.api.v1.dependencies import create_access_token
from commentbox.db.session import Base
from commentbox.db.session import get_db as app_get_session
from commentbox.main import app as fastapi_app
from commentbox.models import Comment, CommentStatus, Post, User

TEST_DB_URL = "sqlite://"
BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

_EMAIL_COUNTER = count(1)


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
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    session.begin_nested()

    @event.listens_for(session, "after_transaction_end")
    def restart_savepoint(sess: Session, trans) -> None:  # pragma: no cover - SQLAlchemy internals
        if trans.nested and not getattr(trans._parent, "nested", False):
            session.begin_nested()

    try:
        yield session
    finally:
        event.remove(session, "after_transaction_end", restart_savepoint)
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
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


def _create_user(db_session: Session, name: str) -> User:
    user = User(name=name, email=f"user{next(_EMAIL_COUNTER)}@example.com")
    db_session.add(user)
    db_session.flush()
    db_session.refresh(user)
    return user


def _headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture()
def post_author(db_session: Session) -> User:
    """Owner of the test post (U1)."""
    return _create_user(db_session, "Post Author")


@pytest.fixture()
def commenter(db_session: Session) -> User:
    """User leaving comments on the test post (U2)."""
    return _create_user(db_session, "Commenter")


@pytest.fixture()
def bystander(db_session: Session) -> User:
    """User with no relationship to the post or its comments (U3)."""
    return _create_user(db_session, "Bystander")


@pytest.fixture()
def author_headers(post_author: User) -> dict[str, str]:
    return _headers(post_author)


@pytest.fixture()
def commenter_headers(commenter: User) -> dict[str, str]:
    return _headers(commenter)


@pytest.fixture()
def bystander_headers(bystander: User) -> dict[str, str]:
    return _headers(bystander)


@pytest.fixture()
def post(db_session: Session, post_author: User) -> Post:
    """Create a baseline post owned by ``post_author``."""
    post = Post(
        author_id=post_author.id,
        title="Moderated post",
        content="Post body used by comment tests",
    )
    db_session.add(post)
    db_session.flush()
    db_session.refresh(post)
    return post


@pytest.fixture()
def other_post(db_session: Session, post_author: User) -> Post:
    """A second post, used to check cross-post rules."""
    post = Post(
        author_id=post_author.id,
        title="Another post",
        content="Second post body for cross-post checks",
    )
    db_session.add(post)
    db_session.flush()
    db_session.refresh(post)
    return post


@pytest.fixture()
def make_comment(db_session: Session, commenter: User) -> Callable[..., Comment]:
    """Return a factory inserting comments with explicit state and timestamps.

    ``minute`` offsets ``created_at`` from a fixed base so ordering is predictable.
    """

    def _make(
        post: Post,
        *,
        text: str = "A comment",
        status: CommentStatus = CommentStatus.PENDING,
        deleted: bool = False,
        parent: Comment | None = None,
        author: User | None = None,
        minute: int = 0,
    ) -> Comment:
        created_at = BASE_TIME + timedelta(minutes=minute)
        comment = Comment(
            post_id=post.id,
            author_id=(author or commenter).id,
            parent_id=parent.id if parent is not None else None,
            text=text,
            status=status,
            deleted=deleted,
            created_at=created_at,
            updated_at=created_at,
        )
        db_session.add(comment)
        db_session.flush()
        return comment

    return _make
