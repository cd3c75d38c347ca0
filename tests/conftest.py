# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from itertools import count

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-whycookin")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("KAKAO_REST_API_KEY", "test-kakao-key")

from whycookin.api.v1.dependencies import get_geocoder_dep  # noqa: E402
from whycookin.core.security import create_access_token, hash_password  # noqa: E402
from whycookin.db.session import Base  # noqa: E402
from whycookin.db.session import get_db as app_get_session  # noqa: E402
from whycookin.main import app as fastapi_app  # noqa: E402
from whycookin.models import Post, PostVote, Subcategory, User  # noqa: E402
from whycookin.models.user import ROLE_ADMIN, ROLE_MODERATOR, ROLE_USER  # noqa: E402
from whycookin.services.geocoding import AddressNotFoundError, GeocodedAddress  # noqa: E402

TEST_DB_URL = "sqlite://"
TEST_PASSWORD = "correct horse battery staple"

_USERNAME_COUNTER = count(1)

SEOUL_CITY_HALL = GeocodedAddress(
    si_do="서울",
    si_gun_gu="중구",
    eup_myeon_dong="태평로1가",
    postal_code="04524",
    road_name="세종대로 110",
    longitude=126.9779692,
    latitude=37.566535,
)
BUSAN_STATION = GeocodedAddress(
    si_do="부산",
    si_gun_gu="동구",
    eup_myeon_dong="초량동",
    postal_code="48732",
    road_name="중앙대로 206",
    longitude=129.0415,
    latitude=35.1151,
)


class FakeGeocoder:
    """Stand-in for the Kakao client that resolves a fixed set of addresses."""

    def __init__(self) -> None:
        self.known: dict[str, GeocodedAddress] = {
            "서울 중구 세종대로 110": SEOUL_CITY_HALL,
            "부산 동구 중앙대로 206": BUSAN_STATION,
        }
        self.calls: list[str] = []

    async def geocode(self, address: str) -> GeocodedAddress:
        self.calls.append(address)
        try:
            return self.known[address]
        except KeyError:
            raise AddressNotFoundError("Kakao: No results for that address") from None


@pytest.fixture()
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
    # The API commits and rolls back on its own, so each test gets a fresh
    # in-memory database instead of an outer transaction.
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


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
def fake_geocoder() -> FakeGeocoder:
    return FakeGeocoder()


@pytest.fixture(autouse=True)
def override_geocoder_dependency(app: FastAPI, fake_geocoder: FakeGeocoder) -> Iterator[None]:
    app.dependency_overrides[get_geocoder_dep] = lambda: fake_geocoder
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_geocoder_dep, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory that persists users with a known password."""

    def _make_user(role: str = ROLE_USER, username: str | None = None, **fields: object) -> User:
        user = User(
            username=username or f"{role}{next(_USERNAME_COUNTER)}",
            password_hash=hash_password(TEST_PASSWORD),
            role=role,
            **fields,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


def bearer(user: User) -> dict[str, str]:
    """Build an Authorization header for ``user``."""
    token = create_access_token(user_id=user.id, username=user.username, role=user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def test_user(make_user: Callable[..., User]) -> User:
    """Create and return a persisted regular user."""
    return make_user(ROLE_USER, username="test_user")


@pytest.fixture()
def other_user(make_user: Callable[..., User]) -> User:
    """Create and return a second regular user."""
    return make_user(ROLE_USER, username="other_user")


@pytest.fixture()
def moderator_user(make_user: Callable[..., User]) -> User:
    return make_user(ROLE_MODERATOR, username="moderator")


@pytest.fixture()
def admin_user(make_user: Callable[..., User]) -> User:
    return make_user(ROLE_ADMIN, username="admin")


@pytest.fixture()
def auth_token(test_user: User) -> dict[str, str]:
    """Authorization header for the primary test user."""
    return bearer(test_user)


@pytest.fixture()
def other_token(other_user: User) -> dict[str, str]:
    return bearer(other_user)


@pytest.fixture()
def moderator_token(moderator_user: User) -> dict[str, str]:
    return bearer(moderator_user)


@pytest.fixture()
def admin_token(admin_user: User) -> dict[str, str]:
    return bearer(admin_user)


@pytest.fixture()
def test_subcategory(db_session: Session, test_user: User) -> Subcategory:
    subcategory = Subcategory(name="Recipes", description="Home cooking", created_by=test_user.id)
    db_session.add(subcategory)
    db_session.commit()
    db_session.refresh(subcategory)
    return subcategory


@pytest.fixture()
def test_post(db_session: Session, test_user: User, test_subcategory: Subcategory) -> Post:
    """Create a post by the primary test user with no votes."""
    post = Post(
        title="Best kimchi jjigae near Hongdae?",
        content="Looking for somewhere that does a vegan version.",
        author_id=test_user.id,
        subcategory_id=test_subcategory.id,
    )
    db_session.add(post)
    db_session.commit()
    db_session.refresh(post)
    return post


def ledger_counts(db: Session, post_id: int) -> tuple[int, int]:
    """Return (upvote rows, downvote rows) in the vote ledger for a post."""
    up = db.query(PostVote).filter(PostVote.post_id == post_id, PostVote.direction == 1).count()
    down = db.query(PostVote).filter(PostVote.post_id == post_id, PostVote.direction == -1).count()
    return up, down


@pytest.fixture()
def headers_for() -> Callable[[User], dict[str, str]]:
    """Expose :func:`bearer` to tests that create their own users."""
    return bearer


@pytest.fixture()
def ledger(db_session: Session) -> Callable[[int], tuple[int, int]]:
    """Expose :func:`ledger_counts` bound to the test session."""
    return lambda post_id: ledger_counts(db_session, post_id)
