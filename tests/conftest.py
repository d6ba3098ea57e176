"""Pytest configuration and shared fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Tuple

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app import models
from app.db.base_class import Base
from app.db.session import get_db
from app.dependencies import get_notifier
from app.main import fastapi_app
from app.models.enums import NotificationEvent, UserRole, ViewingStatus, WorkSpaceStatus, WorkSpaceType
from app.security import create_user_token
from app.services.notifier import Notifier
from app.utils.dates import utcnow


class FakeNotifier(Notifier):
    """Records deliveries instead of sending them."""

    def __init__(self):
        self.emails: List[Tuple[int, NotificationEvent, Dict[str, Any]]] = []
        self.pushes: List[Tuple[int, Dict[str, Any]]] = []

    async def send_email(self, recipient, event, context):
        self.emails.append((recipient.id, event, context))

    async def push(self, user_id, payload):
        self.pushes.append((user_id, payload))

    def events(self) -> List[NotificationEvent]:
        return [event for _, event, _ in self.emails]


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest_asyncio.fixture
async def client(session_factory, notifier):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_notifier] = lambda: notifier
    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://test") as ac:
        yield ac
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def fetch(session_factory):
    """Loads a fresh copy of a row, bypassing any identity map used during setup."""
    async def _fetch(model, id):
        async with session_factory() as session:
            return await session.get(model, id)
    return _fetch


def auth_headers(user: models.User) -> Dict[str, str]:
    token = create_user_token(user)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    async def _make_user(role: UserRole = UserRole.SELLER, **kwargs) -> models.User:
        counter["n"] += 1
        user = models.User(
            email=kwargs.pop("email", f"user{counter['n']}@example.com"),
            hashed_password=kwargs.pop("hashed_password", "not-a-real-hash"),
            full_name=kwargs.pop("full_name", f"User {counter['n']}"),
            role=role,
            is_active=kwargs.pop("is_active", True),
            **kwargs,
        )
        db.add(user)
        await db.commit()
        return user

    return _make_user


@pytest_asyncio.fixture
async def seller(make_user) -> models.User:
    return await make_user(UserRole.SELLER, full_name="Sam Seller")


@pytest_asyncio.fixture
async def buyer(make_user) -> models.User:
    return await make_user(UserRole.BUYER, full_name="Bea Buyer")


@pytest_asyncio.fixture
async def area(db) -> models.Area:
    area = models.Area(name="Shoreditch", slug="shoreditch")
    db.add(area)
    await db.commit()
    return area


@pytest.fixture
def make_location(db, area):
    async def _make_location(owner: models.User, **kwargs) -> models.Location:
        location = models.Location(
            user_id=owner.id,
            area_id=kwargs.pop("area_id", area.id),
            name=kwargs.pop("name", "The Loft"),
            address=kwargs.pop("address", "1 Old Street"),
            latitude=51.52,
            longitude=-0.08,
            town="London",
            postcode=kwargs.pop("postcode", "EC1V 9HL"),
            description="Bright loft space",
            **kwargs,
        )
        db.add(location)
        await db.commit()
        return location

    return _make_location


@pytest.fixture
def make_workspace(db):
    async def _make_workspace(
        location: models.Location,
        type: str = WorkSpaceType.PRIVATE_OFFICE.value,
        available_from: Optional[datetime] = None,
        status: str = WorkSpaceStatus.ACTIVE.value,
        **kwargs,
    ) -> models.WorkSpace:
        workspace = models.WorkSpace(
            location_id=location.id,
            type=type,
            quantity=kwargs.pop("quantity", 1),
            price=kwargs.pop("price", 500.0),
            size=kwargs.pop("size", 20),
            capacity=kwargs.pop("capacity", 4),
            description="Quiet room",
            available_from=available_from,
            status=status,
            **kwargs,
        )
        db.add(workspace)
        await db.commit()
        return workspace

    return _make_workspace


@pytest.fixture
def make_viewing(db):
    async def _make_viewing(
        workspace: models.WorkSpace,
        user: models.User,
        start_time: Optional[datetime] = None,
        status: ViewingStatus = ViewingStatus.PENDING,
    ) -> models.Viewing:
        start_time = start_time or utcnow() + timedelta(days=2)
        viewing = models.Viewing(
            workspace_id=workspace.id,
            user_id=user.id,
            start_time=start_time,
            end_time=start_time + timedelta(minutes=30),
            phone="07700900123",
            status=status,
        )
        db.add(viewing)
        await db.commit()
        return viewing

    return _make_viewing
