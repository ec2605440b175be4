from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from dataclasses import dataclass
from itertools import count
from typing import Awaitable

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from tasktracker import models  # noqa: F401
from tasktracker.core.config import Settings
from tasktracker.deps import get_db_session
from tasktracker.main import create_app
from tasktracker.services import CredentialService


@dataclass(slots=True)
class RegisteredUser:
    id: int
    email: str
    username: str
    name: str
    password: str
    access_token: str | None

    @property
    def headers(self) -> dict[str, str]:
        if not self.access_token:
            raise RuntimeError("User has not been authenticated.")
        return {"Authorization": f"Bearer {self.access_token}"}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        database_url="sqlite+aiosqlite:///:memory:",
        jwt_secret_key="test-secret",
        access_token_expire_minutes=5,
        password_hash_rounds=4,
        create_tables_on_startup=False,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as connection:
        await connection.run_sync(SQLModel.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def credential_service(session: AsyncSession, settings: Settings) -> CredentialService:
    return CredentialService(session, settings)


@pytest.fixture
def app(session: AsyncSession, settings: Settings) -> FastAPI:
    application = create_app(settings)

    async def _override_db_session() -> AsyncIterator[AsyncSession]:
        yield session

    application.dependency_overrides[get_db_session] = _override_db_session
    return application


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as http_client:
        yield http_client


@pytest_asyncio.fixture
async def registered_user(
    credential_service: CredentialService,
    client: AsyncClient,
) -> AsyncIterator[Callable[..., Awaitable[RegisteredUser]]]:
    counter = count()

    async def _factory(
        *,
        email: str | None = None,
        username: str | None = None,
        name: str = "Test User",
        password: str = "secret1",
        login: bool = True,
    ) -> RegisteredUser:
        index = next(counter)
        actual_email = email or f"user-{index}@example.com"
        actual_username = username or f"user{index}"
        result = await credential_service.register(
            email=actual_email,
            name=name,
            username=actual_username,
            password=password,
        )
        access_token: str | None = None
        if login:
            response = await client.post(
                "/auth/login",
                json={"email": actual_email, "password": password},
            )
            assert response.status_code == 200, response.text
            access_token = response.json()["accessToken"]
        assert result.user.id is not None
        return RegisteredUser(
            id=result.user.id,
            email=actual_email,
            username=actual_username,
            name=name,
            password=password,
            access_token=access_token,
        )

    yield _factory
