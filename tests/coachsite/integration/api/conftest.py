"""Pytest fixtures for API integration tests.

Each test gets a throwaway SQLite file database. The mail relay and the
media host are replaced with in-memory doubles through dependency
overrides, so no network access happens.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from coachsite.application.commands.users import CreateUserCommand
from coachsite.infrastructure.persistence.sqlalchemy import create_tables
from coachsite.presentation.api.app import API_PREFIX, create_app
from coachsite.presentation.api.config import get_api_settings
from coachsite.presentation.api.dependencies import (
    get_db_session,
    get_email_service,
    get_media_storage,
    get_password_service,
)
from coachsite_config.settings import Settings
from coachsite_identity import PasswordHashingService, UserRole
from coachsite_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)
from tests.shared.fixtures.api import bearer, login, signup_and_verify
from tests.shared.fixtures.fakes import FakeMediaStorage, RecordingEmailService

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin-pass-123"

# Low cost factor keeps bcrypt fast in tests
TEST_HASH_ROUNDS = 4


def _password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=TEST_HASH_ROUNDS)


@pytest.fixture
def api_prefix() -> str:
    return API_PREFIX


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'api.db'}"


@pytest.fixture
def api_settings(database_url) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        _env_file=None,
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        postgres_password=SecretStr("unused"),
        database_url_override=database_url,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        otp_length=6,
        otp_expiry_minutes=10,
    )


@pytest.fixture
def email_outbox() -> RecordingEmailService:
    return RecordingEmailService()


@pytest.fixture
def media_storage() -> FakeMediaStorage:
    return FakeMediaStorage()


def _setup_test_database(database_url: str) -> None:
    """Create the schema and seed one administrator.

    Runs in its own event loop, separate from the TestClient's loop.
    """

    async def _setup():
        engine = create_async_engine(database_url, poolclass=NullPool)
        try:
            await create_tables(engine)
            session_maker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
            async with session_maker() as session:
                await CreateUserCommand(
                    UserRepositorySQLAlchemy(session),
                    _password_service(),
                ).execute(
                    name="Admin",
                    email=ADMIN_EMAIL,
                    password=ADMIN_PASSWORD,
                    role=UserRole.ADMIN,
                )
                await session.commit()
        finally:
            await engine.dispose()

    asyncio.run(_setup())


@pytest.fixture
def test_client(api_settings, database_url, email_outbox, media_storage):
    """Create a test client against a fresh SQLite database.

    The client is not used as a context manager, so the application
    lifespan (schema creation, storage shutdown) does not run.
    """
    _setup_test_database(database_url)

    app = create_app(settings=api_settings)

    engine = create_async_engine(database_url, poolclass=NullPool)
    test_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings
    app.dependency_overrides[get_email_service] = lambda: email_outbox
    app.dependency_overrides[get_media_storage] = lambda: media_storage
    app.dependency_overrides[get_password_service] = _password_service

    yield TestClient(app)

    asyncio.run(engine.dispose())


@pytest.fixture
def admin_headers(test_client, api_prefix) -> dict:
    return bearer(login(test_client, api_prefix, ADMIN_EMAIL, ADMIN_PASSWORD))


@pytest.fixture
def coach(test_client, api_prefix, email_outbox) -> dict:
    """A verified coach: ``user`` data plus bearer ``headers``."""
    body = signup_and_verify(test_client, api_prefix, email_outbox, "coach@example.com")
    return {"user": body["user"], "headers": bearer(body["token"])}


@pytest.fixture
def other_coach(test_client, api_prefix, email_outbox) -> dict:
    body = signup_and_verify(
        test_client,
        api_prefix,
        email_outbox,
        "rival@example.com",
        name="Rival",
    )
    return {"user": body["user"], "headers": bearer(body["token"])}
