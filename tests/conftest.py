"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Fast security adapters (bcrypt cost 4, fixed signing key)
- In-memory repository and wired registration service
- Test FastAPI application with the real router and error handlers
- Canonical registration payloads
- PostgreSQL pool (skipped when the database is unreachable)
"""

from collections.abc import Callable, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from psycopg_pool import ConnectionPool, PoolTimeout

from src.adapters.repository.memory import InMemoryAccountRepository
from src.adapters.repository.postgres import PostgresAccountRepository, run_migrations
from src.adapters.security import BcryptPasswordHasher, JwtTokenIssuer
from src.api.dependencies import get_password_hasher, get_token_issuer
from src.api.errors import register_exception_handlers
from src.api.routes import router
from src.config.settings import Settings, get_settings
from src.domain.contracts import PhoneInput, RegistrationInput
from src.domain.registration import RegistrationService
from src.domain.validation import RegistrationValidator

TEST_SIGNING_KEY = "test-signing-key-with-at-least-32-bytes!"
TEST_BCRYPT_COST = 4

DEFAULT_EMAIL_PATTERN = Settings.model_fields["email_pattern"].default
DEFAULT_PASSWORD_PATTERN = Settings.model_fields["password_pattern"].default


def _registration_body(**overrides: object) -> dict:
    body = {
        "name": "Juan Rodriguez",
        "email": "juan@rodriguez.org",
        "password": "SecurePass123",
        "phones": [{"number": "1234567", "citycode": "1", "contrycode": "57"}],
    }
    body.update(overrides)
    return body


@pytest.fixture
def registration_body() -> Callable[..., dict]:
    """Factory for the wire-format Juan Rodriguez body, with field overrides."""
    return _registration_body


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    """bcrypt hasher at the minimum cost to keep tests fast."""
    return BcryptPasswordHasher(cost=TEST_BCRYPT_COST)


@pytest.fixture
def token_issuer() -> JwtTokenIssuer:
    """JWT issuer with a fixed test key."""
    return JwtTokenIssuer(secret=TEST_SIGNING_KEY, expiration_seconds=3600)


@pytest.fixture
def validator() -> RegistrationValidator:
    """Validator configured with the shipped default patterns."""
    return RegistrationValidator(
        email_pattern=DEFAULT_EMAIL_PATTERN,
        password_pattern=DEFAULT_PASSWORD_PATTERN,
        password_max_length=70,
    )


@pytest.fixture
def repository() -> InMemoryAccountRepository:
    """Fresh in-memory repository for each test."""
    return InMemoryAccountRepository()


@pytest.fixture
def service(
    repository: InMemoryAccountRepository,
    password_hasher: BcryptPasswordHasher,
    token_issuer: JwtTokenIssuer,
) -> RegistrationService:
    """Registration service wired to in-memory storage."""
    return RegistrationService(
        repository=repository,
        password_hasher=password_hasher,
        token_issuer=token_issuer,
    )


@pytest.fixture
def juan() -> RegistrationInput:
    """Canonical valid registration input."""
    return RegistrationInput(
        name="Juan Rodriguez",
        email="juan@rodriguez.org",
        password="SecurePass123",
        phones=(PhoneInput(number="1234567", city_code="1", country_code="57"),),
    )


@pytest.fixture
def app(
    repository: InMemoryAccountRepository,
    password_hasher: BcryptPasswordHasher,
    token_issuer: JwtTokenIssuer,
) -> Generator[FastAPI, None, None]:
    """Create test FastAPI application backed by the in-memory repository."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/api")
    test_app.state.repository = repository
    test_app.dependency_overrides[get_password_hasher] = lambda: password_hasher
    test_app.dependency_overrides[get_token_issuer] = lambda: token_issuer
    yield test_app
    test_app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client for the application."""
    return TestClient(app)


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool for database tests, with migrations applied."""
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    try:
        pool.wait(timeout=3.0)
    except PoolTimeout:
        pool.close()
        pytest.skip(f"PostgreSQL not reachable at {settings.database_url}")
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def pg_repository(pool: ConnectionPool) -> PostgresAccountRepository:
    """Create repository instance for each test."""
    return PostgresAccountRepository(pool)


@pytest.fixture(autouse=True)
def clean_database(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Empty the accounts table before each test that uses the database."""
    if "pool" in request.fixturenames:
        pool = request.getfixturevalue("pool")
        with pool.connection() as conn:
            conn.execute("DELETE FROM accounts")
            conn.commit()
    yield
