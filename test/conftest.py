"""
Test Configuration and Fixtures

This module provides:
- Test environment setup (log directory) before application imports
- In-memory repositories bound into the DI container
- A TestClient running the test app
- Token helpers for authenticated requests

Architecture:
- Unit tests (test/**/unit/): build use cases directly with stub repositories
- Integration tests: drive the HTTP app, DI container overridden with stubs
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are created at import time.
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('SECRET_KEY', 'test_secret_key_for_hotel_access')


_early_setup_test_environment()

from collections.abc import Callable, Generator  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.service.hotel.driving_adapter.http_controller.auth.jwt_auth import JwtAuth  # noqa: E402
from test.service.hotel.in_memory_repos import InMemoryRepos  # noqa: E402


@pytest.fixture
def repos() -> Generator[InMemoryRepos, None, None]:
    in_memory = InMemoryRepos()

    container.enrollment_query_repo.override(providers.Object(in_memory.enrollment))
    container.ticket_query_repo.override(providers.Object(in_memory.ticket))
    container.hotel_query_repo.override(providers.Object(in_memory.hotel))
    container.session_query_repo.override(providers.Object(in_memory.session))

    yield in_memory

    container.enrollment_query_repo.reset_override()
    container.ticket_query_repo.reset_override()
    container.hotel_query_repo.reset_override()
    container.session_query_repo.reset_override()


@pytest.fixture
def client(repos: InMemoryRepos) -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def jwt_auth() -> JwtAuth:
    return JwtAuth()


@pytest.fixture
def login(repos: InMemoryRepos, jwt_auth: JwtAuth) -> Callable[[int], dict[str, str]]:
    """Issue a token with a live session and return the Authorization header."""

    def _login(user_id: int) -> dict[str, str]:
        token = jwt_auth.create_jwt_token(user_id)
        repos.session.tokens.add(token)
        return {'Authorization': f'Bearer {token}'}

    return _login
