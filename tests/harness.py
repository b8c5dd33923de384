"""Test harness for unit, integration and API tests.

Integration environments run against a throwaway SQLite file, so no external
services are needed. Other settings are loaded from environment variables.
"""

from pathlib import Path

import pytest
import pytest_asyncio
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient

from council.interface.api.app import create_app
from council.util.di import Component
from tests.di import build_test_container


def sqlite_url(path: Path) -> str:
    """Async SQLite URL for a database file."""
    return f"sqlite+aiosqlite:///{path}"


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Points the database at a fresh SQLite file when persistence is unmocked
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container (and disposes the engine) afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence on SQLite
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_vote(integration_env):
            service = await integration_env.get(ProposalService)
            await service.vote(ProposalId(1), Choice.APPROVE, Principal("bob"))
    """
    unmock = unmock or set()

    @pytest_asyncio.fixture
    async def _test_environment(monkeypatch, tmp_path):
        if "persistence" in unmock:
            monkeypatch.setenv("DATABASE__URL", sqlite_url(tmp_path / "council.db"))

        container = build_test_container(unmock=unmock)

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture():
    """Factory for a fixture yielding a TestClient over an all-mock app.

    Every test gets a fresh container, so stores start empty.
    """

    @pytest.fixture
    def _client():
        container = build_test_container(extra_providers=(FastapiProvider(),))
        app = create_app(container=container)
        with TestClient(app) as client:
            yield client

    return _client
