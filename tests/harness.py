"""Test harness for unit, integration and E2E tests.

Settings are loaded from environment variables (configure via .env or export).
"""

from collections.abc import Callable, Iterator

import pytest
import pytest_asyncio
from dishka import AsyncContainer
from fastapi.testclient import TestClient

from folio.interface.api.app import create_app
from folio.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_create_tag(unit_env):
            use_case = await unit_env.get(CreateTagUseCase)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


class ApiClient:
    """TestClient plus a way to run setup code against the app's container.

    ``run`` executes a coroutine function with a fresh request-scoped
    container on the app's own event loop, so data written there is visible
    to subsequent HTTP calls.
    """

    def __init__(self, client: TestClient, container: AsyncContainer) -> None:
        self.http = client
        self._container = container

    def run(self, fn: Callable, *args, **kwargs):
        async def _call():
            async with self._container() as request_container:
                return await fn(request_container, *args, **kwargs)

        return self.http.portal.call(_call)


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for E2E fixtures yielding an :class:`ApiClient`."""

    @pytest.fixture
    def _client() -> Iterator[ApiClient]:
        container = build_test_container(unmock=unmock or set())
        app = create_app(container=container)
        # Entering the client runs the lifespan, which closes the container
        with TestClient(app) as client:
            yield ApiClient(client, container)

    return _client
