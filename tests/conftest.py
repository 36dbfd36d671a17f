"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator

import httpx
import pytest
import pytest_asyncio

from course_dapp.config import Settings
from course_dapp.core import Container, create_container
from course_dapp.infrastructure.rollup.client import RollupClient
from course_dapp.infrastructure.rollup.dispatcher import RollupDispatcher
from course_dapp.infrastructure.rollup.state_handler import RollupStateHandler
from fake_rollup_host import ROLLUP_TEST_URL, FakeRollupHost


@pytest.fixture
def rollup_host() -> FakeRollupHost:
    """Create a fresh fake rollup host for each test."""
    return FakeRollupHost()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        ROLLUP_HTTP_SERVER_URL=ROLLUP_TEST_URL,
        ENVIRONMENT="test",
        FINISH_RETRY_DELAY_SECONDS=0.01,
    )


@pytest_asyncio.fixture
async def container(
    settings: Settings, rollup_host: FakeRollupHost
) -> AsyncGenerator[Container, None]:
    """Create a container whose HTTP client talks to the fake host."""
    container = create_container(settings, transport=httpx.ASGITransport(app=rollup_host.app))
    yield container
    await container.rollup_client().close()


@pytest.fixture
def dispatcher(container: Container) -> RollupDispatcher:
    return container.dispatcher()


@pytest_asyncio.fixture
async def rollup_client(rollup_host: FakeRollupHost) -> AsyncGenerator[RollupClient, None]:
    """Create a standalone client bound to the fake host."""
    client = RollupClient(ROLLUP_TEST_URL, transport=httpx.ASGITransport(app=rollup_host.app))
    yield client
    await client.close()


@pytest.fixture
def state_handler(rollup_client: RollupClient) -> RollupStateHandler:
    return RollupStateHandler(rollup_client)
