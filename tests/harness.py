"""Test harness for unit and integration tests.

Unit tests run fully mocked. Integration tests unmock ``persistence`` and
expect PostgreSQL at ``DATABASE__URL`` with migrations applied.
"""

import pytest_asyncio

from breakloop.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a fresh container and yields a
    request-scoped container for service access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_create_invite(unit_env):
            service = await unit_env.get(InviteService)
            invite = await service.create_invite(UserId("alice"), "Alice")
            assert invite.status == InviteStatus.ACTIVE
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
