import pytest

from populate_boards.auth import create_token_resolver
from populate_boards.auth.resolvers.app import AppTokenResolver
from populate_boards.auth.resolvers.static import StaticTokenResolver
from populate_boards.contracts.config import PopulateConfig
from populate_boards.contracts.exceptions import AuthenticationError


@pytest.mark.asyncio
async def test_static_token_resolver_returns_token() -> None:
    resolver = StaticTokenResolver(token=" tok_123 ")

    assert await resolver.resolve() == "tok_123"


@pytest.mark.asyncio
async def test_static_token_resolver_raises_for_empty_token() -> None:
    resolver = StaticTokenResolver(token="")

    with pytest.raises(AuthenticationError):
        await resolver.resolve()


@pytest.mark.asyncio
async def test_app_token_resolver_fails_explicitly() -> None:
    with pytest.raises(AuthenticationError, match="not implemented"):
        await AppTokenResolver().resolve()


def test_factory_selects_static_resolver_for_token() -> None:
    resolver = create_token_resolver(PopulateConfig(token="tok"))

    assert isinstance(resolver, StaticTokenResolver)


def test_factory_selects_app_resolver_without_token() -> None:
    resolver = create_token_resolver(PopulateConfig())

    assert isinstance(resolver, AppTokenResolver)
