"""Token resolver factory."""

from __future__ import annotations

from populate_boards.auth.base import TokenResolver
from populate_boards.auth.resolvers.app import AppTokenResolver
from populate_boards.auth.resolvers.static import StaticTokenResolver
from populate_boards.contracts.config import PopulateConfig


def create_token_resolver(config: PopulateConfig) -> TokenResolver:
    if config.token is None:
        return AppTokenResolver()
    return StaticTokenResolver(token=config.token)
