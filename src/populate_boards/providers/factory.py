"""Factory for creating provider instances.

Decouples provider selection from provider implementation so the SDK and CLI
never import a concrete provider directly.
"""

from __future__ import annotations

from populate_boards.contracts.config import PopulateConfig
from populate_boards.contracts.provider import BoardProvider
from populate_boards.providers.github.provider import GitHubBoardProvider


def create_provider(config: PopulateConfig, *, token: str) -> BoardProvider:
    """Create the GitHub Projects provider for *config*.

    The returned provider is an async context manager::

        async with create_provider(config, token=token) as provider:
            ...
    """
    return GitHubBoardProvider(token=token, organization=config.organization)
