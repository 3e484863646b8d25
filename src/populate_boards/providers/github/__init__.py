"""GitHub Projects provider."""

from populate_boards.providers.github.provider import GitHubBoardProvider

__all__ = ["GitHubBoardProvider"]
