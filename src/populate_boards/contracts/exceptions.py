"""Exception hierarchy for populate-boards."""

from __future__ import annotations


class PopulateBoardsError(Exception):
    """Base exception for all populate-boards errors."""


class ConfigError(PopulateBoardsError):
    """Configuration loading or validation failure."""


class BoardLoadError(PopulateBoardsError):
    """Board manifest or card content loading failure."""


class ContentPathError(BoardLoadError):
    """A content-group directory is missing or unreadable."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class ProviderError(PopulateBoardsError):
    """Base provider operation failure."""


class AuthenticationError(ProviderError):
    """Authentication/authorization failure."""


class ProjectNotFoundError(ProviderError):
    """No project exists for the given owner and number."""

    def __init__(self, owner: str, number: int) -> None:
        super().__init__(f"Project {number} not found for owner {owner!r}")
        self.owner = owner
        self.number = number
