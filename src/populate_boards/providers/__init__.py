"""Provider implementations."""

from populate_boards.providers.factory import create_provider

__all__ = ["create_provider"]
