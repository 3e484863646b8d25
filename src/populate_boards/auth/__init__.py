"""Auth module public exports."""

from populate_boards.auth.base import TokenResolver
from populate_boards.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
