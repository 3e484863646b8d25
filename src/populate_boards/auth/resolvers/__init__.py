"""Concrete token resolvers."""

from populate_boards.auth.resolvers.app import AppTokenResolver
from populate_boards.auth.resolvers.static import StaticTokenResolver

__all__ = ["AppTokenResolver", "StaticTokenResolver"]
