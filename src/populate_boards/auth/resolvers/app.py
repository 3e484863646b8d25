"""GitHub App token resolver."""

from __future__ import annotations

from populate_boards.auth.base import TokenResolver
from populate_boards.contracts.exceptions import AuthenticationError


class AppTokenResolver(TokenResolver):
    """Resolver used when no token input is supplied.

    Installation-token exchange for GitHub Apps is not implemented, so this
    resolver refuses instead of letting requests go out unauthenticated.
    """

    async def resolve(self) -> str:
        raise AuthenticationError(
            "No token supplied and GitHub App authentication is not implemented; set the 'token' input"
        )
