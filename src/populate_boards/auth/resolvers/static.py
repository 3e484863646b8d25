"""Static token resolver."""

from __future__ import annotations

from dataclasses import dataclass

from populate_boards.auth.base import TokenResolver
from populate_boards.contracts.exceptions import AuthenticationError


@dataclass(frozen=True)
class StaticTokenResolver(TokenResolver):
    token: str

    async def resolve(self) -> str:
        token = self.token.strip()
        if not token:
            raise AuthenticationError("token input is empty")
        return token
