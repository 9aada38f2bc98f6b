"""Token passed on the command line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from project_migrator.auth.base import TokenResolver
from project_migrator.contracts.exceptions import AuthenticationError


@dataclass(frozen=True)
class StaticTokenResolver(TokenResolver):
    source: ClassVar[str] = "--access-token"

    token: str

    async def resolve(self) -> str:
        resolved = self.token.strip()
        if not resolved:
            raise AuthenticationError(
                "--access-token is empty. Pass a token for the target deployment, or set IMPORT_GITHUB_TOKEN "
                "and use --auth env."
            )
        if any(char.isspace() for char in resolved):
            raise AuthenticationError("--access-token contains whitespace; check that the token was copied whole")
        return resolved
