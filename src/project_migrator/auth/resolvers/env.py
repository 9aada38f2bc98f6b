"""Environment token resolver."""

from __future__ import annotations

import os

from project_migrator.auth.base import TokenResolver
from project_migrator.contracts.exceptions import AuthenticationError

TOKEN_ENV_VARS = ("IMPORT_GITHUB_TOKEN", "GITHUB_TOKEN")


class EnvTokenResolver(TokenResolver):
    source = "environment"

    async def resolve(self) -> str:
        for name in TOKEN_ENV_VARS:
            token = (os.getenv(name) or "").strip()
            if token:
                return token
        raise AuthenticationError(
            f"No access token found in {' or '.join(TOKEN_ENV_VARS)}: "
            "set one, pass --access-token, or use --auth gh-cli"
        )
