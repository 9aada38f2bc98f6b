"""Access token resolution for the target deployment."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

ENV_AUTH_HINT = "set IMPORT_GITHUB_TOKEN and use --auth env, or pass --access-token"


class TokenResolver(ABC):
    """Produces the bearer token used for every API request of a run."""

    source: ClassVar[str]

    @abstractmethod
    async def resolve(self) -> str:
        """Return a non-empty token or raise ``AuthenticationError``."""
