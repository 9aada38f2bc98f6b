"""Token resolver backed by ``gh auth token``."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import ClassVar

from project_migrator.auth.base import ENV_AUTH_HINT, TokenResolver
from project_migrator.contracts.exceptions import AuthenticationError

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class GhCliTokenResolver(TokenResolver):
    """Reads the token gh stored for the target deployment's host.

    For GitHub Enterprise Server the host is the server name, so the operator
    must have run ``gh auth login --hostname <host>`` for that server.
    """

    source: ClassVar[str] = "gh CLI"

    hostname: str = "github.com"

    async def resolve(self) -> str:
        returncode, stdout, stderr = await self._run_gh()
        if returncode != 0:
            details = f": {stderr}" if stderr else ""
            raise AuthenticationError(f"gh auth token failed for host {self.hostname}{details}. {self._login_hint()}")
        if not stdout:
            raise AuthenticationError(f"gh auth token printed nothing for host {self.hostname}. {self._login_hint()}")
        _LOG.debug("Using the gh CLI token for %s", self.hostname)
        return stdout

    async def _run_gh(self) -> tuple[int | None, str, str]:
        try:
            process = await asyncio.create_subprocess_exec(
                "gh",
                "auth",
                "token",
                "--hostname",
                self.hostname,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise AuthenticationError(f"Could not run the gh CLI ({exc}); {ENV_AUTH_HINT}") from exc

        stdout, stderr = await process.communicate()
        return (
            process.returncode,
            stdout.decode(errors="replace").strip(),
            stderr.decode(errors="replace").strip(),
        )

    def _login_hint(self) -> str:
        return f"Run `gh auth login --hostname {self.hostname}`, or {ENV_AUTH_HINT}."
