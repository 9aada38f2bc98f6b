"""Factory for creating provider instances.

Keeps the composition root free of concrete provider imports.
"""

from __future__ import annotations

import httpx

from project_migrator.contracts.config import MigrationConfig
from project_migrator.contracts.provider import ProjectProvider
from project_migrator.providers.github.provider import GitHubProvider


def create_provider(
    config: MigrationConfig,
    *,
    token: str,
    user_agent: str = "project-migrator",
    transport: httpx.AsyncBaseTransport | None = None,
) -> ProjectProvider:
    """Create the target provider for *config*.

    The returned provider is an async context manager::

        async with create_provider(config, token=token) as provider:
            project = await provider.create_project(owner_id, title)
    """
    return GitHubProvider(
        token=token,
        base_url=config.base_url,
        proxy_url=config.proxy_url,
        verify=not config.skip_certificate_verification,
        user_agent=user_agent,
        transport=transport,
    )
