"""Token resolver factory."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

from project_migrator.auth.base import TokenResolver
from project_migrator.auth.resolvers.env import EnvTokenResolver
from project_migrator.auth.resolvers.gh_cli import GhCliTokenResolver
from project_migrator.auth.resolvers.static import StaticTokenResolver
from project_migrator.contracts.config import MigrationConfig
from project_migrator.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "gh-cli": GhCliTokenResolver,
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}

_LOG = logging.getLogger(__name__)


def gh_hostname(base_url: str) -> str:
    """Host the gh CLI knows the deployment by (``api.github.com`` is ``github.com``)."""
    hostname = urlparse(base_url.strip()).hostname or "github.com"
    if hostname == "api.github.com":
        return "github.com"
    return hostname


def create_token_resolver(config: MigrationConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    resolver: TokenResolver
    if auth_mode == "gh-cli":
        resolver = GhCliTokenResolver(hostname=gh_hostname(config.base_url))
    elif auth_mode == "env":
        resolver = EnvTokenResolver()
    else:
        resolver = StaticTokenResolver(token=config.token or "")
    _LOG.debug("Resolving the access token from %s", resolver.source)
    return resolver
