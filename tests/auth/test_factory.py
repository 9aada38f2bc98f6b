from pathlib import Path

import pytest

from project_migrator.auth.factory import create_token_resolver, gh_hostname
from project_migrator.auth.resolvers.env import EnvTokenResolver
from project_migrator.auth.resolvers.gh_cli import GhCliTokenResolver
from project_migrator.auth.resolvers.static import StaticTokenResolver
from project_migrator.contracts.config import MigrationConfig


def _make_config(*, auth: str, token: str | None = None, base_url: str = "https://api.github.com") -> MigrationConfig:
    return MigrationConfig(
        input_path=Path("project.json"),
        project_owner="acme",
        auth=auth,
        token=token,
        base_url=base_url,
    )


def test_factory_creates_gh_cli_resolver_for_github_com() -> None:
    resolver = create_token_resolver(_make_config(auth="gh-cli"))

    assert isinstance(resolver, GhCliTokenResolver)
    assert resolver.hostname == "github.com"


def test_factory_creates_gh_cli_resolver_for_enterprise_server() -> None:
    resolver = create_token_resolver(_make_config(auth="gh-cli", base_url="https://github.acme.inc/api/v3"))

    assert isinstance(resolver, GhCliTokenResolver)
    assert resolver.hostname == "github.acme.inc"


def test_factory_creates_env_resolver() -> None:
    assert isinstance(create_token_resolver(_make_config(auth="env")), EnvTokenResolver)


def test_factory_creates_static_resolver() -> None:
    resolver = create_token_resolver(_make_config(auth="token", token="tok_123"))

    assert isinstance(resolver, StaticTokenResolver)
    assert resolver.token == "tok_123"


@pytest.mark.parametrize(
    ("base_url", "expected"),
    [
        ("https://api.github.com", "github.com"),
        ("https://github.acme.inc/api/v3", "github.acme.inc"),
        ("not a url", "github.com"),
    ],
)
def test_gh_hostname(base_url: str, expected: str) -> None:
    assert gh_hostname(base_url) == expected
