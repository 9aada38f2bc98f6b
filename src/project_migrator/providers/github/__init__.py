"""GitHub Projects provider."""

from project_migrator.providers.github.provider import GitHubProvider, graphql_url

__all__ = ["GitHubProvider", "graphql_url"]
