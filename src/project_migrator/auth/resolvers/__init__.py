"""Concrete token resolvers."""

from project_migrator.auth.resolvers.env import EnvTokenResolver
from project_migrator.auth.resolvers.gh_cli import GhCliTokenResolver
from project_migrator.auth.resolvers.static import StaticTokenResolver

__all__ = ["EnvTokenResolver", "GhCliTokenResolver", "StaticTokenResolver"]
