"""Auth module public exports."""

from project_migrator.auth.base import TokenResolver
from project_migrator.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
