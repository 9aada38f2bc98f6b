"""Provider implementations and factory."""

from project_migrator.providers.factory import create_provider

__all__ = ["create_provider"]
