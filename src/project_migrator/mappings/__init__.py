"""Repository mapping table."""

from project_migrator.mappings.table import RepositoryMappingTable

__all__ = ["RepositoryMappingTable"]
