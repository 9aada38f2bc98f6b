"""Resolution of human-meaningful names to target node IDs."""

from __future__ import annotations

import logging

from project_migrator.contracts.exceptions import ConfigError, OwnerNotFoundError, RepositoryNotFoundError
from project_migrator.contracts.provider import ProjectProvider
from project_migrator.contracts.remote import ContentRef, OwnerType

_LOG = logging.getLogger(__name__)


def split_name_with_owner(name_with_owner: str) -> tuple[str, str]:
    parts = name_with_owner.strip().split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ConfigError(f"Invalid repository name {name_with_owner!r}. Expected owner/name.")
    return parts[0], parts[1]


class IdentifierResolver:
    def __init__(self, provider: ProjectProvider) -> None:
        self._provider = provider

    async def resolve_owner(self, login: str, owner_type: OwnerType) -> str:
        owner_id = await self._provider.get_owner_id(login, owner_type)
        if owner_id is None:
            raise OwnerNotFoundError(f"Could not find {owner_type.value} {login!r} on the target deployment")
        _LOG.debug("Resolved %s %s to %s", owner_type.value, login, owner_id)
        return owner_id

    async def resolve_issue_or_pull_request(self, owner: str, name: str, number: int) -> ContentRef | None:
        """Look up ``owner/name#number``; ``None`` is a routine outcome, not an error."""
        return await self._provider.get_issue_or_pull_request(owner, name, number)

    async def resolve_repository(self, name_with_owner: str) -> str:
        owner, name = split_name_with_owner(name_with_owner)
        repository_id = await self._provider.get_repository_id(owner, name)
        if repository_id is None:
            raise RepositoryNotFoundError(
                f"Repository {name_with_owner} from your repository mappings could not be found. "
                "Check the target_repository column and try again."
            )
        return repository_id
