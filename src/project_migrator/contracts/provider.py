"""Remote project system contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from project_migrator.contracts.remote import (
    ContentRef,
    CreatedProject,
    FieldValuePayload,
    OwnerType,
    ProductInformation,
    ProjectField,
    RateLimit,
    SingleSelectOptionInput,
)


class ProjectProvider(ABC):
    """One coroutine per remote operation the migration needs.

    Each call either returns its payload or raises; retry, backoff and
    authentication are the implementation's concern.
    """

    @abstractmethod
    async def __aenter__(self) -> ProjectProvider: ...

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...

    @abstractmethod
    async def get_owner_id(self, login: str, owner_type: OwnerType) -> str | None:
        """Return the owner's node ID, or ``None`` if no such owner exists."""

    @abstractmethod
    async def create_project(self, owner_id: str, title: str) -> CreatedProject: ...

    @abstractmethod
    async def get_repository_id(self, owner: str, name: str) -> str | None:
        """Return the repository's node ID, or ``None`` if it cannot be resolved."""

    @abstractmethod
    async def link_repository(self, project_id: str, repository_id: str) -> None: ...

    @abstractmethod
    async def create_field(
        self,
        project_id: str,
        name: str,
        data_type: str,
        options: list[SingleSelectOptionInput] | None = None,
    ) -> ProjectField: ...

    @abstractmethod
    async def get_field_by_name(self, project_id: str, name: str) -> ProjectField | None: ...

    @abstractmethod
    async def add_item_by_content_id(self, project_id: str, content_id: str) -> str:
        """Add an issue/pull request to the project and return the new item ID."""

    @abstractmethod
    async def add_draft_issue(self, project_id: str, title: str, body: str) -> str:
        """Create a draft issue on the project and return the new item ID."""

    @abstractmethod
    async def archive_item(self, project_id: str, item_id: str) -> None: ...

    @abstractmethod
    async def update_item_field_value(
        self,
        project_id: str,
        item_id: str,
        field_id: str,
        value: FieldValuePayload,
    ) -> None: ...

    @abstractmethod
    async def get_issue_or_pull_request(self, owner: str, name: str, number: int) -> ContentRef | None:
        """Return the issue/pull request, or ``None`` if the number does not resolve."""

    @abstractmethod
    async def get_rate_limit(self) -> RateLimit | None:
        """Return the current API budget, or ``None`` when the deployment has rate limiting disabled."""

    @abstractmethod
    async def get_product_information(self) -> ProductInformation:
        """Report whether the deployment is GitHub.com or GitHub Enterprise Server, and which version."""
