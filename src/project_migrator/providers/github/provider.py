"""GitHub provider adapter over the GraphQL API."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from project_migrator.contracts.config import DEFAULT_BASE_URL
from project_migrator.contracts.exceptions import AuthenticationError, ProviderError
from project_migrator.contracts.provider import ProjectProvider
from project_migrator.contracts.remote import (
    ContentRef,
    CreatedProject,
    FieldValuePayload,
    OwnerType,
    ProductInformation,
    ProjectField,
    ProjectFieldOption,
    RateLimit,
    SingleSelectOptionInput,
)
from project_migrator.providers.github import queries
from project_migrator.providers.github._retrying_transport import RetryingTransport

_LOG = logging.getLogger(__name__)

_ISSUE_NOT_FOUND = "could not resolve to an issue or pull request"
_REPOSITORY_NOT_FOUND = "could not resolve to a repository"
_OWNER_NOT_FOUND = "could not resolve to"

ENTERPRISE_VERSION_HEADER = "X-GitHub-Enterprise-Version"


def graphql_url(base_url: str) -> str:
    """GraphQL endpoint for a REST base URL (GitHub.com or GitHub Enterprise Server)."""
    base = base_url.rstrip("/")
    if base.endswith("/api/v3"):
        return f"{base[: -len('/v3')]}/graphql"
    return f"{base}/graphql"


class GitHubProvider(ProjectProvider):
    def __init__(
        self,
        *,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        proxy_url: str | None = None,
        verify: bool = True,
        user_agent: str = "project-migrator",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._base_url = base_url
        self._proxy_url = proxy_url
        self._verify = verify
        self._user_agent = user_agent
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> GitHubProvider:
        await self._open_transport()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # ------------------------------------------------------------------
    # Provider contract
    # ------------------------------------------------------------------

    async def get_owner_id(self, login: str, owner_type: OwnerType) -> str | None:
        if owner_type is OwnerType.ORGANIZATION:
            query, key = queries.FETCH_ORGANIZATION_ID, "organization"
        else:
            query, key = queries.FETCH_USER_ID, "user"
        data = await self._graphql(query, {"login": login}, tolerate_not_found=_OWNER_NOT_FOUND)
        owner = data.get(key)
        if not isinstance(owner, dict):
            return None
        return self._require_str(owner, "id")

    async def create_project(self, owner_id: str, title: str) -> CreatedProject:
        data = await self._graphql(queries.CREATE_PROJECT, {"ownerId": owner_id, "title": title})
        project = self._require_dict(self._require_dict(data, "createProjectV2"), "projectV2")
        return CreatedProject(id=self._require_str(project, "id"), url=self._require_str(project, "url"))

    async def get_repository_id(self, owner: str, name: str) -> str | None:
        data = await self._graphql(
            queries.FETCH_REPOSITORY_ID,
            {"owner": owner, "name": name},
            tolerate_not_found=_REPOSITORY_NOT_FOUND,
        )
        repository = data.get("repository")
        if not isinstance(repository, dict):
            return None
        return self._require_str(repository, "id")

    async def link_repository(self, project_id: str, repository_id: str) -> None:
        await self._graphql(queries.LINK_REPOSITORY, {"projectId": project_id, "repositoryId": repository_id})

    async def create_field(
        self,
        project_id: str,
        name: str,
        data_type: str,
        options: list[SingleSelectOptionInput] | None = None,
    ) -> ProjectField:
        variables: dict[str, Any] = {"projectId": project_id, "name": name, "dataType": data_type}
        if options is not None:
            variables["singleSelectOptions"] = [
                {"name": option.name, "color": str(option.color), "description": option.description}
                for option in options
            ]
        data = await self._graphql(queries.CREATE_FIELD, variables)
        field = self._require_dict(self._require_dict(data, "createProjectV2Field"), "projectV2Field")
        return self._field_from_node(field)

    async def get_field_by_name(self, project_id: str, name: str) -> ProjectField | None:
        data = await self._graphql(queries.FETCH_FIELD_BY_NAME, {"projectId": project_id, "name": name})
        node = self._require_dict(data, "node")
        field = node.get("field")
        if not isinstance(field, dict) or "id" not in field:
            return None
        return self._field_from_node(field)

    async def add_item_by_content_id(self, project_id: str, content_id: str) -> str:
        data = await self._graphql(queries.ADD_PROJECT_ITEM, {"projectId": project_id, "contentId": content_id})
        item = self._require_dict(self._require_dict(data, "addProjectV2ItemById"), "item")
        return self._require_str(item, "id")

    async def add_draft_issue(self, project_id: str, title: str, body: str) -> str:
        data = await self._graphql(
            queries.ADD_DRAFT_ISSUE,
            {"projectId": project_id, "title": title, "body": body},
        )
        item = self._require_dict(self._require_dict(data, "addProjectV2DraftIssue"), "projectItem")
        return self._require_str(item, "id")

    async def archive_item(self, project_id: str, item_id: str) -> None:
        await self._graphql(queries.ARCHIVE_PROJECT_ITEM, {"projectId": project_id, "itemId": item_id})

    async def update_item_field_value(
        self,
        project_id: str,
        item_id: str,
        field_id: str,
        value: FieldValuePayload,
    ) -> None:
        await self._graphql(
            queries.UPDATE_PROJECT_FIELD,
            {"projectId": project_id, "itemId": item_id, "fieldId": field_id, "value": value.to_graphql()},
        )

    async def get_issue_or_pull_request(self, owner: str, name: str, number: int) -> ContentRef | None:
        data = await self._graphql(
            queries.FETCH_ISSUE_OR_PULL_REQUEST,
            {"owner": owner, "name": name, "number": number},
            tolerate_not_found=_ISSUE_NOT_FOUND,
        )
        repository = data.get("repository")
        if not isinstance(repository, dict):
            return None
        content = repository.get("issueOrPullRequest")
        if not isinstance(content, dict):
            return None
        return ContentRef(id=self._require_str(content, "id"), title=self._require_str(content, "title"))

    async def get_rate_limit(self) -> RateLimit | None:
        data = await self._graphql(queries.FETCH_RATE_LIMIT, {})
        rate_limit = data.get("rateLimit")
        if not isinstance(rate_limit, dict):
            return None
        return RateLimit(
            limit=rate_limit.get("limit", 0),
            remaining=rate_limit.get("remaining", 0),
            used=rate_limit.get("used", 0),
            reset_at=rate_limit.get("resetAt"),
        )

    async def get_product_information(self) -> ProductInformation:
        if self._client is None:
            raise ProviderError("Provider is not initialized. Use 'async with'.")

        try:
            response = await self._client.get(f"{self._base_url.rstrip('/')}/meta")
        except httpx.HTTPError as exc:
            raise ProviderError(f"GitHub request failed: {exc}") from exc
        self._check_status(response)

        # Only GitHub Enterprise Server sends this header.
        version = response.headers.get(ENTERPRISE_VERSION_HEADER)
        return ProductInformation(enterprise_server_version=version.strip() if version else None)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _open_transport(self) -> None:
        inner = self._transport or httpx.AsyncHTTPTransport(verify=self._verify, proxy=self._proxy_url)
        self._client = httpx.AsyncClient(
            transport=RetryingTransport(transport=inner),
            headers={
                "Authorization": f"Bearer {self._token}",
                "User-Agent": self._user_agent,
            },
            timeout=httpx.Timeout(30.0),
        )

    async def _graphql(
        self,
        query: str,
        variables: dict[str, Any],
        *,
        tolerate_not_found: str | None = None,
    ) -> dict[str, Any]:
        """POST *query* and return its ``data``.

        ``NOT_FOUND`` errors whose message contains *tolerate_not_found* are
        dropped so the caller sees ``null`` for the missing node.
        """
        if self._client is None:
            raise ProviderError("Provider is not initialized. Use 'async with'.")

        try:
            response = await self._client.post(
                graphql_url(self._base_url), json={"query": query, "variables": variables}
            )
        except httpx.HTTPError as exc:
            raise ProviderError(f"GitHub request failed: {exc}") from exc

        self._check_status(response)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError("GitHub returned a non-JSON response") from exc

        errors = [error for error in payload.get("errors") or [] if not self._is_tolerated(error, tolerate_not_found)]
        if errors:
            messages = "; ".join(str(error.get("message", error)) for error in errors if isinstance(error, dict))
            raise ProviderError(f"GraphQL returned errors: {messages or errors}")

        data = payload.get("data")
        if not isinstance(data, dict):
            raise ProviderError("GraphQL response missing data payload")
        return data

    @staticmethod
    def _check_status(response: httpx.Response) -> None:
        if response.status_code == 401:
            raise AuthenticationError("GitHub rejected the access token (HTTP 401)")
        if response.status_code >= 400:
            raise ProviderError(f"GitHub request failed with HTTP {response.status_code}: {response.text[:500]}")

    @staticmethod
    def _is_tolerated(error: Any, fragment: str | None) -> bool:
        if fragment is None or not isinstance(error, dict):
            return False
        return error.get("type") == "NOT_FOUND" and fragment in str(error.get("message", "")).lower()

    # ------------------------------------------------------------------
    # Payload helpers
    # ------------------------------------------------------------------

    def _field_from_node(self, node: dict[str, Any]) -> ProjectField:
        options = [
            ProjectFieldOption(id=self._require_str(option, "id"), name=self._require_str(option, "name"))
            for option in node.get("options") or []
            if isinstance(option, dict)
        ]
        return ProjectField(id=self._require_str(node, "id"), name=self._require_str(node, "name"), options=options)

    @staticmethod
    def _require_dict(data: dict[str, Any], key: str) -> dict[str, Any]:
        value = data.get(key)
        if not isinstance(value, dict):
            raise ProviderError(f"Missing/invalid object at key '{key}'")
        return value

    @staticmethod
    def _require_str(data: dict[str, Any], key: str) -> str:
        value = data.get(key)
        if not isinstance(value, str):
            raise ProviderError(f"Missing/invalid string at key '{key}'")
        return value
