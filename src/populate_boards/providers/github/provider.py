"""GitHub Projects (v2) provider adapter."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from populate_boards.contracts.exceptions import AuthenticationError, ProviderError
from populate_boards.contracts.project import (
    ClassificationField,
    FieldLookupResult,
    ItemsPageResult,
    ProjectLookupResult,
    RemoteItem,
)
from populate_boards.contracts.provider import BoardProvider
from populate_boards.providers.github import queries
from populate_boards.providers.github.mapper import (
    decode_created_field,
    decode_draft_item,
    decode_field,
    decode_items_page,
    decode_project,
)

logger = logging.getLogger(__name__)

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
OPTION_COLOR = "GRAY"


class GitHubBoardProvider(BoardProvider):
    """Issues GraphQL operations against GitHub Projects, one request at a time.

    Use as an async context manager so the HTTP client is opened and closed::

        async with GitHubBoardProvider(token=token) as provider:
            result = await provider.fetch_project("acme", 7)
    """

    def __init__(
        self,
        *,
        token: str,
        organization: bool = True,
        url: str = GITHUB_GRAPHQL_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._organization = organization
        self._url = url
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> GitHubBoardProvider:
        self._client = httpx.AsyncClient(
            headers={"Authorization": f"Bearer {self._token}"},
            timeout=httpx.Timeout(30.0),
            transport=self._transport,
        )
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

    async def fetch_project(self, owner: str, number: int) -> ProjectLookupResult:
        if self._organization:
            query, owner_fragment = queries.FETCH_ORG_PROJECT, "organization"
        else:
            query, owner_fragment = queries.FETCH_USER_PROJECT, "user"
        data = await self._graphql(query, {"owner": owner, "number": number}, tolerate_not_found=True)
        return decode_project(data, owner_fragment)

    async def fetch_field(self, project_id: str, name: str) -> FieldLookupResult:
        data = await self._graphql(queries.FETCH_FIELD, {"projectId": project_id, "name": name})
        return decode_field(data)

    async def fetch_items_page(self, project_id: str, first: int = 100) -> ItemsPageResult:
        data = await self._graphql(queries.FETCH_PROJECT_ITEMS, {"projectId": project_id, "first": first})
        return decode_items_page(data)

    async def delete_items(self, project_id: str, item_ids: list[str]) -> None:
        if not item_ids:
            return
        mutation, names = queries.build_delete_items_mutation(len(item_ids))
        variables: dict[str, Any] = {"projectId": project_id}
        variables.update(zip(names, item_ids, strict=True))
        await self._graphql(mutation, variables)

    async def update_project_metadata(self, project_id: str, title: str, description: str) -> None:
        await self._graphql(
            queries.UPDATE_PROJECT,
            {"projectId": project_id, "title": title, "shortDescription": description},
        )

    async def delete_field(self, field_id: str) -> None:
        await self._graphql(queries.DELETE_FIELD, {"fieldId": field_id})

    async def create_single_select_field(
        self, project_id: str, name: str, options: list[str]
    ) -> ClassificationField:
        option_inputs = [{"name": option, "color": OPTION_COLOR, "description": ""} for option in options]
        data = await self._graphql(
            queries.CREATE_SINGLE_SELECT_FIELD,
            {"projectId": project_id, "name": name, "options": option_inputs},
        )
        return decode_created_field(data)

    async def create_draft_item(self, project_id: str, title: str, body: str) -> RemoteItem:
        data = await self._graphql(queries.ADD_DRAFT_ISSUE, {"projectId": project_id, "title": title, "body": body})
        return decode_draft_item(data)

    async def set_item_field_value(self, project_id: str, item_id: str, field_id: str, option_id: str) -> None:
        await self._graphql(
            queries.UPDATE_ITEM_FIELD_VALUE,
            {"projectId": project_id, "itemId": item_id, "fieldId": field_id, "optionId": option_id},
        )

    async def _graphql(
        self,
        query: str,
        variables: dict[str, Any],
        *,
        tolerate_not_found: bool = False,
    ) -> dict[str, Any]:
        if self._client is None:
            raise ProviderError("Provider is not initialized. Use 'async with'.")

        logger.debug("GraphQL request variables=%s", sorted(variables))
        try:
            response = await self._client.post(self._url, json={"query": query, "variables": variables})
        except httpx.HTTPError as exc:
            raise ProviderError(f"GitHub request failed: {exc}") from exc

        if response.status_code in {401, 403}:
            raise AuthenticationError(f"GitHub rejected the credentials (HTTP {response.status_code})")
        try:
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPStatusError, ValueError) as exc:
            raise ProviderError(f"GitHub request failed: {exc}") from exc
        if not isinstance(payload, dict):
            raise ProviderError("GraphQL response is not an object")

        data = payload.get("data")
        errors = payload.get("errors", [])
        if errors and not (tolerate_not_found and isinstance(data, dict) and _all_not_found(errors)):
            raise ProviderError(f"GraphQL returned errors: {errors}")

        if not isinstance(data, dict):
            raise ProviderError("GraphQL response missing data payload")
        return data


def _all_not_found(errors: list[Any]) -> bool:
    """True when every GraphQL error reports an unresolvable object."""
    return all(isinstance(error, dict) and error.get("type") == "NOT_FOUND" for error in errors)
