"""GitHubGraphQLClient - Async access to the GitHub GraphQL API."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from card_mover.github.exceptions import GraphQLRequestError, GraphQLResponseError
from card_mover.github.queries import (
    COLUMNS_QUERY,
    MOVE_PROJECT_CARD_MUTATION,
    PROJECT_CARDS_QUERY,
)
from card_mover.logging import sanitize_for_log

logger = logging.getLogger("card_mover.github")

DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"


class GitHubGraphQLClient:
    """Async client for the GitHub GraphQL API.

    Every request is authorized with the given token as a bearer credential.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_GRAPHQL_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: GitHub token with repo and project scope
            base_url: GitHub GraphQL API URL (for testing/enterprise)
            timeout: Per-request timeout in seconds
            transport: Custom httpx transport (for testing)
        """
        self.token = token
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client for GraphQL API."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={
                    "Authorization": f"bearer {self.token}",
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
                transport=self.transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> GitHubGraphQLClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Execute a GraphQL query.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            Response data

        Raises:
            GraphQLRequestError: If the endpoint does not answer with 200
            GraphQLResponseError: If the response carries GraphQL errors
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        response = await self.client.post(self.base_url, json=payload)

        if response.status_code != 200:
            raise GraphQLRequestError(
                sanitize_for_log(
                    f"GraphQL request failed: {response.status_code} - {response.text}"
                ),
                status_code=response.status_code,
            )

        data: dict[str, Any] = response.json()
        if data.get("errors"):
            errors = data["errors"]
            messages = "; ".join(str(e.get("message", e)) for e in errors)
            raise GraphQLResponseError(
                sanitize_for_log(f"GraphQL errors: {messages}"), errors=errors
            )

        return dict(data.get("data") or {})

    async def get_project_columns(
        self, owner: str, repo: str, project_name: str
    ) -> dict[str, Any] | None:
        """Fetch projects matching a search string together with their columns.

        Returns:
            The ``repository`` object, or None if the repository is not visible
        """
        logger.debug("Fetching columns for project %r in %s/%s", project_name, owner, repo)
        data = await self.execute(
            COLUMNS_QUERY,
            {"owner": owner, "name": repo, "projectName": project_name},
        )
        result: dict[str, Any] | None = data.get("repository")
        return result

    async def get_issue_cards(self, issue_id: str) -> dict[str, Any] | None:
        """Fetch the project cards attached to an issue node.

        Returns:
            The ``node`` object, or None if the node does not exist
        """
        logger.debug("Fetching project cards for issue %s", issue_id)
        data = await self.execute(PROJECT_CARDS_QUERY, {"issueId": issue_id})
        result: dict[str, Any] | None = data.get("node")
        return result

    async def move_project_card(self, card_id: str, column_id: str) -> dict[str, Any]:
        """Move a project card to a column."""
        return await self.execute(
            MOVE_PROJECT_CARD_MUTATION,
            {"cardId": card_id, "columnId": column_id},
        )
