"""Custom exceptions for the GitHub GraphQL client."""

from __future__ import annotations

from typing import Any


class GitHubError(Exception):
    """Base exception for GitHub API errors."""


class GraphQLRequestError(GitHubError):
    """GraphQL endpoint answered with a non-200 status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class GraphQLResponseError(GitHubError):
    """GraphQL response carried an ``errors`` list."""

    def __init__(self, message: str, errors: list[dict[str, Any]]) -> None:
        super().__init__(message)
        self.errors = errors
