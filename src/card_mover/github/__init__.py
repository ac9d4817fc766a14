"""GitHub GraphQL client for Projects (classic) boards."""

from card_mover.github.client import DEFAULT_GRAPHQL_URL, GitHubGraphQLClient
from card_mover.github.exceptions import (
    GitHubError,
    GraphQLRequestError,
    GraphQLResponseError,
)

__all__ = [
    "DEFAULT_GRAPHQL_URL",
    "GitHubError",
    "GitHubGraphQLClient",
    "GraphQLRequestError",
    "GraphQLResponseError",
]
