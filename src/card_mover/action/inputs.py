"""Action input loading for Card Mover runs."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from card_mover.github import DEFAULT_GRAPHQL_URL
from card_mover.mover import InvalidInputError


class ConfigError(Exception):
    """Raised when a required input is missing."""


def input_env_name(name: str) -> str:
    """Environment variable the runner stores an action input in."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(
    name: str,
    required: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Read an action input, trimmed.

    Args:
        name: Input name as declared in action.yml (e.g. 'access-token').
        required: Raise if the input is missing or blank.
        environ: Environment to read from. Defaults to os.environ.

    Returns:
        The input value, or '' if not set.

    Raises:
        ConfigError: If a required input is not supplied.
    """
    if environ is None:
        environ = os.environ
    value = environ.get(input_env_name(name), "").strip()
    if required and not value:
        raise ConfigError(f"Input required and not supplied: {name}")
    return value


@dataclass
class ActionInputs:
    """Inputs of a Card Mover run.

    ``target_column_id`` is None when blank, which selects the column by name.
    """

    access_token: str
    project_name: str
    target_column: str
    issues: str = "[]"
    target_column_id: str | None = None
    graphql_url: str = DEFAULT_GRAPHQL_URL

    def __post_init__(self) -> None:
        if not self.access_token:
            raise ConfigError("Input required and not supplied: access-token")
        if self.target_column_id is not None:
            self.target_column_id = self.target_column_id.strip() or None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ActionInputs:
        """Build inputs from the runner environment.

        Raises:
            ConfigError: If access-token is missing.
        """
        if environ is None:
            environ = os.environ
        return cls(
            access_token=get_input("access-token", required=True, environ=environ),
            issues=get_input("issues", environ=environ) or "[]",
            project_name=get_input("project-name", environ=environ),
            target_column=get_input("target-column", environ=environ),
            target_column_id=get_input("target-column-id", environ=environ) or None,
            graphql_url=environ.get("GITHUB_GRAPHQL_URL") or DEFAULT_GRAPHQL_URL,
        )

    def parse_issues(self) -> list[Any]:
        """Decode the ``issues`` input.

        Returns:
            The decoded array, or an empty list for any non-array value so the
            run falls back to the event payload.

        Raises:
            InvalidInputError: If the input is not valid JSON.
        """
        text = self.issues.strip()
        if not text:
            return []
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"Input 'issues' is not valid JSON: {e}") from e
        if isinstance(parsed, list):
            return parsed
        return []
