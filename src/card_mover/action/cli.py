"""CLI entry point for the Card Mover action.

Inputs are read from the runner environment (``INPUT_*`` variables); any
option given on the command line overrides the matching input.
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from pathlib import Path

import click

from card_mover import __version__
from card_mover.action.context import load_event_payload
from card_mover.action.inputs import ActionInputs, input_env_name
from card_mover.github import GitHubGraphQLClient
from card_mover.logging import setup_logging
from card_mover.mover import CardMover, MoveResult, collect_issues

logger = logging.getLogger("card_mover.action")


def load_inputs(**overrides: str | None) -> ActionInputs:
    """Build ActionInputs from the environment with command line overrides.

    Args:
        overrides: Input values keyed by input name with '_' for '-'.
                   None leaves the environment value in place.
    """
    environ = dict(os.environ)
    for key, value in overrides.items():
        if value is not None:
            environ[input_env_name(key.replace("_", "-"))] = value
    return ActionInputs.from_env(environ)


async def run_action(inputs: ActionInputs, issues: list) -> MoveResult:
    """Run the Card Mover against the GraphQL API."""
    async with GitHubGraphQLClient(inputs.access_token, base_url=inputs.graphql_url) as client:
        mover = CardMover(client)
        return await mover.run(
            issues,
            project_name=inputs.project_name,
            column_name=inputs.target_column,
            column_id=inputs.target_column_id,
        )


@click.command()
@click.version_option(version=__version__)
@click.option("--access-token", default=None, help="GitHub token (default: INPUT_ACCESS-TOKEN)")
@click.option("--issues", default=None, help="JSON array of issue payloads (default: INPUT_ISSUES)")
@click.option("--project-name", default=None, help="Project search string")
@click.option("--target-column", default=None, help="Target column name, case-insensitive")
@click.option("--target-column-id", default=None, help="Target column node id")
@click.option(
    "--event-path",
    type=click.Path(path_type=Path),
    default=None,
    help="Event payload file (default: GITHUB_EVENT_PATH)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug output",
)
def main(
    access_token: str | None,
    issues: str | None,
    project_name: str | None,
    target_column: str | None,
    target_column_id: str | None,
    event_path: Path | None,
    verbose: bool,
) -> None:
    """Move the project cards of issues to a column of a Projects (classic) board."""
    setup_logging(level="DEBUG" if verbose else None)

    try:
        inputs = load_inputs(
            access_token=access_token,
            issues=issues,
            project_name=project_name,
            target_column=target_column,
            target_column_id=target_column_id,
        )
        input_issues = inputs.parse_issues()
        payload = None if input_issues else load_event_payload(event_path)

        result = asyncio.run(run_action(inputs, collect_issues(input_issues, payload)))
        if result.failed:
            logger.debug("%d move(s) failed: %s", len(result.failed), result.failed)
    except Exception as e:
        logger.error("%s", e)
        logger.debug("Run failed", exc_info=True)
        sys.exit(1)
