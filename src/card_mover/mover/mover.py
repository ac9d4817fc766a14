"""CardMover - Moves the project cards of a set of issues to a target column."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from card_mover.logging import truncate_output
from card_mover.mover.exceptions import (
    ColumnNotFoundError,
    InvalidInputError,
    ProjectNotFoundError,
)
from card_mover.mover.models import (
    Column,
    IssueEvent,
    MoveResult,
    ProjectCard,
    RunOutcome,
)

if TYPE_CHECKING:
    from card_mover.github import GitHubGraphQLClient

logger = logging.getLogger("card_mover.mover")


def collect_issues(input_issues: list[Any], payload: Any) -> list[Any]:
    """Determine the issue set of a run.

    The ``issues`` input wins when it is non-empty; otherwise the triggering
    event payload is used. A single object is wrapped in a list.
    """
    source = input_issues if input_issues else payload
    if source is None:
        return []
    if isinstance(source, list):
        return source
    return [source]


def parse_repository(repository_url: str) -> tuple[str, str]:
    """Extract owner and name from an issue's ``repository_url``.

    Expects ``https://api.github.com/repos/{owner}/{repo}``.

    Raises:
        InvalidInputError: If the URL does not carry owner and repo segments
    """
    parts = repository_url.split("/")
    if len(parts) < 6 or not parts[4] or not parts[5]:
        raise InvalidInputError(f"Cannot determine repository from URL: {repository_url!r}")
    return parts[4], parts[5]


def select_column(
    columns: list[Column],
    column_name: str | None,
    column_id: str | None = None,
) -> Column:
    """Select the target column.

    A non-blank column id is matched exactly; otherwise the name is matched
    case-insensitively.

    Raises:
        ColumnNotFoundError: If no column matches the selector
    """
    target: Column | None = None
    if column_id:
        target = next((c for c in columns if c.id == column_id), None)
    elif column_name is not None:
        wanted = column_name.lower()
        target = next((c for c in columns if c.name.lower() == wanted), None)

    if target is None:
        raise ColumnNotFoundError(
            "Target column does not exist on project. "
            "Please use a different column selector:\n"
            f"target-column: {json.dumps(column_name or '')}\n"
            f"target-column-id: {json.dumps(column_id or '')}"
        )
    return target


def _validate_issues(issues: list[Any]) -> list[IssueEvent]:
    events = []
    for index, entry in enumerate(issues):
        try:
            events.append(IssueEvent.model_validate(entry))
        except ValidationError as e:
            raise InvalidInputError(f"Invalid issue payload at index {index}: {e}") from e
    return events


class CardMover:
    """Moves issue cards on a Projects (classic) board.

    One run is a linear pipeline: resolve the target column, look up the
    cards of every issue concurrently, then dispatch a move per card.
    """

    def __init__(self, client: GitHubGraphQLClient) -> None:
        """Initialize the CardMover.

        Args:
            client: GraphQL client used for every API call.
        """
        self.client = client

    async def fetch_columns(self, owner: str, repo: str, project_name: str) -> list[Column]:
        """Fetch the columns of the last project matching ``project_name``.

        Raises:
            ProjectNotFoundError: If the repository or project cannot be found
        """
        repository = await self.client.get_project_columns(owner, repo, project_name)
        if repository is None:
            raise ProjectNotFoundError(f"Repository {owner}/{repo} not found")

        edges = (repository.get("projects") or {}).get("edges") or []
        if not edges:
            raise ProjectNotFoundError(
                f"No project matching {project_name!r} found in {owner}/{repo}"
            )

        project = edges[-1]["node"]
        columns = [
            Column(id=edge["node"]["id"], name=edge["node"]["name"])
            for edge in project["columns"]["edges"]
        ]
        logger.debug("Project has %d column(s): %s", len(columns), [c.name for c in columns])
        return columns

    async def fetch_cards(self, issue_ids: list[str]) -> list[ProjectCard]:
        """Look up the project cards of every issue concurrently.

        Issues without cards are skipped. Cards keep the order of ``issue_ids``.
        """
        nodes = await asyncio.gather(*(self.client.get_issue_cards(i) for i in issue_ids))

        cards = []
        for issue_id, node in zip(issue_ids, nodes, strict=True):
            project_cards = node.get("projectCards") if node else None
            if project_cards is None:
                logger.debug("Issue %s has no project cards", issue_id)
                continue
            cards.extend(ProjectCard(id=edge["node"]["id"]) for edge in project_cards["edges"])
        return cards

    async def move_cards(self, cards: list[ProjectCard], column_id: str) -> list[str]:
        """Dispatch a move mutation per card.

        Moves run independently of each other; a failed move is logged and
        does not fail the run.

        Returns:
            Ids of the cards whose move raised.
        """
        tasks = []
        for card in cards:
            tasks.append(asyncio.create_task(self.client.move_project_card(card.id, column_id)))
            logger.info("Moving cardId: %s", card.id)

        results = await asyncio.gather(*tasks, return_exceptions=True)

        failed = []
        for card, result in zip(cards, results, strict=True):
            if isinstance(result, BaseException):
                logger.warning("Failed to move card %s: %s", card.id, result)
                failed.append(card.id)
        return failed

    async def run(
        self,
        issues: list[Any],
        project_name: str,
        column_name: str | None,
        column_id: str | None = None,
    ) -> MoveResult:
        """Move the cards of ``issues`` to the selected column.

        Args:
            issues: Issue entries as returned by collect_issues().
            project_name: Search string for the repository's projects.
            column_name: Target column name, matched case-insensitively.
            column_id: Target column node id; takes precedence when non-blank.

        Returns:
            MoveResult describing the run.

        Raises:
            InvalidInputError: If an issue entry or repository URL is malformed.
            ProjectNotFoundError: If no project matches.
            ColumnNotFoundError: If no column matches; no card is touched.
        """
        logger.info("Issues: %s", truncate_output(json.dumps(issues, indent=2, default=str)))

        # A null first entry is rejected by validation below
        first = issues[0] if issues else {}
        if first is not None and (not isinstance(first, dict) or "issue" not in first):
            logger.info("No issues to move")
            return MoveResult(outcome=RunOutcome.NO_OP)

        events = _validate_issues(issues)
        owner, repo = parse_repository(events[0].issue.repository_url)

        columns = await self.fetch_columns(owner, repo, project_name)
        column = select_column(columns, column_name, column_id)

        cards = await self.fetch_cards([event.issue.node_id for event in events])

        logger.info(
            "Moving %d cards to %s (node_id: %s) in project %s",
            len(cards),
            column_name,
            column.id,
            project_name,
        )
        failed = await self.move_cards(cards, column.id)

        return MoveResult(
            outcome=RunOutcome.COMPLETED,
            column=column,
            card_ids=[card.id for card in cards],
            failed=failed,
        )
