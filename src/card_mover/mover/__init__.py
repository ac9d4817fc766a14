"""Card Mover - Moves issue cards between columns of a Projects (classic) board."""

from card_mover.mover.exceptions import (
    CardMoverError,
    ColumnNotFoundError,
    InvalidInputError,
    ProjectNotFoundError,
)
from card_mover.mover.models import (
    Column,
    IssueEvent,
    IssuePayload,
    MoveResult,
    ProjectCard,
    RunOutcome,
)
from card_mover.mover.mover import (
    CardMover,
    collect_issues,
    parse_repository,
    select_column,
)

__all__ = [
    "CardMover",
    "CardMoverError",
    "Column",
    "ColumnNotFoundError",
    "InvalidInputError",
    "IssueEvent",
    "IssuePayload",
    "MoveResult",
    "ProjectCard",
    "ProjectNotFoundError",
    "RunOutcome",
    "collect_issues",
    "parse_repository",
    "select_column",
]
