"""Data models for the Card Mover."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel


class IssuePayload(BaseModel):
    """The part of an issue webhook payload the mover reads."""

    repository_url: str
    node_id: str


class IssueEvent(BaseModel):
    """An issue event, either from the ``issues`` input or the triggering event."""

    issue: IssuePayload


@dataclass
class Column:
    """A column on a Projects (classic) board."""

    id: str  # GraphQL node id
    name: str


@dataclass
class ProjectCard:
    """A project card attached to an issue."""

    id: str  # GraphQL node id


class RunOutcome(str, Enum):
    """Successful terminal states of a run."""

    NO_OP = "no_op"
    COMPLETED = "completed"


@dataclass
class MoveResult:
    """Result of a Card Mover run.

    Attributes:
        outcome: How the run ended.
        column: The target column, None for a no-op run.
        card_ids: Cards a move was dispatched for, in lookup order.
        failed: Cards whose move mutation raised.
    """

    outcome: RunOutcome
    column: Column | None = None
    card_ids: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
