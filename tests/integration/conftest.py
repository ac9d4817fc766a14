"""Fixtures for integration tests against a fake GraphQL endpoint."""

import json
from typing import Any

import httpx
import pytest


class FakeGitHub:
    """In-memory stand-in for the GitHub GraphQL endpoint.

    Answers the columns, project cards and moveProjectCard operations and
    records every request it receives.
    """

    def __init__(
        self,
        projects: list[list[tuple[str, str]]],
        cards: dict[str, list[str] | None],
    ) -> None:
        self.projects = projects
        self.cards = cards
        self.requests: list[dict[str, Any]] = []
        self.moves: list[tuple[str, str]] = []
        self.authorization: set[str] = set()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        self.authorization.add(request.headers.get("Authorization", ""))
        query = body["query"]
        variables = body.get("variables", {})

        if "moveProjectCard" in query:
            self.moves.append((variables["cardId"], variables["columnId"]))
            return httpx.Response(200, json={"data": {"moveProjectCard": {"clientMutationId": None}}})

        if "projectCards" in query:
            card_ids = self.cards.get(variables["issueId"])
            edges = None if card_ids is None else {
                "edges": [{"node": {"id": cid}} for cid in card_ids]
            }
            return httpx.Response(200, json={"data": {"node": {"projectCards": edges}}})

        if "projects(" in query:
            # Only the last matching project is returned, like `last: 1`
            matched = self.projects[-1:]
            edges = [
                {
                    "node": {
                        "columns": {
                            "edges": [{"node": {"id": cid, "name": name}} for cid, name in cols]
                        }
                    }
                }
                for cols in matched
            ]
            return httpx.Response(
                200, json={"data": {"repository": {"projects": {"edges": edges}}}}
            )

        return httpx.Response(
            200, json={"data": None, "errors": [{"message": "Unknown operation"}]}
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def fake_github(board_columns: list[tuple[str, str]]) -> FakeGitHub:
    """Fake endpoint with one board and a few issues."""
    return FakeGitHub(
        projects=[board_columns],
        cards={
            "I_1": ["CARD_1", "CARD_2"],
            "I_2": None,
            "I_3": ["CARD_3"],
        },
    )
