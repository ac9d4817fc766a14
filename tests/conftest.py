"""Shared pytest fixtures and configuration."""

from collections.abc import Callable
from typing import Any

import pytest


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")
    config.addinivalue_line("markers", "real: calls the live GitHub API (local only)")


# Shared fixtures


@pytest.fixture
def make_issue() -> Callable[..., dict[str, Any]]:
    """Factory for issue event entries as found in webhook payloads."""

    def _make(node_id: str, repo: str = "octo/board") -> dict[str, Any]:
        return {
            "action": "opened",
            "issue": {
                "number": 1,
                "node_id": node_id,
                "repository_url": f"https://api.github.com/repos/{repo}",
                "title": "Sample issue",
            },
        }

    return _make


@pytest.fixture
def columns_data() -> Callable[..., dict[str, Any]]:
    """Factory for columns query data, one list of (id, name) per project."""

    def _make(*projects: list[tuple[str, str]]) -> dict[str, Any]:
        return {
            "repository": {
                "projects": {
                    "edges": [
                        {
                            "node": {
                                "columns": {
                                    "edges": [
                                        {"node": {"id": cid, "name": name}} for cid, name in cols
                                    ]
                                }
                            }
                        }
                        for cols in projects
                    ]
                }
            }
        }

    return _make


@pytest.fixture
def cards_data() -> Callable[..., dict[str, Any]]:
    """Factory for project cards query data of one issue."""

    def _make(*card_ids: str) -> dict[str, Any]:
        return {"node": {"projectCards": {"edges": [{"node": {"id": cid}} for cid in card_ids]}}}

    return _make


@pytest.fixture
def board_columns() -> list[tuple[str, str]]:
    """Columns of a typical board."""
    return [
        ("PC_todo", "To Do"),
        ("PC_progress", "In Progress"),
        ("PC_done", "Done"),
    ]
