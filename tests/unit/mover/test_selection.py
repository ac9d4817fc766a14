"""Unit tests for issue collection, repository parsing and column selection."""

import pytest

from card_mover.mover import (
    Column,
    ColumnNotFoundError,
    InvalidInputError,
    IssueEvent,
    collect_issues,
    parse_repository,
    select_column,
)


@pytest.fixture
def columns() -> list[Column]:
    """Columns of a typical board."""
    return [
        Column(id="PC_todo", name="to do"),
        Column(id="PC_progress", name="In Progress"),
        Column(id="PC_done", name="Done"),
    ]


@pytest.mark.unit
class TestCollectIssues:
    """Tests for collect_issues."""

    def test_input_issues_take_precedence(self) -> None:
        """Non-empty issues input wins over the event payload."""
        issues = [{"issue": {"node_id": "I_1"}}]

        assert collect_issues(issues, {"issue": {"node_id": "I_2"}}) == issues

    def test_falls_back_to_payload(self) -> None:
        """Empty issues input falls back to the event payload, wrapped."""
        payload = {"action": "opened", "issue": {"node_id": "I_2"}}

        assert collect_issues([], payload) == [payload]

    def test_payload_list_is_kept(self) -> None:
        """A payload that already is a list is not wrapped again."""
        payload = [{"issue": {"node_id": "I_1"}}, {"issue": {"node_id": "I_2"}}]

        assert collect_issues([], payload) == payload

    def test_missing_payload_gives_empty_set(self) -> None:
        """No input and no payload yields no issues."""
        assert collect_issues([], None) == []


@pytest.mark.unit
class TestParseRepository:
    """Tests for parse_repository."""

    def test_parse_api_url(self) -> None:
        """Owner and repo are segments 4 and 5 of the API URL."""
        assert parse_repository("https://api.github.com/repos/octo/board") == ("octo", "board")

    def test_parse_enterprise_url(self) -> None:
        """Positional segments are used regardless of host."""
        assert parse_repository("https://ghe.example.com/repos/acme/widgets") == (
            "acme",
            "widgets",
        )

    @pytest.mark.parametrize(
        "url",
        ["", "https://api.github.com/repos/octo", "https://api.github.com/repos//board"],
    )
    def test_malformed_url_raises(self, url: str) -> None:
        """URLs without owner and repo segments are rejected."""
        with pytest.raises(InvalidInputError):
            parse_repository(url)


@pytest.mark.unit
class TestSelectColumn:
    """Tests for select_column."""

    def test_select_by_name_case_insensitive(self, columns: list[Column]) -> None:
        """'To Do' matches a column named 'to do'."""
        assert select_column(columns, "To Do") == Column(id="PC_todo", name="to do")

    def test_select_by_id(self, columns: list[Column]) -> None:
        """A column id is matched exactly and wins over the name."""
        assert select_column(columns, "To Do", "PC_done") == Column(id="PC_done", name="Done")

    def test_blank_id_uses_name(self, columns: list[Column]) -> None:
        """An empty id falls back to the name lookup."""
        assert select_column(columns, "done", "") == Column(id="PC_done", name="Done")

    def test_id_is_case_sensitive(self, columns: list[Column]) -> None:
        """Ids are compared exactly."""
        with pytest.raises(ColumnNotFoundError):
            select_column(columns, "Done", "pc_done")

    def test_unknown_name_raises(self, columns: list[Column]) -> None:
        """The error names both selectors."""
        with pytest.raises(ColumnNotFoundError) as exc_info:
            select_column(columns, "Blocked")

        message = str(exc_info.value)
        assert message.startswith("Target column does not exist on project.")
        assert 'target-column: "Blocked"' in message
        assert 'target-column-id: ""' in message

    def test_no_columns_raises(self) -> None:
        """A project without columns has no target."""
        with pytest.raises(ColumnNotFoundError):
            select_column([], "Done")


@pytest.mark.unit
class TestIssueEvent:
    """Tests for the IssueEvent payload model."""

    def test_extra_fields_ignored(self) -> None:
        """Webhook payload fields beyond the ones read are ignored."""
        event = IssueEvent.model_validate(
            {
                "action": "labeled",
                "issue": {
                    "node_id": "I_1",
                    "repository_url": "https://api.github.com/repos/octo/board",
                    "labels": [{"name": "bug"}],
                },
            }
        )

        assert event.issue.node_id == "I_1"
        assert event.issue.repository_url.endswith("octo/board")
