"""Tests for the Jira issues mixin."""

import pytest

from mcp_jira.exceptions import MCPJiraError
from mcp_jira.models import BulkIssueInput, CreatedIssue


def _issue(**overrides) -> BulkIssueInput:
    data = {"projectKey": "CCS", "summary": "Fix bug", "issueType": "Bug"}
    data.update(overrides)
    return BulkIssueInput.model_validate(data)


def test_create_issue_minimal(jira_fetcher, mock_atlassian_jira):
    """Test that only the required fields are sent for a minimal issue."""
    created = jira_fetcher.create_issue(_issue())

    assert created == CreatedIssue(key="CCS-1", id="10001")
    fields = mock_atlassian_jira.create_issue.call_args.kwargs["fields"]
    assert fields == {
        "project": {"key": "CCS"},
        "summary": "Fix bug",
        "issuetype": {"name": "Bug"},
    }


def test_create_issue_all_fields(jira_fetcher, mock_atlassian_jira):
    """Test the mapping of every optional field."""
    jira_fetcher.create_issue(
        _issue(
            description="# Title\nSome text",
            assignee="5b10ac8d82e05b22cc7d4ef5",
            priority="High",
            labels=["urgent", "backend"],
            components=["API", "UI"],
            parent="CCS-10",
        )
    )

    fields = mock_atlassian_jira.create_issue.call_args.kwargs["fields"]
    assert fields["assignee"] == {"accountId": "5b10ac8d82e05b22cc7d4ef5"}
    assert fields["priority"] == {"name": "High"}
    assert fields["labels"] == ["urgent", "backend"]
    assert fields["components"] == [{"name": "API"}, {"name": "UI"}]
    assert fields["parent"] == {"key": "CCS-10"}
    assert fields["description"] == {
        "type": "doc",
        "version": 1,
        "content": [
            {
                "type": "heading",
                "attrs": {"level": 1},
                "content": [{"type": "text", "text": "Title"}],
            },
            {
                "type": "paragraph",
                "content": [{"type": "text", "text": "Some text"}],
            },
        ],
    }


@pytest.mark.parametrize(
    "overrides",
    [
        {"description": ""},
        {"labels": []},
        {"components": []},
        {"assignee": None, "priority": None, "parent": None},
    ],
)
def test_create_issue_omits_empty_optionals(
    jira_fetcher, mock_atlassian_jira, overrides
):
    """Test that empty or absent optional values never reach the payload."""
    jira_fetcher.create_issue(_issue(**overrides))

    fields = mock_atlassian_jira.create_issue.call_args.kwargs["fields"]
    assert set(fields) == {"project", "summary", "issuetype"}


def test_create_issue_numeric_id_is_stringified(jira_fetcher, mock_atlassian_jira):
    mock_atlassian_jira.create_issue.return_value = {"key": "CCS-2", "id": 10002}
    assert jira_fetcher.create_issue(_issue()).id == "10002"


def test_create_issue_without_key(jira_fetcher, mock_atlassian_jira):
    """Test that a response without a key is treated as a failure."""
    mock_atlassian_jira.create_issue.return_value = {}

    with pytest.raises(MCPJiraError, match="No issue key returned"):
        jira_fetcher.create_issue(_issue())


def test_create_issue_error_names_issue(jira_fetcher, mock_atlassian_jira):
    """Test that API errors carry the summary and project of the issue."""
    mock_atlassian_jira.create_issue.side_effect = Exception(
        "issuetype: Specify a valid issue type"
    )

    with pytest.raises(MCPJiraError) as exc_info:
        jira_fetcher.create_issue(_issue(summary="Add feature"))
    message = str(exc_info.value)
    assert "Add feature" in message
    assert "CCS" in message
    assert "Specify a valid issue type" in message
