"""Tests for tool argument validation."""

import pytest

from mcp_jira.models import (
    BulkIssueInput,
    CreateIssuesBulkArgs,
    GetIssuesArgs,
    GetProjectsArgs,
)
from mcp_jira.validation import validate_arguments


class TestValidateArguments:
    """Tests for validate_arguments."""

    def test_valid_get_issues(self):
        result = validate_arguments(
            GetIssuesArgs, {"projectKey": "CCS", "jql": "status = Done"}
        )

        assert result.is_valid
        assert result.value.project_key == "CCS"
        assert result.value.jql == "status = Done"
        assert result.error is None

    def test_snake_case_keys_accepted(self):
        result = validate_arguments(GetIssuesArgs, {"project_key": "CCS"})
        assert result.is_valid
        assert result.value.jql is None

    def test_missing_required_field(self):
        result = validate_arguments(GetIssuesArgs, {})

        assert not result.is_valid
        assert result.value is None
        assert result.field == "projectKey"
        assert result.error == "projectKey is required"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_empty_string_rejected(self, value):
        result = validate_arguments(GetIssuesArgs, {"projectKey": value})

        assert not result.is_valid
        assert result.field == "projectKey"
        assert result.error == "projectKey must be a non-empty string"

    def test_wrong_type_rejected(self):
        result = validate_arguments(GetIssuesArgs, {"projectKey": 42})

        assert not result.is_valid
        assert result.error == "projectKey must be a string"

    @pytest.mark.parametrize("arguments", [None, {}])
    def test_get_projects_without_arguments(self, arguments):
        assert validate_arguments(GetProjectsArgs, arguments).is_valid

    def test_get_projects_rejects_unknown_arguments(self):
        result = validate_arguments(GetProjectsArgs, {"limit": 5})

        assert not result.is_valid
        assert result.field == "limit"
        assert "not a recognized parameter" in result.error

    @pytest.mark.parametrize("arguments", ["CCS", ["CCS"], 3])
    def test_non_mapping_arguments(self, arguments):
        result = validate_arguments(GetIssuesArgs, arguments)

        assert not result.is_valid
        assert result.error == "Arguments must be an object"

    def test_bulk_requires_issue_array(self):
        result = validate_arguments(CreateIssuesBulkArgs, {"issues": "not a list"})

        assert not result.is_valid
        assert result.field == "issues"
        assert result.error == "issues must be an array"

    def test_bulk_missing_issues(self):
        result = validate_arguments(CreateIssuesBulkArgs, {})
        assert result.error == "issues is required"

    def test_bulk_keeps_items_raw(self):
        """Items are validated one by one later, so any item shape passes here."""
        result = validate_arguments(
            CreateIssuesBulkArgs, {"issues": [{"summary": "x"}, "junk"]}
        )
        assert result.is_valid
        assert result.value.issues == [{"summary": "x"}, "junk"]


class TestBulkIssueInput:
    """Tests for per-issue validation."""

    def test_full_issue(self):
        result = validate_arguments(
            BulkIssueInput,
            {
                "projectKey": "CCS",
                "summary": "Add feature",
                "issueType": "Story",
                "labels": ["urgent"],
                "components": ["API"],
                "parent": "CCS-1",
            },
        )

        assert result.is_valid
        issue = result.value
        assert issue.project_key == "CCS"
        assert issue.issue_type == "Story"
        assert issue.labels == ["urgent"]
        assert issue.description is None

    @pytest.mark.parametrize("field", ["projectKey", "summary", "issueType"])
    def test_required_fields(self, field):
        data = {"projectKey": "CCS", "summary": "Fix bug", "issueType": "Bug"}
        data.pop(field)

        result = validate_arguments(BulkIssueInput, data)
        assert result.field == field
        assert result.error == f"{field} is required"

    def test_labels_must_be_strings(self):
        result = validate_arguments(
            BulkIssueInput,
            {"projectKey": "CCS", "summary": "s", "issueType": "Bug", "labels": [1]},
        )

        assert not result.is_valid
        assert result.field == "labels[0]"
