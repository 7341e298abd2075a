"""Module for Jira issue operations."""

import logging
from typing import Any

from ..markdown_converter import markdown_to_adf
from ..models import BulkIssueInput, CreatedIssue
from .client import JiraClient

logger = logging.getLogger("mcp-jira.jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def create_issue(self, issue: BulkIssueInput) -> CreatedIssue:
        """
        Create a new Jira issue.

        Args:
            issue: The validated issue input

        Returns:
            Key and ID of the created issue

        Raises:
            MCPJiraAuthenticationError: If authentication fails
            MCPJiraError: If the issue cannot be created
        """
        fields = self._build_issue_fields(issue)

        try:
            response = self.jira.create_issue(fields=fields)
            issue_key = response.get("key") if isinstance(response, dict) else None
            if not issue_key:
                raise ValueError("No issue key returned from Jira API")
        except Exception as e:  # noqa: BLE001 - re-raised with context
            self._raise_api_error(
                e, f"create issue '{issue.summary}' in project {issue.project_key}"
            )

        logger.info(f"Created issue {issue_key} in project {issue.project_key}")
        return CreatedIssue(key=str(issue_key), id=str(response.get("id", "")))

    def _build_issue_fields(self, issue: BulkIssueInput) -> dict[str, Any]:
        """
        Map an issue input onto the Jira ``fields`` payload.

        Optional values that are absent or empty are left out entirely.

        Args:
            issue: The validated issue input

        Returns:
            The fields dictionary for the create request
        """
        fields: dict[str, Any] = {
            "project": {"key": issue.project_key},
            "summary": issue.summary,
            "issuetype": {"name": issue.issue_type},
        }

        if issue.description:
            fields["description"] = markdown_to_adf(issue.description)
        if issue.assignee:
            fields["assignee"] = {"accountId": issue.assignee}
        if issue.priority:
            fields["priority"] = {"name": issue.priority}
        if issue.labels:
            fields["labels"] = list(issue.labels)
        if issue.components:
            fields["components"] = [{"name": name} for name in issue.components]
        if issue.parent:
            fields["parent"] = {"key": issue.parent}

        return fields
