"""Module for Jira project operations."""

import logging

from ..models import ProjectSummary
from .client import JiraClient

logger = logging.getLogger("mcp-jira.jira")


class ProjectsMixin(JiraClient):
    """Mixin for Jira project operations."""

    def list_projects(self) -> list[ProjectSummary]:
        """
        Get all projects visible to the configured account.

        Returns:
            List of projects reduced to key and name

        Raises:
            MCPJiraAuthenticationError: If authentication fails
            MCPJiraError: If the projects cannot be fetched
        """
        try:
            projects = self.jira.projects()
        except Exception as e:  # noqa: BLE001 - re-raised with context
            self._raise_api_error(e, "list projects")

        if not isinstance(projects, list):
            msg = f"Unexpected return value type from `jira.projects`: {type(projects)}"
            logger.error(msg)
            raise TypeError(msg)

        return [ProjectSummary.from_api_response(project) for project in projects]
