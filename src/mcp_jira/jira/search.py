"""Module for Jira search operations.

Searches go through the Jira Cloud v3 endpoint ``/rest/api/3/search/jql``:

- POST with a JSON body holding the JQL and parameters
- up to 100 issues per request, which is also the cap applied here
- fields must be requested explicitly, so all navigable fields are asked for
"""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira.jira")

MAX_SEARCH_RESULTS = 100
SEARCH_FIELDS = ["*navigable"]


def build_project_jql(project_key: str, jql: str | None = None) -> str:
    """
    Build the JQL restricting a search to one project.

    Args:
        project_key: The project key (e.g. "CCS")
        jql: Optional extra clause, joined with AND

    Returns:
        JQL query string
    """
    query = f"project = {project_key}"
    if jql:
        query = f"{query} AND {jql}"
    return query


class SearchMixin(JiraClient):
    """Mixin providing search operations for Jira issues."""

    def search_issues(
        self, project_key: str, jql: str | None = None
    ) -> list[dict[str, Any]]:
        """
        Search the issues of a project.

        Args:
            project_key: The project to search in
            jql: Optional extra JQL clause (e.g. "status = Done")

        Returns:
            Raw issue records as returned by Jira, at most MAX_SEARCH_RESULTS

        Raises:
            MCPJiraAuthenticationError: If authentication fails
            MCPJiraError: If the search fails
        """
        query = build_project_jql(project_key, jql)
        request_body = {
            "jql": query,
            "maxResults": MAX_SEARCH_RESULTS,
            "fields": SEARCH_FIELDS,
        }
        logger.debug(f"Searching issues with JQL: {query}")

        try:
            response = self.jira.post("rest/api/3/search/jql", json=request_body)
        except Exception as e:  # noqa: BLE001 - re-raised with context
            self._raise_api_error(e, f"search issues with JQL '{query}'")

        if not isinstance(response, dict):
            msg = f"Unexpected return value type from search API: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)

        issues = response.get("issues", [])
        return issues[:MAX_SEARCH_RESULTS]
