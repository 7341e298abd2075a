"""Jira API module for MCP Jira.

This module provides the only component that talks to the Jira REST API.
"""

from .client import JiraClient
from .config import JiraConfig
from .issues import IssuesMixin
from .projects import ProjectsMixin
from .search import MAX_SEARCH_RESULTS, SearchMixin, build_project_jql


class JiraFetcher(ProjectsMixin, SearchMixin, IssuesMixin):
    """
    The main Jira client class providing access to the Jira operations.

    This class inherits from the mixins that implement the project listing,
    issue search and issue creation operations.
    """

    pass


__all__ = [
    "JiraClient",
    "JiraConfig",
    "JiraFetcher",
    "MAX_SEARCH_RESULTS",
    "build_project_jql",
]
