"""Base client module for Jira API interactions."""

import logging
from typing import NoReturn

from atlassian import Jira
from requests.exceptions import HTTPError

from ..exceptions import MCPJiraAuthenticationError, MCPJiraError
from .config import JiraConfig

# Configure logging
logger = logging.getLogger("mcp-jira.jira")

# Descriptions are sent as ADF, which only the v3 REST API accepts
JIRA_API_VERSION = "3"


class JiraClient:
    """Base client for Jira API interactions."""

    def __init__(self, config: JiraConfig) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object, built once at startup.
        """
        self.config = config
        self.jira = Jira(
            url=self.config.url,
            username=self.config.email,
            password=self.config.api_token,
            cloud=True,
            api_version=JIRA_API_VERSION,
            verify_ssl=self.config.ssl_verify,
        )

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self.jira._session.close()

    def _raise_api_error(self, error: Exception, operation: str) -> NoReturn:
        """Re-raise an API failure as an MCP Jira error.

        Args:
            error: The exception raised by the Jira client
            operation: Description of the failed operation with its context

        Raises:
            MCPJiraAuthenticationError: On HTTP 401/403
            MCPJiraError: On any other failure
        """
        if (
            isinstance(error, HTTPError)
            and error.response is not None
            and error.response.status_code in (401, 403)
        ):
            error_msg = (
                f"Authentication failed for Jira API ({error.response.status_code}) "
                f"while trying to {operation}. "
                "Token may be expired or invalid. Please verify credentials."
            )
            logger.error(error_msg)
            raise MCPJiraAuthenticationError(error_msg) from error

        logger.error(f"Failed to {operation}: {error}")
        raise MCPJiraError(f"Failed to {operation}: {error}") from error
