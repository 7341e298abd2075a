"""Configuration module for Jira API interactions."""

from dataclasses import dataclass

from ..utils.env import get_required_env, is_env_ssl_verify

REQUIRED_ENV_VARS = ("JIRA_HOST", "JIRA_EMAIL", "JIRA_API_TOKEN")


@dataclass(frozen=True)
class JiraConfig:
    """Jira API configuration.

    Built once at startup and handed to the client; nothing downstream reads
    the environment again.
    """

    host: str  # Jira host, e.g. your-domain.atlassian.net
    email: str  # Account email used for basic auth
    api_token: str  # API token paired with the email
    ssl_verify: bool = True  # Whether to verify SSL certificates

    @property
    def url(self) -> str:
        """Base URL for the Jira REST API.

        Returns:
            The host prefixed with https:// unless it already carries a scheme.
        """
        host = self.host.rstrip("/")
        if host.startswith(("http://", "https://")):
            return host
        return f"https://{host}"

    def browse_url(self, issue_key: str) -> str:
        """Link to an issue in the Jira web UI."""
        return f"{self.url}/browse/{issue_key}"

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If any of JIRA_HOST, JIRA_EMAIL or JIRA_API_TOKEN is missing
        """
        values, missing = get_required_env(*REQUIRED_ENV_VARS)
        if missing:
            error_msg = (
                "Missing required environment variables: "
                f"{', '.join(missing)} (JIRA_HOST, JIRA_EMAIL and JIRA_API_TOKEN "
                "are required)"
            )
            raise ValueError(error_msg)

        return cls(
            host=values["JIRA_HOST"],
            email=values["JIRA_EMAIL"],
            api_token=values["JIRA_API_TOKEN"],
            ssl_verify=is_env_ssl_verify("JIRA_SSL_VERIFY"),
        )
