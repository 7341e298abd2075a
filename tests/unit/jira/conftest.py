"""
Test fixtures for Jira unit tests.

This module provides Jira-specific configurations and a mocked Atlassian
client so no test ever reaches the network.
"""

import os
from unittest.mock import MagicMock, patch

import pytest

from mcp_jira.jira import JiraConfig, JiraFetcher
from tests.utils.factories import (
    CreatedIssueResponseFactory,
    JiraIssueFactory,
    JiraProjectFactory,
)

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def jira_config_factory():
    """
    Factory for creating JiraConfig instances with customizable options.

    Returns:
        Callable: Function that creates JiraConfig instances
    """

    def _create_config(**overrides):
        defaults = {
            "host": "test.atlassian.net",
            "email": "test@example.com",
            "api_token": "test_token",
        }
        return JiraConfig(**{**defaults, **overrides})

    return _create_config


@pytest.fixture
def mock_config(jira_config_factory):
    """Standard JiraConfig for tests that don't need custom configuration."""
    return jira_config_factory()


@pytest.fixture
def jira_auth_environment():
    """Environment holding the three required Jira variables."""
    jira_env = {
        "JIRA_HOST": "test.atlassian.net",
        "JIRA_EMAIL": "test@example.com",
        "JIRA_API_TOKEN": "test_token",
    }
    with patch.dict(os.environ, jira_env, clear=False):
        yield jira_env


# ============================================================================
# Mock Atlassian Client Fixtures
# ============================================================================


@pytest.fixture
def mock_atlassian_jira():
    """
    Mock of the Atlassian Jira client with common responses.

    Returns:
        MagicMock: Configured mock Jira client
    """
    mock_jira = MagicMock()
    mock_jira.projects.return_value = [
        JiraProjectFactory.create("CCS", "Chat System"),
        JiraProjectFactory.create("PP", "Payments Platform"),
    ]
    mock_jira.post.return_value = {
        "issues": [
            JiraIssueFactory.create("CCS-1"),
            JiraIssueFactory.create("CCS-2"),
        ],
        "isLast": True,
    }
    mock_jira.create_issue.return_value = CreatedIssueResponseFactory.create()
    return mock_jira


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira):
    """
    JiraFetcher whose Atlassian client is replaced by a mock.

    Returns:
        JiraFetcher: Fetcher wired to mock_atlassian_jira
    """
    with patch("mcp_jira.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira
        fetcher = JiraFetcher(config=mock_config)
        yield fetcher
