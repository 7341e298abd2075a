"""
Pydantic models for MCP Jira tool arguments and results.
"""

from .results import (
    BulkCreationReport,
    CreatedIssue,
    IssueCreationResult,
    ProjectSummary,
)
from .tools import (
    BulkIssueInput,
    CreateIssuesBulkArgs,
    GetIssuesArgs,
    GetProjectsArgs,
    ToolArguments,
)

__all__ = [
    "BulkCreationReport",
    "BulkIssueInput",
    "CreateIssuesBulkArgs",
    "CreatedIssue",
    "GetIssuesArgs",
    "GetProjectsArgs",
    "IssueCreationResult",
    "ProjectSummary",
    "ToolArguments",
]
