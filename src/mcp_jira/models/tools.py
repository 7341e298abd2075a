"""Argument models for the tools exposed by the MCP Jira server."""

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must be a non-empty string")
    return value


NonEmptyStr = Annotated[str, AfterValidator(_require_text)]


class ToolArguments(BaseModel):
    """Base class for tool arguments, accepting camelCase or snake_case keys."""

    model_config = ConfigDict(populate_by_name=True)


class GetProjectsArgs(ToolArguments):
    """Arguments for ``get_projects`` (none are accepted)."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class GetIssuesArgs(ToolArguments):
    """Arguments for ``get_issues``."""

    project_key: NonEmptyStr = Field(
        alias="projectKey", description="Project key (e.g., 'PP')"
    )
    jql: str | None = Field(
        default=None, description="Optional JQL clause to filter issues"
    )


class BulkIssueInput(ToolArguments):
    """One issue of a ``create_issues_bulk`` request."""

    project_key: NonEmptyStr = Field(alias="projectKey")
    summary: NonEmptyStr
    issue_type: NonEmptyStr = Field(alias="issueType")
    description: str | None = Field(
        default=None, description="Issue description in markdown"
    )
    assignee: str | None = Field(default=None, description="Assignee account ID")
    priority: str | None = Field(default=None, description="Priority name")
    labels: list[str] | None = None
    components: list[str] | None = Field(
        default=None, description="Component names"
    )
    parent: str | None = Field(default=None, description="Parent issue key")


class CreateIssuesBulkArgs(ToolArguments):
    """Arguments for ``create_issues_bulk``.

    Items are kept raw here; each one is validated on its own so a malformed
    issue only fails its own result slot.
    """

    issues: list[Any]
