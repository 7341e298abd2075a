"""Registry of the tools exposed by the MCP Jira server."""

from dataclasses import dataclass, field
from typing import Any

from mcp.types import Tool

from .models import (
    CreateIssuesBulkArgs,
    GetIssuesArgs,
    GetProjectsArgs,
    ToolArguments,
)


@dataclass(frozen=True)
class ToolDefinition:
    """Name, description and input schema of one tool."""

    name: str
    description: str
    input_schema: dict[str, Any]
    arguments_model: type[ToolArguments] = field(repr=False, compare=False)

    def to_mcp_tool(self) -> Tool:
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )


BULK_ISSUE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "projectKey": {
            "type": "string",
            "description": "Key of the project to create the issue in (e.g., 'CCS')",
        },
        "summary": {"type": "string", "description": "Issue summary"},
        "issueType": {
            "type": "string",
            "description": "Issue type name (e.g., 'Bug', 'Story', 'Task', 'Sub-task')",
        },
        "description": {
            "type": "string",
            "description": "Issue description in markdown. Headings (#), bullet "
            "lists (- or *) and plain paragraphs are supported",
        },
        "assignee": {"type": "string", "description": "Assignee account ID"},
        "priority": {
            "type": "string",
            "description": "Priority name (e.g., 'High', 'Medium')",
        },
        "labels": {"type": "array", "items": {"type": "string"}},
        "components": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Component names",
        },
        "parent": {
            "type": "string",
            "description": "Parent issue key, for sub-tasks (e.g., 'CCS-12')",
        },
    },
    "required": ["projectKey", "summary", "issueType"],
}


TOOL_DEFINITIONS: dict[str, ToolDefinition] = {
    definition.name: definition
    for definition in (
        ToolDefinition(
            name="get_projects",
            description="List all Jira projects",
            input_schema={
                "type": "object",
                "properties": {},
                "additionalProperties": False,
            },
            arguments_model=GetProjectsArgs,
        ),
        ToolDefinition(
            name="get_issues",
            description="Get all issues and subtasks for a Jira project "
            "(at most 100 issues)",
            input_schema={
                "type": "object",
                "properties": {
                    "projectKey": {
                        "type": "string",
                        "description": 'Project key (e.g., "PP")',
                    },
                    "jql": {
                        "type": "string",
                        "description": "Optional JQL to filter issues, joined to "
                        "the project restriction with AND (e.g., 'status = Done')",
                    },
                },
                "required": ["projectKey"],
            },
            arguments_model=GetIssuesArgs,
        ),
        ToolDefinition(
            name="create_issues_bulk",
            description="Create multiple Jira issues at once. Each issue is "
            "created independently; one failure does not stop the others",
            input_schema={
                "type": "object",
                "properties": {
                    "issues": {"type": "array", "items": BULK_ISSUE_SCHEMA},
                },
                "required": ["issues"],
            },
            arguments_model=CreateIssuesBulkArgs,
        ),
    )
}


def get_tool_definition(name: str) -> ToolDefinition | None:
    """Look up a tool by name."""
    return TOOL_DEFINITIONS.get(name)


def list_mcp_tools() -> list[Tool]:
    """MCP ``Tool`` objects for every registered tool, in registration order."""
    return [definition.to_mcp_tool() for definition in TOOL_DEFINITIONS.values()]
