class MCPJiraError(Exception):
    """Base exception for MCP-Jira errors."""

    pass


class MCPJiraAuthenticationError(MCPJiraError):
    """Raised when Jira API authentication fails (401/403)."""

    pass


class ToolValidationError(MCPJiraError):
    """Raised when tool arguments are missing or malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class UnknownToolError(MCPJiraError):
    """Raised when a tool name is not in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ToolCallError(MCPJiraError):
    """Carries an error payload out of the MCP call_tool handler."""

    pass
