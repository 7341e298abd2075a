"""Result models returned by the MCP Jira tools."""

from typing import Any

from pydantic import BaseModel, Field


class ProjectSummary(BaseModel):
    """Key and name of a Jira project."""

    key: str
    name: str

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "ProjectSummary":
        """Project a raw Jira project record down to key and name."""
        return cls(key=str(data.get("key", "")), name=str(data.get("name", "")))


class CreatedIssue(BaseModel):
    """Identifiers Jira assigns to a newly created issue."""

    key: str
    id: str


class IssueCreationResult(BaseModel):
    """Outcome of creating one issue of a bulk request."""

    success: bool
    key: str | None = None
    id: str | None = None
    summary: str | None = None
    url: str | None = None
    error: str | None = None

    @classmethod
    def created(
        cls, issue: CreatedIssue, summary: str, url: str | None = None
    ) -> "IssueCreationResult":
        return cls(success=True, key=issue.key, id=issue.id, summary=summary, url=url)

    @classmethod
    def failed(cls, error: str, summary: str | None = None) -> "IssueCreationResult":
        return cls(success=False, error=error, summary=summary)

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to a dict without unset fields."""
        return self.model_dump(exclude_none=True)


class BulkCreationReport(BaseModel):
    """Payload of a ``create_issues_bulk`` call."""

    message: str = "Bulk issue creation completed"
    results: list[IssueCreationResult] = Field(default_factory=list)

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "results": [result.to_simplified_dict() for result in self.results],
        }
