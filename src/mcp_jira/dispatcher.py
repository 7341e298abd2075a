"""Dispatching of tool calls to the Jira adapter."""

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, cast

from .exceptions import ToolValidationError, UnknownToolError
from .jira import JiraFetcher
from .logging_config import log_operation
from .models import (
    BulkCreationReport,
    BulkIssueInput,
    CreateIssuesBulkArgs,
    GetIssuesArgs,
    GetProjectsArgs,
    IssueCreationResult,
)
from .tools import get_tool_definition
from .validation import validate_arguments

logger = logging.getLogger("mcp-jira.dispatcher")


@dataclass(frozen=True)
class ToolResponse:
    """The single terminal response of a tool call."""

    text: str
    is_error: bool = False

    @property
    def success(self) -> bool:
        return not self.is_error

    @classmethod
    def from_payload(cls, payload: Any) -> "ToolResponse":
        return cls(text=json.dumps(payload, indent=2, ensure_ascii=False))

    @classmethod
    def from_error(cls, message: str) -> "ToolResponse":
        return cls(text=f"Error: {message}", is_error=True)


class ToolDispatcher:
    """Runs one tool call through validation, execution and response packaging.

    The dispatcher holds no per-call state; the Jira fetcher it wraps is shared
    read-only between calls.
    """

    def __init__(self, jira: JiraFetcher) -> None:
        self.jira = jira
        self._handlers: dict[str, Callable[[Any], Awaitable[Any]]] = {
            "get_projects": self._get_projects,
            "get_issues": self._get_issues,
            "create_issues_bulk": self._create_issues_bulk,
        }

    async def dispatch(self, name: str, arguments: Any) -> ToolResponse:
        """
        Handle a tool call.

        Every outcome, including unknown tools, invalid arguments and Jira
        failures, is returned as a ToolResponse; nothing is raised.

        Args:
            name: The requested tool name
            arguments: The raw arguments of the call

        Returns:
            ToolResponse with a JSON payload, or an error message
        """
        with log_operation(logger, "call_tool", tool=name or "<missing>"):
            try:
                if not name:
                    raise ToolValidationError("Tool name is required")

                definition = get_tool_definition(name)
                if definition is None or name not in self._handlers:
                    raise UnknownToolError(name)

                validation = validate_arguments(definition.arguments_model, arguments)
                if not validation.is_valid:
                    raise ToolValidationError(
                        f"Invalid parameters: {validation.error}",
                        field=validation.field,
                    )

                payload = await self._handlers[name](validation.value)
                return ToolResponse.from_payload(payload)

            except UnknownToolError as e:
                logger.warning(str(e))
                return ToolResponse.from_error(str(e))
            except ToolValidationError as e:
                logger.warning(f"Rejected call to {name}: {e}")
                return ToolResponse.from_error(str(e))
            except Exception as e:  # noqa: BLE001 - every failure becomes a response
                logger.error(f"Tool execution error in {name}: {e}")
                logger.debug("Full exception details:", exc_info=True)
                return ToolResponse.from_error(str(e))

    async def _get_projects(self, args: GetProjectsArgs) -> list[dict[str, Any]]:
        projects = await asyncio.to_thread(self.jira.list_projects)
        return [project.model_dump() for project in projects]

    async def _get_issues(self, args: GetIssuesArgs) -> list[dict[str, Any]]:
        return await asyncio.to_thread(
            self.jira.search_issues, args.project_key, args.jql
        )

    async def _create_issues_bulk(self, args: CreateIssuesBulkArgs) -> dict[str, Any]:
        # One slot per input issue, filled in whatever order creations finish
        results: list[IssueCreationResult | None] = [None] * len(args.issues)

        async def fill_slot(index: int, raw_issue: Any) -> None:
            results[index] = await self._create_one(index, raw_issue)

        await asyncio.gather(
            *(fill_slot(index, raw) for index, raw in enumerate(args.issues))
        )

        if any(result is None for result in results):
            raise RuntimeError("Bulk creation finished with unfilled result slots")

        report = BulkCreationReport(results=cast(list[IssueCreationResult], results))
        successes = sum(1 for r in report.results if r.success)
        logger.info(
            f"Bulk creation finished: {successes}/{len(report.results)} issues created"
        )
        return report.to_simplified_dict()

    async def _create_one(self, index: int, raw_issue: Any) -> IssueCreationResult:
        """Validate and create one issue; failures stay in this issue's result."""
        if not isinstance(raw_issue, Mapping):
            return IssueCreationResult.failed(
                f"Invalid parameters: issues[{index}] must be an object"
            )

        raw_summary = raw_issue.get("summary")
        summary = raw_summary if isinstance(raw_summary, str) else None

        validation = validate_arguments(BulkIssueInput, raw_issue)
        if not validation.is_valid:
            # Field paths are reported relative to the whole request
            error = (
                f"issues[{index}].{validation.error}"
                if validation.field
                else validation.error
            )
            logger.warning(f"Skipping issues[{index}]: {error}")
            return IssueCreationResult.failed(f"Invalid parameters: {error}", summary)

        issue = validation.value
        try:
            created = await asyncio.to_thread(self.jira.create_issue, issue)
        except Exception as e:  # noqa: BLE001 - isolated to this issue's slot
            logger.warning(f"Failed to create issues[{index}] '{issue.summary}': {e}")
            return IssueCreationResult.failed(str(e), issue.summary)

        return IssueCreationResult.created(
            created, issue.summary, url=self.jira.config.browse_url(created.key)
        )
