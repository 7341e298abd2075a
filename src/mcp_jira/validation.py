"""Validation of tool arguments before any Jira request is made."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class ValidationResult(Generic[ModelT]):
    """Either a validated arguments model or the error naming the bad field."""

    value: ModelT | None = None
    error: str | None = None
    field: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


def _format_location(loc: tuple[int | str, ...]) -> str:
    parts: list[str] = []
    for item in loc:
        if isinstance(item, int):
            parts.append(f"[{item}]")
        elif parts:
            parts.append(f".{item}")
        else:
            parts.append(str(item))
    return "".join(parts)


def _describe_error(error: dict[str, Any]) -> tuple[str, str]:
    """Turn the first pydantic error into (field, message)."""
    field = _format_location(tuple(error.get("loc", ())))
    error_type = error.get("type", "")

    if error_type == "missing":
        message = f"{field} is required"
    elif error_type == "extra_forbidden":
        message = f"{field} is not a recognized parameter"
    elif error_type == "string_type":
        message = f"{field} must be a string"
    elif error_type == "list_type":
        message = f"{field} must be an array"
    else:
        # Strip pydantic's "Value error, " prefix from custom validators
        detail = str(error.get("msg", "is invalid")).removeprefix("Value error, ")
        message = f"{field} {detail}" if field else detail
    return field, message


def validate_arguments(
    model: type[ModelT], arguments: Any
) -> ValidationResult[ModelT]:
    """
    Validate raw tool arguments against an arguments model.

    Args:
        model: The pydantic model declaring the tool's arguments
        arguments: The raw arguments of the tool call; None means no arguments

    Returns:
        ValidationResult holding the model instance, or the error message and
        the name of the first offending field
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        return ValidationResult(error="Arguments must be an object")

    try:
        return ValidationResult(value=model.model_validate(dict(arguments)))
    except ValidationError as e:
        field, message = _describe_error(e.errors()[0])
        return ValidationResult(error=message, field=field or None)
