"""Logging helpers shared across MCP Jira modules."""

import logging


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a secret, keeping only its first and last few characters.

    Args:
        value: The value to mask
        keep_chars: Number of characters to keep at each end

    Returns:
        Masked representation, or "Not Provided" for empty values
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return f"{value[:keep_chars]}{'*' * (len(value) - keep_chars * 2)}{value[-keep_chars:]}"


def log_config_param(
    logger: logging.Logger,
    service: str,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Log a configuration parameter, masking it when sensitive.

    Args:
        logger: Logger to write to
        service: Service name, e.g. "Jira"
        param: Parameter name
        value: Parameter value
        sensitive: Whether the value must be masked
    """
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"{service} {param}: {display_value}")
