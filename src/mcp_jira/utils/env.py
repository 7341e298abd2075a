"""Environment variable utility functions for MCP Jira."""

import os


def is_env_ssl_verify(env_var_name: str, default: str = "true") -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to false values.

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True unless explicitly set to false values
    """
    return os.getenv(env_var_name, default).lower() not in ("false", "0", "no")


def get_required_env(*env_var_names: str) -> tuple[dict[str, str], list[str]]:
    """Collect required environment variables.

    Empty and whitespace-only values count as missing.

    Args:
        *env_var_names: Names of the variables to read

    Returns:
        Tuple of (values found by name, names that are missing)
    """
    values: dict[str, str] = {}
    missing: list[str] = []
    for name in env_var_names:
        value = os.getenv(name, "").strip()
        if value:
            values[name] = value
        else:
            missing.append(name)
    return values, missing
