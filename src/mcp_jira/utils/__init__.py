"""
Utility functions for the MCP Jira server.
"""

from .env import get_required_env, is_env_ssl_verify
from .lifecycle import ensure_clean_exit, setup_signal_handlers
from .logging import log_config_param, mask_sensitive

__all__ = [
    "ensure_clean_exit",
    "get_required_env",
    "is_env_ssl_verify",
    "log_config_param",
    "mask_sensitive",
    "setup_signal_handlers",
]
