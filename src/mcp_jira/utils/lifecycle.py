"""Lifecycle management utilities for graceful shutdown and signal handling."""

import logging
import signal
import sys

logger = logging.getLogger("mcp-jira.utils.lifecycle")


def setup_signal_handlers() -> None:
    """Set up signal handlers for graceful shutdown.

    SIGINT keeps Python's default handler, which raises KeyboardInterrupt and
    unwinds the running transport. SIGTERM is routed to the same handler so a
    container stop releases the transport the same way.
    """
    signal.signal(signal.SIGINT, signal.default_int_handler)
    signal.signal(signal.SIGTERM, signal.default_int_handler)
    logger.debug("SIGINT/SIGTERM handlers registered")


def ensure_clean_exit() -> None:
    """Ensure all output streams are flushed before exit.

    Handles cases where streams may already be closed by the parent process.
    """
    logger.info("Server stopped, flushing output streams...")

    try:
        if hasattr(sys.stdout, "closed") and not sys.stdout.closed:
            sys.stdout.flush()
    except (ValueError, OSError, AttributeError) as e:
        logger.debug(f"Could not flush stdout: {e}")

    try:
        if hasattr(sys.stderr, "closed") and not sys.stderr.closed:
            sys.stderr.flush()
    except (ValueError, OSError, AttributeError) as e:
        logger.debug(f"Could not flush stderr: {e}")

    logger.debug("Output streams flushed, exiting gracefully")
