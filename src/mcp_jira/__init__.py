import asyncio
import os
import sys

import click
from dotenv import load_dotenv

__version__ = "0.1.0"

# Logging must be configured before submodules create their loggers
from .logging_config import log_operation, setup_logger

logger = setup_logger()


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse"]),
    default="stdio",
    help="Transport type (stdio or sse)",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for SSE transport",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--jira-host",
    help="Jira host (e.g., your-domain.atlassian.net)",
)
@click.option("--jira-email", help="Jira account email")
@click.option("--jira-token", help="Jira API token")
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=True,
    help="Verify SSL certificates for Jira (default: verify)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    log_dir: str | None,
    log_to_file: bool,
    jira_host: str | None,
    jira_email: str | None,
    jira_token: str | None,
    jira_ssl_verify: bool,
) -> None:
    """MCP Jira Server - Jira projects, issue search and bulk issue creation for MCP."""
    logging_level = "DEBUG" if verbose >= 2 else os.getenv("LOG_LEVEL", "INFO")

    setup_logger(
        name="mcp-jira",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    with log_operation(logger, "application_startup", app_version=__version__):
        # Load environment variables from file if specified, otherwise try default .env
        if env_file:
            logger.info(f"Loading environment from file: {env_file}")
            load_dotenv(env_file)
        else:
            logger.debug("Attempting to load environment from default .env file")
            load_dotenv()

        # Command line arguments take precedence over the environment
        if jira_host:
            os.environ["JIRA_HOST"] = jira_host
        if jira_email:
            os.environ["JIRA_EMAIL"] = jira_email
        if jira_token:
            os.environ["JIRA_API_TOKEN"] = jira_token
        if not jira_ssl_verify:
            os.environ["JIRA_SSL_VERIFY"] = "false"

        from .jira import JiraConfig

        try:
            config = JiraConfig.from_env()
        except ValueError as e:
            logger.error(f"Invalid configuration: {e}")
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    from . import server
    from .utils.lifecycle import ensure_clean_exit, setup_signal_handlers

    logger.info(f"Starting MCP Jira v{__version__} with {transport} transport")
    setup_signal_handlers()

    try:
        asyncio.run(server.run_server(config, transport=transport, port=port))
    except KeyboardInterrupt:
        logger.info("Interrupt received, shutting down")
    finally:
        ensure_clean_exit()

    sys.exit(0)


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
