import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from mcp.server import Server
from mcp.server.lowlevel.server import request_ctx
from mcp.types import TextContent, Tool

from .dispatcher import ToolDispatcher
from .exceptions import ToolCallError
from .jira import JiraConfig, JiraFetcher
from .tools import list_mcp_tools
from .utils.logging import log_config_param

# Configure logging
logger = logging.getLogger("mcp-jira")

SERVER_NAME = "mcp-jira"


@dataclass
class AppContext:
    """Application context for MCP Jira."""

    dispatcher: ToolDispatcher


def create_lifespan(config: JiraConfig):
    """Build the server lifespan around an already validated configuration."""

    @asynccontextmanager
    async def server_lifespan(server: Server) -> AsyncIterator[AppContext]:
        """Initialize and clean up application resources."""
        logger.info("Starting MCP Jira server")
        log_config_param(logger, "Jira", "URL", config.url)
        log_config_param(logger, "Jira", "Email", config.email)
        log_config_param(logger, "Jira", "API Token", config.api_token, sensitive=True)
        log_config_param(logger, "Jira", "SSL Verify", str(config.ssl_verify))

        jira = JiraFetcher(config=config)
        logger.info("Jira client initialized successfully.")
        try:
            yield AppContext(dispatcher=ToolDispatcher(jira))
        finally:
            jira.close()
            logger.info("Jira client closed.")

    return server_lifespan


async def list_tools() -> list[Tool]:
    """List the available Jira tools."""
    return list_mcp_tools()


async def call_tool(name: str, arguments: Any) -> Sequence[TextContent]:
    """Handle tool calls for Jira operations.

    Error responses are raised as ToolCallError; the MCP server turns them into
    a result with ``isError`` set and the message as its text content.
    """
    ctx: AppContext = request_ctx.get().lifespan_context
    response = await ctx.dispatcher.dispatch(name, arguments)
    if response.is_error:
        raise ToolCallError(response.text)
    return [TextContent(type="text", text=response.text)]


def create_server(config: JiraConfig) -> Server:
    """Create the MCP server instance for the given configuration."""
    app = Server(SERVER_NAME, lifespan=create_lifespan(config))
    app.list_tools()(list_tools)
    # Arguments reach the dispatcher unchecked so it alone reports validation
    # errors and a malformed bulk item fails only its own result
    app.call_tool(validate_input=False)(call_tool)
    return app


async def run_server(
    config: JiraConfig, transport: str = "stdio", port: int = 8000
) -> None:
    """Run the MCP Jira server with the specified transport."""
    app = create_server(config)

    if transport == "sse":
        from mcp.server.sse import SseServerTransport
        from starlette.applications import Starlette
        from starlette.requests import Request
        from starlette.routing import Mount, Route

        sse = SseServerTransport("/messages/")

        async def handle_sse(request: Request) -> None:
            async with sse.connect_sse(
                request.scope, request.receive, request._send
            ) as streams:
                await app.run(
                    streams[0], streams[1], app.create_initialization_options()
                )

        starlette_app = Starlette(
            routes=[
                Route("/sse", endpoint=handle_sse),
                Mount("/messages/", app=sse.handle_post_message),
            ],
        )

        import uvicorn

        config_uvicorn = uvicorn.Config(starlette_app, host="0.0.0.0", port=port)  # noqa: S104
        server = uvicorn.Server(config_uvicorn)
        # Use server.serve() instead of run() to stay in the same event loop
        await server.serve()
    else:
        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream, write_stream, app.create_initialization_options()
            )
