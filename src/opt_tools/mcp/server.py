"""MCP server exposing the optimization toolkit over stdio.

Tools: solve_lp, solve_mip, solve_tsp, analyze_problem, get_report.
Configuration comes from OPT_TOOLS_SERVER_URL / OPT_TOOLS_API_KEY (a ``.env``
file in the working directory is honoured). stdout carries the protocol, so
all logging goes to stderr.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import mcp.types as types
from dotenv import load_dotenv
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from rich.console import Console
from rich.logging import RichHandler

from opt_tools._version import __version__
from opt_tools.client import OptimizationClient
from opt_tools.exceptions import OptToolsError
from opt_tools.models.config import ClientConfig
from opt_tools.toolkit.executor import ToolExecutor
from opt_tools.toolkit.models import ToolResult

logger = logging.getLogger(__name__)

SERVER_NAME = "opt-tools"
# Complex problems can take minutes to solve.
SERVER_TIMEOUT_MS = 120000
SERVER_RETRIES = 2


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    """Collapse a ToolResult into one MCP text content block."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=result.text)],
        isError=not result.success,
    )


def create_server(executor: ToolExecutor) -> Server:
    """Register tools/list and tools/call handlers backed by ``executor``."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.parameters,
            )
            for tool in executor.list_tools()
        ]

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        result = await executor.execute(name, arguments)
        if not result.success:
            logger.warning("Tool %s failed: %s", name, result.error)
        return to_call_tool_result(result)

    return server


async def serve(config: ClientConfig) -> None:
    """Run the MCP server on stdio until the host closes the stream."""
    async with OptimizationClient(config) as client:
        server = create_server(ToolExecutor(client))
        logger.info("Opt-Tools MCP Server running on stdio")
        logger.info("Connected to: %s", config.server_url)
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )


def configure_logging(debug: bool = False) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main() -> None:
    """Console entry point: ``opt-tools-mcp``."""
    load_dotenv()
    try:
        config = ClientConfig.from_env(
            defaults={"timeout_ms": SERVER_TIMEOUT_MS, "retries": SERVER_RETRIES}
        )
    except OptToolsError as exc:
        configure_logging()
        logger.error("Server error: %s", exc)
        raise SystemExit(1) from None

    configure_logging(config.debug)
    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
