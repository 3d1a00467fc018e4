"""Model Context Protocol adapter for the optimization toolkit."""

from opt_tools.mcp.server import create_server, serve, to_call_tool_result

__all__ = ["create_server", "serve", "to_call_tool_result"]
