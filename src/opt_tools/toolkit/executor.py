"""ToolExecutor: dispatches tool calls to OptimizationClient methods.

Provides a single ``execute()`` coroutine that looks up the tool by name,
validates the arguments against the tool's input model, awaits its handler,
and returns a structured ``ToolResult``. Failures never propagate past
``execute()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from opt_tools.toolkit.models import ToolResult

if TYPE_CHECKING:
    from opt_tools.client import OptimizationClient
    from opt_tools.toolkit.models import ToolDefinition

logger = logging.getLogger(__name__)


class ToolExecutor:
    """Dispatches tool calls to an OptimizationClient and returns structured results.

    Usage::

        executor = ToolExecutor(client)
        result = await executor.execute("analyze_problem", {"description": "..."})
        if result.success:
            print(result.output)
        else:
            print(result.error)
    """

    def __init__(
        self,
        client: OptimizationClient,
        tools: list[ToolDefinition] | None = None,
    ) -> None:
        if tools is None:
            from opt_tools.toolkit.definitions import get_all_tools

            tools = get_all_tools(client)
        self._client = client
        self._tools: dict[str, ToolDefinition] = {tool.name: tool for tool in tools}

    def list_tools(self) -> list[ToolDefinition]:
        """Return every tool declaration, in registration order."""
        return list(self._tools.values())

    def available_tools(self) -> list[str]:
        """Return the names of all available tools."""
        return list(self._tools.keys())

    async def execute(self, tool_name: str, arguments: dict[str, Any] | None) -> ToolResult:
        """Execute a tool by name with the given arguments.

        Args:
            tool_name: Name of the tool to execute.
            arguments: Dict of arguments matching the tool's parameter schema.

        Returns:
            ToolResult with success/failure status and output/error.
        """
        tool = self._tools.get(tool_name)
        if tool is None:
            return ToolResult(
                tool_name=tool_name,
                success=False,
                error=f"Unknown tool: {tool_name}",
            )
        if arguments is None:
            return ToolResult(
                tool_name=tool_name,
                success=False,
                error="No arguments provided",
            )

        try:
            params = tool.input_model.model_validate(arguments)
        except ValidationError as exc:
            return ToolResult(
                tool_name=tool_name,
                success=False,
                error=f"Invalid arguments for {tool_name}: {exc}",
            )

        try:
            output = await tool.handler(params)
        except Exception as exc:
            logger.debug("Tool %s failed: %s", tool_name, exc, exc_info=True)
            return ToolResult(
                tool_name=tool_name,
                success=False,
                error=str(exc) or type(exc).__name__,
            )
        return ToolResult(tool_name=tool_name, success=True, output=output)
