"""Toolkit data models for Opt-Tools agent tool definitions.

Frozen dataclasses for tool definitions and results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from pydantic import BaseModel


@dataclass(frozen=True)
class ToolDefinition:
    """A single tool definition for LLM consumption.

    Attributes:
        name: Tool name (e.g. "solve_lp", "get_report").
        description: Human-readable description of when/why to use this tool.
        parameters: JSON Schema dict describing tool parameters.
        input_model: Pydantic model the raw arguments are validated into.
        handler: Coroutine function taking the validated arguments and
            returning the formatted text result.
    """

    name: str
    description: str
    parameters: dict
    input_model: type[BaseModel]
    handler: Callable[[BaseModel], Awaitable[str]]

    def to_openai(self) -> dict:
        """Convert to OpenAI function-calling format.

        Returns:
            Dict with "type": "function" and nested "function" object.
        """
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }

    def to_anthropic(self) -> dict:
        """Convert to Anthropic tool-use format.

        Returns:
            Dict with "name", "description", and "input_schema".
        """
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.parameters,
        }


@dataclass(frozen=True)
class ToolResult:
    """Structured result from executing a tool.

    Exactly one of ``output`` (on success) or ``error`` (on failure) is
    meaningful.

    Attributes:
        tool_name: Name of the tool that was executed.
        success: Whether execution succeeded.
        output: Formatted text on success.
        error: Error message on failure.
    """

    tool_name: str
    success: bool
    output: str = ""
    error: str = ""

    @property
    def text(self) -> str:
        """Text shown to the calling agent."""
        return self.output if self.success else f"Error: {self.error}"
