"""Tool Calling

Expose the optimization API to an LLM as function-calling tools. The
executor validates arguments, calls the service and returns formatted text;
failures come back as error results instead of exceptions.

Demonstrates: get_all_tools(), ToolDefinition.to_openai(),
              ToolDefinition.to_anthropic(), ToolExecutor.execute()
"""

import asyncio
import json

from dotenv import load_dotenv

from opt_tools import ClientConfig, OptimizationClient
from opt_tools.toolkit import ToolExecutor

load_dotenv()


async def main():
    async with OptimizationClient(ClientConfig.from_env()) as client:
        executor = ToolExecutor(client)

        print("Available tools:", ", ".join(executor.available_tools()))
        print()
        print("OpenAI format for analyze_problem:")
        analyze = next(t for t in executor.list_tools() if t.name == "analyze_problem")
        print(json.dumps(analyze.to_openai(), indent=2))

        # --- Simulate the tool calls a model might make ---
        calls = [
            ("analyze_problem", {"description": "Pick which of 3 projects to fund with $1M."}),
            ("solve_lp", {
                "variables": [{"name": "x", "type": "continuous", "lower_bound": 0}],
                "objective": {"sense": "maximize", "expression": "x"},
                "constraints": [{"expression": "x <= 4"}],
                "generate_report": False,
            }),
            ("solve_qp", {}),
        ]
        for name, arguments in calls:
            result = await executor.execute(name, arguments)
            print()
            print(f"[{name}] success={result.success}")
            print(result.text)


if __name__ == "__main__":
    asyncio.run(main())
