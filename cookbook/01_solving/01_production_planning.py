"""Production Planning (LP)

A factory makes chairs and tables. A chair earns $3 and a table $2; both
take one hour of labor, a chair uses 2 units of material and a table 1.
With 10 labor hours and 15 units of material, how many of each maximizes
profit?

Demonstrates: ClientConfig.from_env(), OptimizationClient.solve_lp(),
              SolveResponse fields, format_solve_response()
"""

import asyncio

from dotenv import load_dotenv

from opt_tools import ClientConfig, OptimizationClient
from opt_tools.toolkit import format_solve_response

load_dotenv()

PROBLEM = {
    "variables": [
        {"name": "chairs", "type": "continuous", "lower_bound": 0,
         "description": "Number of chairs to produce"},
        {"name": "tables", "type": "continuous", "lower_bound": 0,
         "description": "Number of tables to produce"},
    ],
    "objective": {
        "sense": "maximize",
        "expression": "3*chairs + 2*tables",
        "description": "Total profit in dollars",
    },
    "constraints": [
        {"expression": "chairs + tables <= 10", "type": "inequality",
         "description": "Labor hours constraint"},
        {"expression": "2*chairs + tables <= 15", "type": "inequality",
         "description": "Material units constraint"},
    ],
    "generate_report": True,
}


async def main():
    print("=" * 60)
    print("Production Planning (LP)")
    print("=" * 60)

    config = ClientConfig.from_env()
    async with OptimizationClient(config) as client:
        solution = await client.solve_lp(PROBLEM)

        print(f"Status:         {solution.status}")
        print(f"Maximum profit: ${solution.objective_value}")
        print("Optimal production:")
        print(f"  Chairs: {(solution.solution or {}).get('chairs')}")
        print(f"  Tables: {(solution.solution or {}).get('tables')}")
        print(f"Report ID:      {solution.report_id}")
        print(f"Execution time: {solution.execution_time_ms} ms")

        # --- Same result, as an agent would see it ---
        print()
        print(format_solve_response(solution, "Linear Programming", config.server_url))


if __name__ == "__main__":
    asyncio.run(main())
