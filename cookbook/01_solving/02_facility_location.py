"""Facility Location (MIP)

Decide which of two warehouses to open and how many units to ship from
each to two customers. Opening a warehouse is a yes/no (binary) choice;
shipments are whole units (integer).

Demonstrates: MipProblem, Variable, Objective, Constraint,
              OptimizationClient.solve_mip(), solver timeout
"""

import asyncio

from dotenv import load_dotenv

from opt_tools import ClientConfig, Constraint, MipProblem, Objective, OptimizationClient, Variable

load_dotenv()


def build_problem() -> MipProblem:
    shipments = [
        Variable(name=f"ship_{w}_to_customer{c}", type="integer", lower_bound=0, upper_bound=100)
        for w in ("A", "B")
        for c in (1, 2)
    ]
    return MipProblem(
        variables=[
            Variable(name="open_warehouse_A", type="binary", description="Open warehouse A (yes/no)"),
            Variable(name="open_warehouse_B", type="binary", description="Open warehouse B (yes/no)"),
            *shipments,
        ],
        objective=Objective(
            sense="minimize",
            expression=(
                "1000*open_warehouse_A + 1500*open_warehouse_B + "
                "5*ship_A_to_customer1 + 7*ship_A_to_customer2 + "
                "6*ship_B_to_customer1 + 4*ship_B_to_customer2"
            ),
            description="Total cost (fixed costs + shipping costs)",
        ),
        constraints=[
            # Demand
            Constraint(expression="ship_A_to_customer1 + ship_B_to_customer1 == 50", type="equality"),
            Constraint(expression="ship_A_to_customer2 + ship_B_to_customer2 == 60", type="equality"),
            # Ship only from open warehouses
            Constraint(
                expression="ship_A_to_customer1 + ship_A_to_customer2 <= 1000*open_warehouse_A",
                type="inequality",
            ),
            Constraint(
                expression="ship_B_to_customer1 + ship_B_to_customer2 <= 1000*open_warehouse_B",
                type="inequality",
            ),
            Constraint(expression="open_warehouse_A + open_warehouse_B >= 1", type="inequality"),
        ],
        timeout=60,
    )


async def main():
    print("=" * 60)
    print("Facility Location (MIP)")
    print("=" * 60)

    async with OptimizationClient(ClientConfig.from_env()) as client:
        solution = await client.solve_mip(build_problem())
        values = solution.solution or {}

        print(f"Status:       {solution.status}")
        print(f"Minimum cost: ${solution.objective_value}")
        print(f"  Open warehouse A: {'Yes' if values.get('open_warehouse_A') else 'No'}")
        print(f"  Open warehouse B: {'Yes' if values.get('open_warehouse_B') else 'No'}")
        print(f"Report ID:    {solution.report_id}")


if __name__ == "__main__":
    asyncio.run(main())
