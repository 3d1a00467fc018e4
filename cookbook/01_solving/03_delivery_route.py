"""Delivery Route (TSP)

Find the shortest round trip from a San Francisco warehouse through four
customers. The service works on real geographic distances and returns the
tour with per-leg distances in meters.

Demonstrates: OptimizationClient.solve_tsp(), route_names, segments,
              format_tsp_response()
"""

import asyncio

from dotenv import load_dotenv

from opt_tools import ClientConfig, OptimizationClient
from opt_tools.toolkit import format_tsp_response

load_dotenv()

LOCATIONS = [
    {"name": "Warehouse", "latitude": 37.7749, "longitude": -122.4194},
    {"name": "Customer A", "latitude": 37.8044, "longitude": -122.2712},
    {"name": "Customer B", "latitude": 37.6879, "longitude": -122.4702},
    {"name": "Customer C", "latitude": 37.7580, "longitude": -122.4430},
    {"name": "Customer D", "latitude": 37.7899, "longitude": -122.3961},
]


async def main():
    print("=" * 60)
    print("Delivery Route (TSP)")
    print("=" * 60)

    config = ClientConfig.from_env()
    async with OptimizationClient(config) as client:
        solution = await client.solve_tsp({
            "locations": LOCATIONS,
            "start_location": "Warehouse",
            "timeout": 120,
        })

        route = (solution.solution or {}).get("route_names", [])
        print(f"Status:          {solution.status}")
        if solution.objective_value is not None:
            print(f"Total distance:  {solution.objective_value / 1000:.2f} km")
        print(f"Optimized route: {' -> '.join(route)}")
        print(f"Report ID:       {solution.report_id}")

        print()
        print(format_tsp_response(solution, config.server_url))


if __name__ == "__main__":
    asyncio.run(main())
