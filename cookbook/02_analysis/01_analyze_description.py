"""Problem Analysis

Hand the service a plain-English description and let it classify the
problem (LP, MIP or TSP), pull out variables and constraints, and suggest
how to formulate it.

Demonstrates: OptimizationClient.analyze_problem(), AnalysisResponse
"""

import asyncio

from dotenv import load_dotenv

from opt_tools import ClientConfig, OptimizationClient

load_dotenv()

DESCRIPTION = """
I run a bakery and need to decide how many loaves of bread and cakes to bake each day.
Each loaf of bread earns me $2 profit and each cake earns $5 profit.
I have 100 kg of flour available per day.
Each loaf needs 0.5 kg flour and each cake needs 1 kg flour.
I also have 8 hours of baking time, where loaves take 0.2 hours and cakes take 0.5 hours.
What's the optimal production to maximize my daily profit?
"""


async def main():
    print("=" * 60)
    print("Problem Analysis")
    print("=" * 60)

    async with OptimizationClient(ClientConfig.from_env()) as client:
        analysis = await client.analyze_problem(DESCRIPTION)

    print(f"Problem type: {analysis.problem_type}")
    print(f"Confidence:   {analysis.confidence}")
    print("\nVariables detected:")
    for v in analysis.variables_detected:
        print(f"  - {v}")
    print("\nConstraints detected:")
    for c in analysis.constraints_detected:
        print(f"  - {c}")
    print("\nRecommendations:")
    for r in analysis.recommendations:
        print(f"  - {r}")


if __name__ == "__main__":
    asyncio.run(main())
