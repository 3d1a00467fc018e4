"""Error Handling

Three failure modes and how they surface:

  1. A problem the service rejects (bad constraint syntax) raises
     TransportError carrying the HTTP status and response body.
  2. A problem that fails local shape checks raises pydantic's
     ValidationError before any request is sent.
  3. An unreachable server raises TransportError with no status code,
     after the configured retries.

Demonstrates: TransportError, RateLimitError, AuthError, ValidationError,
              ClientConfig(retries=..., timeout_ms=...)
"""

import asyncio

from dotenv import load_dotenv
from pydantic import ValidationError

from opt_tools import (
    AuthError,
    ClientConfig,
    OptimizationClient,
    RateLimitError,
    TransportError,
)

load_dotenv()

BAD_SYNTAX = {
    "variables": [{"name": "x", "type": "continuous", "lower_bound": 0}],
    "objective": {"sense": "maximize", "expression": "x"},
    "constraints": [{"expression": "invalid constraint syntax!!!", "type": "inequality"}],
}


async def rejected_by_service(client: OptimizationClient) -> None:
    print("\n--- 1. Rejected by the service ---")
    try:
        await client.solve_lp(BAD_SYNTAX)
    except AuthError as e:
        print(f"  Check OPT_TOOLS_API_KEY: {e}")
    except RateLimitError as e:
        print(f"  Still rate limited after retries (retry after {e.retry_after}s)")
    except TransportError as e:
        print(f"  Status: {e.status_code}")
        print(f"  Body:   {e.body}")


async def rejected_locally(client: OptimizationClient) -> None:
    print("\n--- 2. Rejected before sending ---")
    try:
        # "type" is not the objective direction field; "sense" is.
        await client.solve_lp({**BAD_SYNTAX, "objective": {"type": "maximize", "expression": "x"}})
    except ValidationError as e:
        print(f"  {e.error_count()} validation error(s):")
        for err in e.errors():
            print(f"    {'.'.join(str(p) for p in err['loc'])}: {err['msg']}")


async def unreachable() -> None:
    print("\n--- 3. Unreachable server ---")
    config = ClientConfig(
        server_url="http://127.0.0.1:9", api_key="unused", timeout_ms=2000, retries=1,
    )
    async with OptimizationClient(config) as client:
        try:
            await client.analyze_problem("anything")
        except TransportError as e:
            print(f"  Network error: {e.is_network_error}")
            print(f"  {e}")


async def main():
    print("=" * 60)
    print("Error Handling")
    print("=" * 60)

    async with OptimizationClient(ClientConfig.from_env()) as client:
        await rejected_by_service(client)
        await rejected_locally(client)
    await unreachable()


if __name__ == "__main__":
    asyncio.run(main())
