"""Report Management

List recent HTML reports and save the newest one to disk so it can be
opened in a browser.

Demonstrates: list_reports(), get_report(), save_report()
"""

import asyncio
from pathlib import Path

from dotenv import load_dotenv

from opt_tools import ClientConfig, OptimizationClient

load_dotenv()


async def main():
    print("=" * 60)
    print("Report Management")
    print("=" * 60)

    async with OptimizationClient(ClientConfig.from_env()) as client:
        reports = await client.list_reports(10)
        print(f"Found {len(reports)} recent reports:\n")
        for report in reports:
            print(f"Report: {report.report_id}")
            print(f"  Type:    {report.problem_type}")
            print(f"  Status:  {report.status}")
            print(f"  Created: {report.created_at}")
            print()

        if not reports:
            return

        newest = reports[0].report_id
        html = await client.get_report(newest)
        print(f"Retrieved report {newest} ({len(html)} characters)")

        path = await client.save_report(newest, Path(f"{newest}.html"))
        print(f"Saved to {path.resolve()}")


if __name__ == "__main__":
    asyncio.run(main())
