"""Opt-Tools CLI -- terminal interface for the optimization API.

This module is NEVER imported from opt_tools/__init__.py.
It is only loaded via the ``opt-tools`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

try:
    import click
except ImportError:
    raise ImportError(
        "CLI dependencies not installed. Install with: pip install opt-tools[cli]"
    ) from None

from dotenv import load_dotenv

from opt_tools.cli.formatting import format_error, get_console

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from rich.console import Console

    from opt_tools.client import OptimizationClient
    from opt_tools.models.config import ClientConfig


@click.group()
@click.option(
    "--server-url",
    default=None,
    help="API server URL (default: $OPT_TOOLS_SERVER_URL or https://api.opt-tools.com).",
)
@click.option(
    "--api-key",
    default=None,
    help="API key (default: $OPT_TOOLS_API_KEY).",
)
@click.option("--timeout", "timeout_ms", default=None, type=int, help="Request timeout in milliseconds.")
@click.option("--retries", default=None, type=int, help="Retry attempts for transient failures.")
@click.option("--debug", is_flag=True, help="Log requests and responses.")
@click.pass_context
def cli(
    ctx: click.Context,
    server_url: str | None,
    api_key: str | None,
    timeout_ms: int | None,
    retries: int | None,
    debug: bool,
) -> None:
    """Opt-Tools: solve LP, MIP and TSP problems with the optimization API."""
    load_dotenv()
    ctx.ensure_object(dict)
    ctx.obj["overrides"] = {
        "server_url": server_url,
        "api_key": api_key,
        "timeout_ms": timeout_ms,
        "retries": retries,
        "debug": debug or None,
    }
    if debug:
        _configure_debug_logging()


def _configure_debug_logging() -> None:
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=get_console(stderr=True), show_path=False)],
    )


def _get_config(ctx: click.Context) -> ClientConfig:
    """Build the client config from CLI options and the environment."""
    from opt_tools.models.config import ClientConfig

    return ClientConfig.from_env(**ctx.obj["overrides"])


def _run_with_client(
    ctx: click.Context,
    operation: Callable[[OptimizationClient, Console], Awaitable[None]],
) -> None:
    """Open a client, run ``operation`` to completion, and handle cleanup.

    Ensures the client is closed on exit and formats exceptions as CLI errors.
    A custom httpx transport may be supplied through ``ctx.obj["transport"]``.
    """
    from opt_tools.client import OptimizationClient

    console = get_console()

    async def _main() -> None:
        config = _get_config(ctx)
        async with OptimizationClient(config, transport=ctx.obj.get("transport")) as client:
            await operation(client, console)

    try:
        asyncio.run(_main())
    except SystemExit:
        raise
    except Exception as e:
        format_error(str(e), console)
        raise SystemExit(1) from None


# Register subcommands after cli group is defined
from opt_tools.cli.commands.analyze import analyze  # noqa: E402
from opt_tools.cli.commands.report import report  # noqa: E402
from opt_tools.cli.commands.serve import serve  # noqa: E402
from opt_tools.cli.commands.solve import solve  # noqa: E402

cli.add_command(solve)
cli.add_command(analyze)
cli.add_command(report)
cli.add_command(serve)
