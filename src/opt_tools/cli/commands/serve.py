"""opt-tools serve -- run the MCP tool server on stdio."""

from __future__ import annotations

import asyncio

import click

from opt_tools.cli.formatting import format_error, get_console


@click.command()
@click.pass_context
def serve(ctx: click.Context) -> None:
    """Expose the optimization tools to an MCP host over stdio."""
    from opt_tools.mcp.server import SERVER_RETRIES, SERVER_TIMEOUT_MS, configure_logging
    from opt_tools.mcp.server import serve as serve_stdio
    from opt_tools.models.config import ClientConfig

    try:
        config = ClientConfig.from_env(
            defaults={"timeout_ms": SERVER_TIMEOUT_MS, "retries": SERVER_RETRIES},
            **ctx.obj["overrides"],
        )
    except Exception as e:
        format_error(str(e), get_console(stderr=True))
        raise SystemExit(1) from None

    configure_logging(config.debug)
    try:
        asyncio.run(serve_stdio(config))
    except KeyboardInterrupt:
        pass
