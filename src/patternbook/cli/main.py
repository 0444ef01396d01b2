"""
patternbook CLI - entry point.

Builds the Typer app, applies global options, and registers the
expression commands from patternbook.cli.expression.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from patternbook.cli.utils import version_callback
from patternbook.core.config import configure_logging, load_settings, normalize_log_level

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="""patternbook – the Interpreter pattern as an integer calculator

Expressions use integers, "+", "-", and parentheses, e.g. "(13+4)-(12+1)".
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file (default: ./patternbook.toml)"),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Logging level (overrides config and environment)"),
    ] = None,
) -> None:
    """patternbook CLI main callback for global options."""
    settings = load_settings(config)
    if log_level:
        settings.log_level = normalize_log_level(log_level, settings.log_level)
    configure_logging(settings.log_level)
    logger.debug("Effective settings: %s", settings)
    ctx.obj = settings


# =============================================================================
# Expression Commands (imported from cli.expression)
# =============================================================================
from patternbook.cli.expression import (  # noqa: E402
    eval_command,
    repl_command,
    tokens_command,
    tree_command,
)

app.command(name="eval")(eval_command)
app.command(name="tokens")(tokens_command)
app.command(name="tree")(tree_command)
app.command(name="repl")(repl_command)


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main()
