"""
Expression commands for the patternbook CLI.

Commands:
- eval: Evaluate an expression and print the integer result
- tokens: Show the token stream for an expression
- tree: Show the parsed expression tree
- repl: Evaluate expressions line by line
"""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from patternbook.core.config import InterpreterSettings
from patternbook.core.errors import ExpressionError, SourceContext
from patternbook.core.expression_lang import lex, parse

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

_QUIT_WORDS = {"quit", "exit"}


def _settings(ctx: typer.Context) -> InterpreterSettings:
    return ctx.obj if isinstance(ctx.obj, InterpreterSettings) else InterpreterSettings()


def _with_source(error: ExpressionError, source: str) -> ExpressionError:
    """Attach the expression text, and the fault position if any, to an error."""
    error.with_context(SourceContext(source, getattr(error, "pos", None)))
    return error


def _run(source: str, show_tokens: bool, show_tree: bool) -> int:
    """Lex, parse, and evaluate, echoing intermediate stages on request."""
    try:
        tokens = lex(source)
        if show_tokens:
            typer.echo(" ".join(str(tok) for tok in tokens))
        tree = parse(tokens)
    except ExpressionError as e:
        raise _with_source(e, source)
    if show_tree:
        typer.echo(str(tree))
    return tree.value


def _report(error: ExpressionError) -> None:
    logger.debug("Expression failed: %s", type(error).__name__)
    err_console.print(f"Error: {error}", style="red", markup=False, highlight=False)


# =============================================================================
# Commands
# =============================================================================


def eval_command(
    ctx: typer.Context,
    expression: Annotated[str, typer.Argument(help='Expression, e.g. "(13+4)-(12+1)"')],
    show_tokens: Annotated[
        bool, typer.Option("--tokens", "-t", help="Print the token stream first")
    ] = False,
    show_tree: Annotated[
        bool, typer.Option("--tree", help="Print the parsed tree first")
    ] = False,
) -> None:
    """Evaluate an expression and print the result."""
    settings = _settings(ctx)
    try:
        result = _run(
            expression,
            show_tokens or settings.show_tokens,
            show_tree or settings.show_tree,
        )
    except ExpressionError as e:
        _report(e)
        raise typer.Exit(code=1)
    typer.echo(str(result))


def tokens_command(
    expression: Annotated[str, typer.Argument(help="Expression to lex")],
) -> None:
    """Show the token stream for an expression."""
    try:
        tokens = lex(expression)
    except ExpressionError as e:
        _report(_with_source(e, expression))
        raise typer.Exit(code=1)

    table = Table(title=f"Tokens ({len(tokens)})")
    table.add_column("Pos", justify="right")
    table.add_column("Kind")
    table.add_column("Text")
    for tok in tokens:
        table.add_row(str(tok.pos), tok.kind.value, tok.text)
    console.print(table)


def tree_command(
    expression: Annotated[str, typer.Argument(help="Expression to parse")],
) -> None:
    """Show the parsed expression tree."""
    try:
        tree = parse(lex(expression))
    except ExpressionError as e:
        _report(_with_source(e, expression))
        raise typer.Exit(code=1)
    typer.echo(str(tree))


def repl_command(ctx: typer.Context) -> None:
    """Evaluate expressions line by line until EOF or 'quit'."""
    settings = _settings(ctx)
    while True:
        try:
            line = typer.prompt(
                settings.prompt, default="", show_default=False, prompt_suffix=""
            )
        except typer.Abort:
            break

        source = line.strip()
        if not source:
            continue
        if source in _QUIT_WORDS:
            break

        try:
            result = _run(source, settings.show_tokens, settings.show_tree)
        except ExpressionError as e:
            _report(e)
            continue
        typer.echo(str(result))
