"""
patternbook CLI utilities.

Shared helpers used across CLI modules.
"""

import platform
from importlib.metadata import PackageNotFoundError, version

import typer

from patternbook import __version__


def get_version() -> str:
    """Get patternbook version from package metadata."""
    try:
        return version("patternbook")
    except PackageNotFoundError:
        return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"patternbook {get_version()}")
        typer.echo(
            f"Python {platform.python_version()} ({platform.python_implementation()})"
        )
        raise typer.Exit()
