"""
patternbook CLI package.

- main.py: Typer app, global options, and the entry point
- expression.py: eval, tokens, tree, and repl commands
- utils.py: Shared utilities
"""

from patternbook.cli.main import app, main
from patternbook.cli.utils import get_version, version_callback

__all__ = [
    "app",
    "main",
    "get_version",
    "version_callback",
]
