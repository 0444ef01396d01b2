"""
Interpreter configuration.

Settings come from an optional ``patternbook.toml`` file and are then
overridden by environment variables:

    [interpreter]
    prompt = "> "
    show_tokens = false
    show_tree = false
    log_level = "WARNING"

Environment overrides:
    - PATTERNBOOK_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL
    - PATTERNBOOK_PROMPT: REPL prompt string

Usage:
    from patternbook.core.config import load_settings

    settings = load_settings(Path("patternbook.toml"))
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CONFIG_FILE = "patternbook.toml"

LOG_LEVEL_ENV_VAR = "PATTERNBOOK_LOG_LEVEL"
PROMPT_ENV_VAR = "PATTERNBOOK_PROMPT"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class InterpreterSettings:
    """Settings for the command-line front end."""

    prompt: str = "> "
    show_tokens: bool = False  # Echo the token stream before each result
    show_tree: bool = False  # Echo the parsed tree before each result
    log_level: str = "WARNING"


def normalize_log_level(value: object, default: str = "WARNING") -> str:
    """Return the upper-cased level name, or default if it is not a level."""
    if isinstance(value, str) and value.upper().strip() in _VALID_LOG_LEVELS:
        return value.upper().strip()
    logger.warning(
        "Unknown log level '%s'. Valid values: %s. Using %s.",
        value,
        ", ".join(_VALID_LOG_LEVELS),
        default,
    )
    return default


def _typed(section: dict[str, Any], key: str, default: T) -> T:
    value = section.get(key, default)
    if type(value) is not type(default):
        logger.warning(
            "Config key '%s' should be %s, got %r. Using %r.",
            key,
            type(default).__name__,
            value,
            default,
        )
        return default
    return value


def load_settings(path: Path | None = None) -> InterpreterSettings:
    """Load settings from a TOML file, then apply environment overrides.

    Args:
        path: Config file. None means ``patternbook.toml`` in the current
            directory, if present.

    Returns:
        InterpreterSettings with defaults for anything not configured.
    """
    settings = InterpreterSettings()

    config_path = path if path is not None else Path(DEFAULT_CONFIG_FILE)
    if config_path.exists():
        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            logger.warning("Invalid config file %s (%s), using defaults", config_path, e)
            data = {}
        section = data.get("interpreter", {})
        if not isinstance(section, dict):
            logger.warning("[interpreter] in %s is not a table, using defaults", config_path)
            section = {}
        settings = InterpreterSettings(
            prompt=_typed(section, "prompt", settings.prompt),
            show_tokens=_typed(section, "show_tokens", settings.show_tokens),
            show_tree=_typed(section, "show_tree", settings.show_tree),
            log_level=normalize_log_level(
                section.get("log_level", settings.log_level), settings.log_level
            ),
        )
        logger.debug("Loaded settings from %s", config_path)
    elif path is not None:
        logger.warning("Config file %s not found, using defaults", path)

    env_level = os.environ.get(LOG_LEVEL_ENV_VAR, "")
    if env_level:
        settings.log_level = normalize_log_level(env_level, settings.log_level)

    env_prompt = os.environ.get(PROMPT_ENV_VAR)
    if env_prompt is not None:
        settings.prompt = env_prompt

    return settings


def configure_logging(level: str) -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(
        level=getattr(logging, normalize_log_level(level)),
        format="%(levelname)s %(name)s: %(message)s",
    )
