"""Shared pytest fixtures for patternbook tests."""

import pytest

from patternbook.core.expression_lang import Token, lex


@pytest.fixture
def grouped_tokens() -> tuple[Token, ...]:
    """Return the tokens of the worked grouped example."""
    return lex("(13+4)-(12+1)")
