"""Pytest configuration and shared fixtures."""

import pytest

from presstrack.commands import ArticleCommandDispatcher


@pytest.fixture
def dispatcher() -> ArticleCommandDispatcher:
    """Dispatcher with built-in parsers and no aliases."""
    return ArticleCommandDispatcher()
