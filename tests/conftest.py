"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """The CLI binds structlog to the stderr of the invoking runner; undo it."""
    yield
    structlog.reset_defaults()
