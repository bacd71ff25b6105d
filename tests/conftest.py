"""Shared pytest fixtures for the purepath test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from purepath.config.config import Config


@pytest.fixture(autouse=True)
def reset_config_singleton() -> Iterator[None]:
    """Start and finish every test with no cached configuration."""

    Config.reset()
    yield None
    Config.reset()
