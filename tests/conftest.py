"""Shared test fixtures."""

import pytest

from techsvg.config.settings import Settings


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the developer's environment and `.env` file."""
    return Settings(
        _env_file=None,
        default_theme="github-dark",
        log_level="WARNING",
    )
