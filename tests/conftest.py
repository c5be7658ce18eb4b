"""Shared test fixtures."""

import pytest

from dough_calculator.config import Settings
from dough_calculator.containers import AppContainer, build_container


@pytest.fixture
def settings() -> Settings:
    return Settings(debug=True, cors_allowed_origins=None)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
