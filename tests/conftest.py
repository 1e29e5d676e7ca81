# tests/conftest.py

"""Shared pytest fixtures for all tests."""

from collections.abc import Generator
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def no_gemini_key() -> Generator[None, None, None]:
    """Start every test without a configured Gemini API key."""
    with patch("src.config.settings.Settings.GEMINI_API_KEY", ""):
        yield
