"""Shared pytest fixtures for tokenforge tests."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from tokenforge.core.aggregator import create_design_tokens
from tokenforge.core.ir import DesignTokens


@pytest.fixture
def default_tokens() -> DesignTokens:
    """Token tree built from the default seeds."""
    return create_design_tokens()


@pytest.fixture
def custom_tokens() -> DesignTokens:
    """Token tree with a red primary seed."""
    return create_design_tokens({"primary": "#ff0000"})


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed generation timestamp for reproducible design-tool exports."""
    return datetime(2026, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)
