"""Pytest configuration and fixtures."""

import os
from typing import Any

import pytest

from tabular_input.core import Settings, configure_logging
from tabular_input.columns import default_column_registry
from tabular_input.registry import ScriptPosition, ScriptRegistry


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["TABULAR_LOG_LEVEL"] = "DEBUG"
    configure_logging(Settings(log_level="DEBUG"))


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Fresh settings (not the cached instance)."""
    return Settings()


@pytest.fixture
def registry():
    """Empty script registry."""
    return ScriptRegistry()


@pytest.fixture
def populated_registry():
    """Registry with scripts registered by other page code."""
    registry = ScriptRegistry()
    registry.register("var page = 1;", ScriptPosition.HEAD, key="A")
    registry.register("initNavbar();", ScriptPosition.READY, key="navbar")
    return registry


@pytest.fixture
def column_registry():
    """Column registry with the built-in kinds."""
    return default_column_registry()


# ============================================================================
# Form Fixtures
# ============================================================================

class FakeStackForm:
    """Form publishing client options through a pending stack."""

    def __init__(self, options: dict[str, dict[str, Any]] | None = None):
        self.options = options or {}
        self.attributes: list[dict[str, Any]] = []
        self.calls: list[str] = []

    def field(self, model: Any, attribute: str) -> None:
        self.calls.append(attribute)
        if attribute in self.options:
            self.attributes.append(dict(self.options[attribute]))


@pytest.fixture
def stack_form():
    """Stack form knowing client options of the `title` attribute."""
    return FakeStackForm({"title": {"name": "title", "maxlength": 10}})


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def sample_columns():
    """Column definitions of a simple item list."""
    return [
        {"name": "id", "type": "hidden"},
        {"name": "title", "title": "Title"},
        {"name": "price", "attribute_options": {"validateOnChange": True}},
    ]


@pytest.fixture
def sample_rows():
    """Row data."""
    return [
        {"id": 1, "title": "First", "price": "10"},
        {"id": 2, "title": "Second", "price": "20"},
    ]
