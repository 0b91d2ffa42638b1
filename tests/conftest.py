"""Root-level pytest configuration and shared fixtures.

This module provides fixtures that are universally applicable across
all test modules. Fixtures here should be:
- Stateless or session-scoped
- Generic enough for reuse across different test categories
- Well-documented with clear purpose
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from soundrouting import constants
from soundrouting.output import OutputHandler


# =============================================================================
# Feature Flags
# =============================================================================

@pytest.fixture(autouse=True)
def vinyl_control_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable vinyl control regardless of SOUNDROUTING_VINYL_CONTROL in the environment.

    Tests that need it disabled patch the flag back to False.
    """
    monkeypatch.setattr(constants, "VINYL_CONTROL_ENABLED", True)


@pytest.fixture(autouse=True)
def no_settings_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a settings directory from the environment out of config lookup."""
    monkeypatch.delenv(constants.SETTINGS_DIR_ENV, raising=False)


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def tmp_config_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for configuration files.

    Returns:
        Path to a clean temporary directory for config files.
    """
    config_dir = tmp_path / "config"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


# =============================================================================
# Mock Console Fixtures
# =============================================================================

@pytest.fixture
def mock_console(mocker: MockerFixture):
    """Create a mock Rich Console for output testing.

    Returns:
        Mock object that mimics rich.console.Console interface.
    """
    return mocker.MagicMock(spec_set=["print", "log", "status"])


# =============================================================================
# Output Handler Fixtures
# =============================================================================

@pytest.fixture
def mock_output_handler(mocker: MockerFixture):
    """Create a mock OutputHandler for the CLI helpers.

    Returns:
        Mock restricted to the OutputHandler protocol.
    """
    return mocker.MagicMock(spec=OutputHandler)


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "pydantic: Tests for Pydantic validation")
    config.addinivalue_line("markers", "xml: Tests reading or writing XML sound configurations")
