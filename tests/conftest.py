"""
Pytest configuration and shared fixtures for simple_handling tests.
"""

import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

# Add src (and the project root, for tests.mocks) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from simple_handling.config import HandlingSettings, reset_settings  # noqa: E402
from simple_handling.telemetry.logging import reset_loggers  # noqa: E402

from tests.mocks.errors import CallRecorder  # noqa: E402

# Generated examples share the autouse isolation fixture
settings.register_profile(
    "simple_handling", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("simple_handling")


# =============================================================================
# State Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear cached settings/loggers and SIMPLE_HANDLING_* variables per test."""
    for key in [k for k in os.environ if k.startswith("SIMPLE_HANDLING_")]:
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    reset_loggers()
    yield
    reset_settings()
    reset_loggers()


# =============================================================================
# Handling Fixtures
# =============================================================================


@pytest.fixture
def recorder() -> CallRecorder:
    """Return a fresh call recorder."""
    return CallRecorder()


@pytest.fixture
def lenient_settings() -> HandlingSettings:
    """Settings that return a not-handled result instead of re-raising."""
    return HandlingSettings(throw_if_not_handled=False)


# =============================================================================
# Markers Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "property: Property-based tests")
