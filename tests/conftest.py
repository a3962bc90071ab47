"""Root pytest configuration for test discovery and auto-skip behavior.

All tests stay visible to the test explorer; tests that need a real
MongoDB are auto-skipped unless explicitly enabled.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests
    ├── integration/
    │   ├── api/               # FastAPI TestClient against in-memory stores
    │   └── persistence/       # Real MongoDB (MONGODB_TEST_URI), auto-skipped
    └── shared/                # Shared fixtures and utilities

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests
    RUN_ALL_TESTS=1      Run all tests (overrides other settings)

Pytest Options:
    --run-integration    Run integration tests
    --run-all            Run all tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from vecino_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Only the test database URI is read from here; settings are built explicitly
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that need a running MongoDB (auto-skipped)",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


def _flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


def pytest_collection_modifyitems(config, items):
    """Auto-skip tests based on markers unless explicitly enabled."""
    if config.getoption("--run-all") or _flag("RUN_ALL_TESTS"):
        return

    run_integration = config.getoption("--run-integration") or _flag("RUN_INTEGRATION")

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )

    for item in items:
        # Explicit marker only, not folder name
        item_markers = {mark.name for mark in item.iter_markers()}
        if not run_integration and "integration" in item_markers:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def fresh_settings_cache():
    """Every test starts without cached settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
