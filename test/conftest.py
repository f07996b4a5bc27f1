"""
Test Configuration and Fixtures

This module provides:
- Environment setup that must happen before application modules are imported
- Loguru capture fixture for asserting on log output
- Prometheus sample lookup helper

Architecture:
- Unit tests (test/**/unit/): Mock the payment and reservation collaborators
- Integration tests: Use the in-process collaborator adapters through the DI container
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru configuration are read at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ['SERVICE_NAME'] = 'cinema-purchase-test'
    os.environ['DEPLOY_ENV'] = 'test'
    os.environ['DEBUG'] = 'True'
    os.environ['LOG_TO_FILE'] = 'False'

    test_log_dir = Path(__file__).parent / 'test_log'
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

from prometheus_client import REGISTRY  # noqa: E402
import pytest  # noqa: E402

from src.platform.logging.loguru_io import Logger  # noqa: E402


@pytest.fixture
def log_messages() -> Generator[list[str], None, None]:
    """Collect formatted loguru records emitted during the test"""
    messages: list[str] = []
    handler_id = Logger.base.add(
        lambda message: messages.append(str(message)),
        level='DEBUG',
        format='{level} | {message}',
    )
    yield messages
    Logger.base.remove(handler_id)


@pytest.fixture
def prometheus_sample() -> Generator[object, None, None]:
    """Return a lookup reading the current value of a prometheus sample (0.0 when absent)"""

    def _lookup(name: str, labels: dict[str, str] | None = None) -> float:
        return REGISTRY.get_sample_value(name, labels or {}) or 0.0

    yield _lookup
