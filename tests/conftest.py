"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import get_settings  # noqa: E402
from src.srs import AlgorithmMetrics, ReviewCard  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached; reset so env overrides in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def review_time():
    """A fixed review moment."""
    return datetime(2025, 3, 10, 9, 30)


@pytest.fixture
def base_card(review_time):
    """Provide a fresh card in the first box."""
    return ReviewCard(
        id="test-card-1",
        image_id="img-1",
        next_review_date=review_time,
        interval=1,
        ease_factor=2.5,
        review_count=0,
        success_streak=0,
    )


@pytest.fixture
def empty_metrics():
    """Provide a metrics snapshot with no reviews."""
    return AlgorithmMetrics()
