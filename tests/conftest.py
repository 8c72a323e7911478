"""Shared test fixtures."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from worldclock.core.logging_service import reset_logger


@pytest.fixture(autouse=True)
def fresh_logger():
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def instant():
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def local_zone():
    """Stand-in for the host zone so 'Local' rows are deterministic."""
    return ZoneInfo("Asia/Tokyo")


@pytest.fixture
def write_config(tmp_path):
    def _write(text, filename="worldclock.toml"):
        path = tmp_path / filename
        path.write_text(text, encoding="utf-8")
        return path
    return _write


SAMPLE_TOML = """\
# Local clock
[[clocks]]

[[clocks]]
tz = "Europe/Berlin"

[[clocks]]
name = "Costa Rica"
tz = "America/Costa_Rica"
"""


@pytest.fixture
def sample_toml():
    return SAMPLE_TOML
