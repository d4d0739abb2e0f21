"""Pytest configuration and shared fixtures for molfile tests."""

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def fixture_dir() -> Path:
    """Get path to test fixtures directory.

    Returns:
        Path to tests/fixtures directory
    """
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def single_sdf(fixture_dir: Path) -> str:
    """Text of a one-record SDF file (a lone Mn atom)."""
    return (fixture_dir / "single.sdf").read_text(encoding="utf-8")


@pytest.fixture
def double_sdf(fixture_dir: Path) -> str:
    """Text of a two-record SDF file."""
    return (fixture_dir / "double.sdf").read_text(encoding="utf-8")


@pytest.fixture
def zwitterion_sdf(fixture_dir: Path) -> str:
    """Text of a charged five-atom record with multi-line data items."""
    return (fixture_dir / "zwitterion.sdf").read_text(encoding="utf-8")


@pytest.fixture
def clean_molfile_logger() -> Generator[logging.Logger]:
    """Restore the package logger's level and handlers after a test.

    Yields:
        The ``molfile`` logger
    """
    logger = logging.getLogger("molfile")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers


# Configure pytest
def pytest_configure(config: Any) -> None:
    """Configure pytest with marker options."""
    # Register custom markers
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests",
    )
