"""
Pytest Configuration
====================
Shared fixtures for the meshreport test suite.
"""
import logging
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent

EXAMPLE_TEXT = (
    "SimulationTime 10.0\n"
    "Conductivity 5.5\n"
    "Nodes N 3\n"
    "*Node\n"
    "1, 0.0, 0.0\n"
    "2, 1.0, 0.0\n"
    "3, 0.0, 1.0\n"
    "*Element\n"
    "1, 1, 2, 3, 3\n"
    "*BC\n"
    "1, 2"
)


@pytest.fixture
def example_text() -> str:
    """The small three-node mesh used throughout the tests."""
    return EXAMPLE_TEXT


@pytest.fixture
def example_file(tmp_path: Path) -> Path:
    path = tmp_path / "data.txt"
    path.write_text(EXAMPLE_TEXT, encoding="utf-8")
    return path


@pytest.fixture(scope="session")
def sample_mesh_path() -> Path:
    """The 16-node sample shipped in assets/."""
    return PROJECT_ROOT / "assets" / "data.txt"


@pytest.fixture(autouse=True)
def restore_package_logger():
    """setup_logging() configures the package logger; put it back after each test."""
    logger = logging.getLogger("meshreport")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
