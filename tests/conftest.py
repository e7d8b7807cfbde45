"""Pytest fixtures for tests."""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from lifxcolor.models import Color


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Path to a config file inside a temporary directory."""
    return tmp_path / "config.json"


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def orange():
    """An orange Color at half brightness and warm kelvin."""
    return Color.hsbk(36, 1.0, 0.5, 2700)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo logging changes made by CLI invocations."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield

    from lifxcolor.cli import main

    if main._handler is not None:
        root_logger.removeHandler(main._handler)
        main._handler.close()
        main._handler = None
    root_logger.setLevel(level)
