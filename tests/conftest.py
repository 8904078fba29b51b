"""Pytest configuration and shared fixtures for the mdmanifest test suite.

This module provides shared fixtures and test configuration used across
the unit and integration tests.
"""

from pathlib import Path

import pytest

PICTURE_SET_FILES = ("1.jpg", "2.jpg", "1.webp", "2.webp")


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    """Provide a static-asset directory with responsive image fixtures.

    Layout::

        static/
            set/x/1.jpg, 2.jpg, 1.webp, 2.webp
            set/plain.jpg

    Returns
    -------
    Path
        Absolute path of the ``static`` directory.

    """
    root = tmp_path / "static"
    picture_set = root / "set" / "x"
    picture_set.mkdir(parents=True)
    for name in PICTURE_SET_FILES:
        (picture_set / name).write_bytes(b"")
    (root / "set" / "plain.jpg").write_bytes(b"")
    return root.resolve()
