"""Unit tests for utils/decorators.py."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

import mdmanifest.utils.decorators
from mdmanifest.exceptions import DependencyError
from mdmanifest.utils.decorators import debug_timer, requires_dependencies


class TestRequiresDependencies:
    """Test the requires_dependencies decorator."""

    def test_missing_package_raises_error(self) -> None:
        """Test that a missing package raises DependencyError."""

        @requires_dependencies("test", [("nonexistent-package", "nonexistent", "")])
        def sample_function() -> str:
            return "success"

        with pytest.raises(DependencyError) as exc_info:
            sample_function()

        assert exc_info.value.feature_name == "test"
        assert ("nonexistent-package", "") in exc_info.value.missing_packages
        assert exc_info.value.original_import_error is not None
        assert "pip install --upgrade nonexistent-package" in str(exc_info.value)

    def test_version_mismatch_raises_error(self) -> None:
        """Test that an installed package with wrong version raises DependencyError."""
        with patch("mdmanifest.utils.decorators.importlib.import_module"):
            with patch.object(mdmanifest.utils.decorators, "check_version_requirement", return_value=(False, "2.3.0")):

                @requires_dependencies("test", [("mistune", "mistune", ">=3.0.0")])
                def sample_function() -> str:
                    return "success"

                with pytest.raises(DependencyError) as exc_info:
                    sample_function()

                assert len(exc_info.value.missing_packages) == 0
                assert ("mistune", ">=3.0.0", "2.3.0") in exc_info.value.version_mismatches
                assert "requires >=3.0.0, but 2.3.0 is installed" in str(exc_info.value)

    def test_correct_version_succeeds(self) -> None:
        """Test that an installed package with correct version allows execution."""
        with patch("mdmanifest.utils.decorators.importlib.import_module"):
            with patch.object(mdmanifest.utils.decorators, "check_version_requirement", return_value=(True, "3.1.0")):

                @requires_dependencies("test", [("mistune", "mistune", ">=3.0.0")])
                def sample_function() -> str:
                    return "success"

                assert sample_function() == "success"

    def test_preserves_function_metadata(self) -> None:
        """Test that the wrapper keeps the wrapped function's name and docstring."""

        @requires_dependencies("test", [])
        def documented() -> None:
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."


class TestDebugTimer:
    """Test the debug_timer context manager."""

    def test_logs_when_debug_enabled(self, caplog) -> None:
        logger = logging.getLogger("mdmanifest.tests.timer")
        with caplog.at_level(logging.DEBUG, logger="mdmanifest.tests.timer"):
            with debug_timer(logger, "Rendering markdown"):
                pass
        assert "Rendering markdown completed in" in caplog.text

    def test_silent_above_debug(self, caplog) -> None:
        logger = logging.getLogger("mdmanifest.tests.timer")
        with caplog.at_level(logging.INFO, logger="mdmanifest.tests.timer"):
            with debug_timer(logger, "Rendering markdown"):
                pass
        assert caplog.text == ""
