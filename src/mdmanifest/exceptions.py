#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdmanifest library.

Only invalid input and missing dependencies ever reach the caller of
``render_markdown``. ``HighlightError`` is raised by the highlighter adapter
and absorbed by the code-block hook, which degrades to plain rendering.

Exception Hierarchy
-------------------
- MdManifestError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidInputError (non-string Markdown input)

  - HighlightError (syntax highlighting engine failures)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class MdManifestError(Exception):
    """Base exception class for all mdmanifest-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MdManifestError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidInputError(ValidationError):
    """Exception raised when ``render_markdown`` receives something other than a string.

    The message embeds a JSON rendering of the received value.
    """

    def __init__(self, message: str, parameter_value: Any = None):
        """Initialize the error for the ``markdown`` parameter."""
        super().__init__(message, parameter_name="markdown", parameter_value=parameter_value)


class HighlightError(MdManifestError):
    """Exception raised when the highlighting engine cannot highlight a code block.

    Parameters
    ----------
    message : str
        Description of the failure
    language : str
        Language tag the highlighter was asked to use
    original_error : Exception, optional
        The engine exception that caused this error

    """

    def __init__(self, message: str, language: str, original_error: Exception | None = None):
        """Initialize the highlight error with the failing language."""
        super().__init__(message, original_error=original_error)
        self.language = language


class DependencyError(MdManifestError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    feature_name : str
        Name of the feature requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The first ImportError encountered while checking packages

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{feature_name} requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_details = []
                for name, required, installed in version_mismatches:
                    mismatch_details.append(f"'{name}' (requires {required}, but {installed} is installed)")
                mismatch_str = ", ".join(mismatch_details)
                message_parts.append(f"{feature_name} has version mismatches: {mismatch_str}")

            message = "\n".join(message_parts)

            if install_command:
                message += f"\nInstall with: {install_command}"
            else:
                all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
                if all_packages:
                    packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                    message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command


__all__ = [
    "MdManifestError",
    "ValidationError",
    "InvalidInputError",
    "HighlightError",
    "DependencyError",
]
