"""
Custom exceptions for tripconf configuration.

This module defines the exception hierarchy for configuration errors:
- ConfigError: Base exception for all config errors
- ValidationError: Problems with the values found in a configuration document
- ParameterTypeError: A present value could not be coerced to the requested type
- MissingParameterError: A required parameter is absent
- UnknownParametersError: Keys in the document that no mapping consumed
- ParameterDefinitionError: A mapping module declared a parameter incorrectly
- DuplicateParameterError: A parameter registered on or under another entry
- TemplateError: Documentation template without the expected markers
- DocumentationDriftError: Generated documentation differs from the committed copy
"""

from __future__ import annotations

import json
from typing import Any

__all__ = [
    "ConfigError",
    "DocumentationDriftError",
    "DuplicateParameterError",
    "MissingParameterError",
    "ParameterDefinitionError",
    "ParameterTypeError",
    "TemplateError",
    "UnknownParametersError",
    "ValidationError",
]


def _raw_text(raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    try:
        return json.dumps(raw)
    except (TypeError, ValueError):
        return str(raw)


class ConfigError(Exception):
    """Base exception for all configuration errors."""

    pass


class ValidationError(ConfigError):
    """
    Raised for validation failures.

    This includes type mismatches, missing required parameters and unknown keys.
    """

    pass


class ParameterDefinitionError(ConfigError):
    """
    Raised when a mapping module declares a parameter incorrectly.

    A parameter without a summary, or an accessor used with inconsistent
    arguments, is a programming error and is reported as soon as the mapping
    code runs.
    """

    pass


class ParameterTypeError(ValidationError):
    """
    Raised when a value present in the document cannot be coerced.

    Parameters
    ----------
    path
        Full path of the offending parameter, e.g. ``routingDefaults.walkSpeed``.
    expected
        Name of the expected type.
    raw
        The raw value found in the document.
    reason
        Optional extra explanation (e.g. the allowed enum values).
    """

    def __init__(
        self, path: str, expected: str, raw: Any, reason: str | None = None
    ) -> None:
        """
        Initialize the exception.

        Parameters
        ----------
        path
            Full path of the offending parameter.
        expected
            Name of the expected type.
        raw
            The raw value found in the document.
        reason
            Optional extra explanation.
        """
        raw_text = _raw_text(raw)
        message = f"Unable to parse parameter '{path}' as {expected}: {raw_text!r}"
        if reason:
            message = f"{message}. {reason}"
        super().__init__(message)
        self.path = path
        self.expected = expected
        self.raw = raw_text
        self.reason = reason


class MissingParameterError(ValidationError):
    """
    Raised when a required parameter is absent from the document.

    Parameters
    ----------
    path
        Full path of the missing parameter.
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception.

        Parameters
        ----------
        path
            Full path of the missing parameter.
        """
        super().__init__(f"Required parameter '{path}' is missing")
        self.path = path


class UnknownParametersError(ValidationError):
    """
    Raised in strict mode when the document holds keys no mapping consumed.

    Parameters
    ----------
    paths
        Paths of the unconsumed keys, in document order.
    source
        Optional name of the document (file name).
    """

    def __init__(self, paths: list[str], source: str | None = None) -> None:
        """
        Initialize the exception.

        Parameters
        ----------
        paths
            Paths of the unconsumed keys.
        source
            Optional name of the document.
        """
        where = f" in {source}" if source else ""
        message = f"Unknown configuration parameters{where}: {', '.join(paths)}"
        super().__init__(message)
        self.paths = paths
        self.source = source


class DuplicateParameterError(ConfigError):
    """
    Raised when a parameter and an object grouping claim the same path.

    Reading a parameter again replaces its record; a parameter registered at
    the path of a grouping with parameters beneath it, or beneath another
    parameter, is a mistake in the mapping code.

    Parameters
    ----------
    path
        Path of the parameter being registered.
    existing
        Summary of the parameter or grouping already there.
    duplicate
        Summary of the conflicting parameter.
    """

    def __init__(self, path: str, existing: str, duplicate: str) -> None:
        """
        Initialize the exception.

        Parameters
        ----------
        path
            Path of the parameter being registered.
        existing
            Summary of the parameter or grouping already there.
        duplicate
            Summary of the conflicting parameter.
        """
        message = (
            f"Parameter path '{path}' conflicts with an existing entry: "
            f"{existing!r} and {duplicate!r}"
        )
        super().__init__(message)
        self.path = path
        self.existing = existing
        self.duplicate = duplicate


class TemplateError(ConfigError):
    """Raised when a documentation template lacks a section marker."""

    pass


class DocumentationDriftError(ConfigError, AssertionError):
    """
    Raised when generated documentation differs from the committed document.

    It is also an ``AssertionError`` so test runners report it as a failure.

    Parameters
    ----------
    name
        Name of the document (usually its path).
    diff
        Unified diff from the committed to the generated text.
    """

    def __init__(self, name: str, diff: str) -> None:
        """
        Initialize the exception.

        Parameters
        ----------
        name
            Name of the document.
        diff
            Unified diff from the committed to the generated text.
        """
        message = (
            f"Generated documentation differs from {name}. "
            "Regenerate it and commit the result.\n"
            f"{diff}"
        )
        super().__init__(message)
        self.name = name
        self.diff = diff
