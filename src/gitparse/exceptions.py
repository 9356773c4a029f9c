"""gitparse exceptions."""

# ruff: noqa: TC003  # Path needed at runtime for annotations
from pathlib import Path
from typing import Any


class GitParseError(Exception):
    """Base exception for gitparse errors."""


# =============================================================================
# Parse Exceptions
# =============================================================================


class ParseError(GitParseError, ValueError):
    """Raised when tool output cannot be decoded into domain records.

    Attributes:
        line_number: 1-based line (or record) number where decoding failed.
        line: The offending input line or record, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        """Initialize with error message and input location context.

        Args:
            message: Human-readable error message.
            line_number: 1-based line or record number of the failure.
            line: The offending input text.
        """
        super().__init__(message)
        self.line_number: int | None = line_number
        self.line: str | None = line


class InvalidHashError(ParseError):
    """Raised when an object identifier is empty or not lowercase hex.

    Attributes:
        value: The rejected raw value.
    """

    def __init__(
        self,
        message: str,
        *,
        value: str,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        """Initialize with error message and the rejected value."""
        super().__init__(message, line_number=line_number, line=line)
        self.value: str = value


class MalformedRecordError(ParseError):
    """Raised when a record does not split into the expected shape.

    Attributes:
        expected_fields: Number of fields the format defines, if applicable.
        actual_fields: Number of fields actually found, if applicable.
    """

    def __init__(
        self,
        message: str,
        *,
        expected_fields: int | None = None,
        actual_fields: int | None = None,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        """Initialize with error message and field count context."""
        super().__init__(message, line_number=line_number, line=line)
        self.expected_fields: int | None = expected_fields
        self.actual_fields: int | None = actual_fields


class MalformedHunkHeaderError(ParseError):
    """Raised when a diff hunk marker is not ``@@ -a[,b] +c[,d] @@``."""


class UnrecognizedStatusCodeError(ParseError):
    """Raised in strict mode for a status character outside the known tables.

    Attributes:
        code: The unrecognized status character.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        """Initialize with error message and the offending status character."""
        super().__init__(message, line_number=line_number, line=line)
        self.code: str = code


# =============================================================================
# Builder Exceptions
# =============================================================================


class OptionsError(GitParseError, ValueError):
    """Raised when an option builder receives invalid or contradictory input.

    Attributes:
        option: Name of the offending option.
    """

    def __init__(self, message: str, *, option: str) -> None:
        """Initialize with error message and option name."""
        super().__init__(message)
        self.option: str = option


# =============================================================================
# Command Exceptions
# =============================================================================


class GitCommandError(GitParseError):
    """Raised when captured tool output reports a fatal failure.

    Attributes:
        command_args: Argument vector that was executed.
        stderr: Captured standard error text.
        exit_code: Process exit status.
    """

    def __init__(
        self,
        message: str,
        *,
        command_args: tuple[str, ...],
        stderr: str,
        exit_code: int,
    ) -> None:
        """Initialize with error message and process context."""
        super().__init__(message)
        self.command_args: tuple[str, ...] = command_args
        self.stderr: str = stderr
        self.exit_code: int = exit_code


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(GitParseError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
