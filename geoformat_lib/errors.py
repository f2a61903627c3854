# -*- coding: utf-8 -*-
"""Error handling for surveying file parsing and conversion.

This module provides error records for tracking malformed input with source
location information, and the exceptions raised by the parsers, the logfile
processors and the conversion layer.
"""

from dataclasses import dataclass

from geoformat_lib.enums import Severity


@dataclass(frozen=True)
class SourceLocation:
    """Tracks the source location of text for error reporting.

    Attributes:
        source: The source file name or identifier
        line: Line number (0-based)
        column: Column number (0-based)
        text: The text at this location
    """

    source: str
    line: int
    column: int
    text: str

    def __str__(self) -> str:
        """Format as human-readable location string."""
        return f"(in {self.source}, line {self.line + 1}, column {self.column + 1})"


@dataclass(frozen=True)
class ParseError:
    """Represents a parsing error or warning with source location.

    This is a data record for storing error information, not an exception.
    Use FormatError for raising errors.

    Attributes:
        severity: ERROR or WARNING
        message: Human-readable error message
        location: Source location where error occurred (optional)
    """

    severity: Severity
    message: str
    location: SourceLocation | None = None

    def __str__(self) -> str:
        """Format as human-readable error string."""
        base = f"{self.severity.value}: {self.message}"
        if self.location:
            base += f" {self.location}"
            if self.location.text:
                base += f"\n  {self.location.text}"
        return base


class FormatError(Exception):
    """Raised when a token or line does not match its expected structure.

    Attributes:
        message: Error message
        location: Source location where error occurred
    """

    def __init__(self, message: str, location: SourceLocation | None = None):
        self.message = message
        self.location = location
        super().__init__(str(self))

    def __str__(self) -> str:
        """Format as human-readable exception string."""
        if self.location:
            return f"{self.message} {self.location}"
        return self.message

    def to_error(self, severity: Severity = Severity.ERROR) -> ParseError:
        """Convert exception to ParseError record."""
        return ParseError(
            severity=severity,
            message=self.message,
            location=self.location,
        )


class PreconditionViolation(Exception):  # noqa: N818
    """Raised when a required input is missing (programmer error)."""


class UnsupportedBlockError(NotImplementedError):
    """Raised for logfile block kinds that have no trimming rule."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"No processor available for `{kind}` blocks")


class ConversionError(Exception):
    """Error raised for invalid conversion operations."""
