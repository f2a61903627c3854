# -*- coding: utf-8 -*-
"""Tests for errors module."""

import pytest

from geoformat_lib.enums import Severity
from geoformat_lib.errors import FormatError
from geoformat_lib.errors import ParseError
from geoformat_lib.errors import PreconditionViolation
from geoformat_lib.errors import SourceLocation
from geoformat_lib.errors import UnsupportedBlockError


class TestSourceLocation:
    """Tests for SourceLocation class."""

    def test_str(self):
        """Test string representation is 1-based."""
        loc = SourceLocation(source="points.gsi", line=5, column=10, text="")
        result = str(loc)
        assert "points.gsi" in result
        assert "line 6" in result
        assert "column 11" in result

    def test_immutable(self):
        """Test that SourceLocation is immutable (frozen)."""
        loc = SourceLocation(source="points.gsi", line=5, column=10, text="")
        with pytest.raises(AttributeError):
            loc.source = "other.gsi"


class TestParseError:
    """Tests for ParseError dataclass (error record)."""

    def test_creation(self):
        """Test creating a parse error without location."""
        error = ParseError(severity=Severity.ERROR, message="Something went wrong")
        assert error.location is None
        assert str(error) == "error: Something went wrong"

    def test_str_with_location(self):
        """Test string representation with location and text."""
        loc = SourceLocation(source="points.k", line=2, column=0, text="bad data")
        error = ParseError(severity=Severity.WARNING, message="Odd", location=loc)
        result = str(error)
        assert result.startswith("warning: Odd")
        assert "points.k" in result
        assert "bad data" in result


class TestFormatError:
    """Tests for FormatError exception."""

    def test_str_without_location(self):
        """Test the message is the string representation."""
        assert str(FormatError("Token too short")) == "Token too short"

    def test_to_error(self):
        """Test conversion to an error record keeps message and location."""
        loc = SourceLocation(source="points.gsi", line=0, column=3, text="XY")
        record = FormatError("Token too short", loc).to_error()
        assert record.severity == Severity.ERROR
        assert record.message == "Token too short"
        assert record.location == loc

    def test_to_warning(self):
        """Test conversion with warning severity."""
        record = FormatError("Odd").to_error(Severity.WARNING)
        assert record.severity == Severity.WARNING


class TestBlockErrors:
    """Tests for the logfile processor exceptions."""

    def test_unsupported_is_not_implemented(self):
        """Test UnsupportedBlockError is a NotImplementedError with kind."""
        exc = UnsupportedBlockError("volume")
        assert isinstance(exc, NotImplementedError)
        assert exc.kind == "volume"
        assert "volume" in str(exc)

    def test_precondition_is_not_format_error(self):
        """Test PreconditionViolation is distinct from data errors."""
        assert not issubclass(PreconditionViolation, FormatError)
