# -*- coding: utf-8 -*-
"""Tests for the conversion options model."""

import pytest
from pydantic import ValidationError

from geoformat_lib.constants import DEFAULT_ENCODING
from geoformat_lib.enums import WidthMode
from geoformat_lib.models import ConversionOptions


class TestConversionOptions:
    """Tests for ConversionOptions."""

    def test_defaults(self):
        """Test the default options."""
        options = ConversionOptions()
        assert options.separator == ";"
        assert options.width_mode is WidthMode.GSI8
        assert options.encoding == DEFAULT_ENCODING
        assert not options.write_comment_line
        assert not options.use_code_column
        assert not options.use_zero_heights
        assert not options.simple_format
        assert not options.toporail_header

    @pytest.mark.parametrize("separator", [",", ";", "\t", " "])
    def test_valid_separators(self, separator):
        """Test every supported separator is accepted."""
        assert ConversionOptions(separator=separator).separator == separator

    @pytest.mark.parametrize("separator", ["", ";;", "|", "tab"])
    def test_invalid_separators(self, separator):
        """Test empty, multi-character and unsupported separators."""
        with pytest.raises(ValidationError):
            ConversionOptions(separator=separator)

    def test_frozen(self):
        """Test options cannot be changed after creation."""
        options = ConversionOptions()
        with pytest.raises(ValidationError):
            options.separator = ","

    def test_width_mode_from_string(self):
        """Test the width mode accepts its value."""
        assert ConversionOptions(width_mode="gsi16").width_mode is WidthMode.GSI16
