# -*- coding: utf-8 -*-
"""Tests for enums module."""

import pytest

from geoformat_lib.enums import BlockKind
from geoformat_lib.enums import Separator
from geoformat_lib.enums import ToporailFormat
from geoformat_lib.enums import ToporailSlot
from geoformat_lib.enums import WidthMode
from geoformat_lib.enums import ZeissDialect


class TestWidthMode:
    """Tests for WidthMode enum."""

    def test_data_width(self):
        """Test data widths of GSI8 and GSI16."""
        assert WidthMode.GSI8.data_width == 8
        assert WidthMode.GSI16.data_width == 16

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("110001+00000A12 ", WidthMode.GSI8),
            ("*110001+00000000000000A1 ", WidthMode.GSI16),
            ("  *110001+00000000000000A1 ", WidthMode.GSI16),
        ],
    )
    def test_from_line(self, line, expected):
        """Test width detection by the `*` prefix."""
        assert WidthMode.from_line(line) is expected


class TestBlockKind:
    """Tests for BlockKind enum."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("Leica System 1200 COGO, v7.02", BlockKind.COGO),
            ("Leica System 1200 Reference Line, v7.02", BlockKind.REFERENCE_LINE),
            ("Leica System 1200 Reference Plane, v7.02", BlockKind.REFERENCE_PLANE),
            ("Leica System 1200 Setup, v7.02", BlockKind.SETUP),
            ("Leica System 1200 Stakeout, v7.02", BlockKind.STAKEOUT),
            ("Leica System 1200, Volume Calculations", BlockKind.VOLUME),
        ],
    )
    def test_from_line(self, line, expected):
        """Test classification of marker lines."""
        assert BlockKind.from_line(line) is expected

    def test_unknown_marker(self):
        """Test a general marker of an unknown application."""
        line = "Leica System 1200 Road, v7.02"
        assert BlockKind.is_marker(line)
        assert BlockKind.from_line(line) is None

    def test_priority_order(self):
        """Test members are declared in marker priority order."""
        assert list(BlockKind) == [
            BlockKind.COGO,
            BlockKind.REFERENCE_LINE,
            BlockKind.REFERENCE_PLANE,
            BlockKind.SETUP,
            BlockKind.STAKEOUT,
            BlockKind.VOLUME,
        ]


class TestToporailFormat:
    """Tests for ToporailFormat enum."""

    def test_header_tag(self):
        """Test header tags."""
        assert ToporailFormat.MEP.header_tag == "@MEPB"
        assert ToporailFormat.PTS.header_tag == "@PTSB"

    def test_from_header(self):
        """Test header detection."""
        assert ToporailFormat.from_header("@PTSB") is ToporailFormat.PTS
        assert ToporailFormat.from_header("@MEP") is ToporailFormat.MEP
        assert ToporailFormat.from_header("PTS") is None

    def test_slot_order(self):
        """Test the ten Toporail columns are in fixed order."""
        assert [slot.value for slot in ToporailSlot] == [
            "code",
            "point_number",
            "easting",
            "northing",
            "height",
            "date",
            "author",
            "comment",
            "overhauling",
            "azimuth",
        ]


class TestZeissDialect:
    """Tests for ZeissDialect enum."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("For R4|PI1 ...", ZeissDialect.R4),
            ("For_R4|PI1 ...", ZeissDialect.R4),
            ("For R5|Adr 00001|...", ZeissDialect.R5),
            ("For M5|Adr 00001|...", ZeissDialect.M5),
            ("   1   1001", ZeissDialect.REC500),
            ("Header line", None),
            ("   ", None),
        ],
    )
    def test_from_line(self, line, expected):
        """Test dialect detection by line prefix."""
        assert ZeissDialect.from_line(line) is expected


class TestSeparator:
    """Tests for Separator enum."""

    def test_values(self):
        """Test separator characters."""
        assert Separator(",") is Separator.COMMA
        assert Separator(";") is Separator.SEMICOLON
        assert Separator("\t") is Separator.TAB
