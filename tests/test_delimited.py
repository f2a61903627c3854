# -*- coding: utf-8 -*-
"""Tests for delimiter based point files and the CSV writers."""

import pytest

from geoformat_lib.caplan.parser import CaplanParser
from geoformat_lib.delimited.format import basel_landschaft_to_csv
from geoformat_lib.delimited.format import cadwork_to_csv
from geoformat_lib.delimited.format import caplan_to_csv
from geoformat_lib.delimited.format import gsi_to_csv
from geoformat_lib.delimited.format import zeiss_to_csv
from geoformat_lib.delimited.parser import BaselLandschaftParser
from geoformat_lib.delimited.parser import BaselStadtParser
from geoformat_lib.delimited.parser import CadworkParser
from geoformat_lib.delimited.parser import read_csv_rows
from geoformat_lib.gsi.format import points_to_gsi_lines
from geoformat_lib.gsi.parser import GsiParser
from geoformat_lib.zeiss.format import format_m5_line
from geoformat_lib.zeiss.parser import ZeissParser

CADWORK_LINES = [
    "cadwork node list",
    "",
    "No X Y Z Code Name",
    "1   2600000.100000 1200000.200000 450.500000 MP 1001",
    "2   2600001.100000 1200001.200000 0.000000   GP 1002",
    "",
    "3   2600002.100000",
]

BASEL_LANDSCHAFT_LINES = [
    "id\tnummer\ttyp\ty\tx\tz",
    "1\t1001\tLFP3\t2600000.10\t1200000.20\t450.50",
    "2\t1002\tLFP3\t2600001.10\t1200001.20\tNULL",
]


@pytest.fixture
def cadwork_points():
    return CadworkParser().parse_lines(CADWORK_LINES)


class TestReadCsvRows:
    """Tests for read_csv_rows."""

    def test_semicolon(self):
        """Test rows are split and cells stripped."""
        rows = read_csv_rows(["1; 100.0 ;200.0", "", ";;", "2;101.0;201.0"])
        assert rows == [["1", "100.0", "200.0"], ["2", "101.0", "201.0"]]

    def test_comma_with_quotes(self):
        """Test quoted cells keep their separator."""
        rows = read_csv_rows(['1,"a,b",3'], ",")
        assert rows == [["1", "a,b", "3"]]

    def test_invalid_separator(self):
        """Test an unsupported separator is rejected."""
        with pytest.raises(ValueError):
            read_csv_rows(["1|2"], "|")


class TestCadworkParser:
    """Tests for CadworkParser."""

    def test_points(self, cadwork_points):
        """Test header lines are skipped and columns mapped."""
        assert [p.number for p in cadwork_points] == ["1001", "1002"]
        assert cadwork_points[0].code == "MP"
        assert cadwork_points[0].easting == "2600000.100000"
        assert cadwork_points[0].height == "450.500000"

    def test_zero_height_dropped(self, cadwork_points):
        """Test a 0.000000 height is dropped unless enabled."""
        assert cadwork_points[1].height is None
        kept = CadworkParser().parse_lines(CADWORK_LINES, use_zero_heights=True)
        assert kept[1].height == "0.000000"

    def test_short_line_recorded(self):
        """Test a line with too few columns is recorded."""
        parser = CadworkParser()
        parser.parse_lines(CADWORK_LINES, "node.dat")
        assert len(parser.errors) == 1
        assert parser.errors[0].location.line == 6

    def test_columns(self):
        """Test the column names are read from the third header line."""
        data = CadworkParser().parse_lines_to_dict(CADWORK_LINES)
        assert data["columns"] == ["No", "X", "Y", "Z", "Code", "Name"]

    def test_to_gsi(self, cadwork_points):
        """Test cadwork points become GSI lines with optional code."""
        lines = points_to_gsi_lines(cadwork_points, use_code_column=True)
        assert lines[0].word_indices == [11, 71, 81, 82, 83]
        assert lines[1].word_indices == [11, 71, 81, 82]
        lines = points_to_gsi_lines(cadwork_points)
        assert lines[0].word_indices == [11, 81, 82, 83]


class TestBaselParsers:
    """Tests for the Basel Stadt and Basel Landschaft parsers."""

    def test_basel_stadt(self):
        """Test the header row is skipped and blanks removed from numbers."""
        rows = read_csv_rows(
            [
                "Punktnummer;Art;Y;X;Z",
                "10 01;LFP3;2611111.11;1266666.66;300.12",
                "1002;LFP3;2611112.11;1266667.66;",
                "1003;LFP3",
            ]
        )
        parser = BaselStadtParser()
        points = parser.parse_rows(rows)
        assert [p.number for p in points] == ["1001", "1002"]
        assert points[0].height == "300.12"
        assert points[1].height is None
        assert len(parser.errors) == 1

    def test_basel_landschaft_lfp(self):
        """Test LFP rows use the type as code and NULL as missing height."""
        points = BaselLandschaftParser().parse_lines(BASEL_LANDSCHAFT_LINES)
        assert [p.code for p in points] == ["LFP3", "LFP3"]
        assert points[1].height is None

    def test_basel_landschaft_hfp(self):
        """Test HFP rows have five columns."""
        points = BaselLandschaftParser().parse_lines(
            ["id\tnummer\ty\tx\tz", "1\t2001\t2600000.1\t1200000.2\t450.5"]
        )
        (point,) = points
        assert point.number == "2001"
        assert point.code is None
        assert point.height == "450.5"

    def test_basel_landschaft_bad_row(self):
        """Test a row with another count of columns is recorded."""
        parser = BaselLandschaftParser()
        assert parser.parse_lines(["header", "1\t2\t3"]) == []
        assert len(parser.errors) == 1


class TestCsvWriters:
    """Tests for the CSV writers."""

    def test_gsi_to_csv(self, gsi8_lines):
        """Test the columns are the union of all word indices."""
        lines = GsiParser().decode_lines(
            [gsi8_lines[0], "110003+00000A14 41....+00000005 "]
        )
        result = gsi_to_csv(lines, ";", write_comment_line=True)
        assert result == [
            "Point number;Code;Easting;Northing;Height",
            "A12;;123.450;654.320;5.550",
            "A14;5;;;",
        ]

    def test_gsi_to_csv_separator(self, gsi8_lines):
        """Test the chosen separator is used."""
        lines = GsiParser().decode_lines(gsi8_lines[:1])
        assert gsi_to_csv(lines, "\t") == ["A12\t123.450\t654.320\t5.550"]

    def test_caplan_to_csv(self, caplan_lines):
        """Test Caplan K points with and without code column."""
        points = CaplanParser().parse_lines(caplan_lines)
        assert caplan_to_csv(points, ",")[:2] == [
            "1001,2600000.1234,1200000.5678,456.12345",
            "1002,2600010.0000,1200010.0000",
        ]
        with_code = caplan_to_csv(
            points, ",", write_comment_line=True, use_code_column=True
        )
        assert with_code[0] == "nr,code,x,y,z,attribute"
        assert with_code[1] == "1001,MP,2600000.1234,1200000.5678,456.12345,A1,A2"
        assert with_code[3] == "1003,,450.00000"

    def test_caplan_to_csv_simple(self, caplan_lines):
        """Test the simple format drops code and attributes."""
        points = CaplanParser().parse_lines(caplan_lines)
        result = caplan_to_csv(points, ";", simple_format=True, use_code_column=True)
        assert result[0] == "1001;2600000.1234;1200000.5678;456.12345"

    def test_cadwork_to_csv(self, cadwork_points):
        """Test the header follows the output column order."""
        result = cadwork_to_csv(
            cadwork_points,
            ";",
            use_code_column=True,
            columns=["No", "X", "Y", "Z", "Code", "Name"],
        )
        assert result == [
            "Name;Code;X;Y;Z",
            "1001;MP;2600000.100000;1200000.200000;450.500000",
            "1002;GP;2600001.100000;1200001.200000",
        ]

    def test_basel_landschaft_to_csv(self):
        """Test a missing height is written as -9999."""
        points = BaselLandschaftParser().parse_lines(BASEL_LANDSCHAFT_LINES)
        assert basel_landschaft_to_csv(points, ";") == [
            "1001;2600000.10;1200000.20;450.50",
            "1002;2600001.10;1200001.20;-9999",
        ]

    def test_zeiss_to_csv(self):
        """Test REC lines give the point number then the block values."""
        lines = ZeissParser().decode_lines(
            [format_m5_line(1, "1001", "100.0", "200.0", "300.0")]
        )
        assert zeiss_to_csv(lines, ",") == ["1001,100.000,200.000,300.000"]
