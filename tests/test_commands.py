# -*- coding: utf-8 -*-
"""Tests for the convert and clearup commands."""

import logging
from pathlib import Path

import pytest
from conftest import setup_block
from conftest import write_sample

from geoformat_lib.commands.clearup import clearup
from geoformat_lib.commands.convert import convert
from geoformat_lib.commands.convert import detect_source_format
from geoformat_lib.enums import SourceFormat
from geoformat_lib.errors import ConversionError


class TestDetectSourceFormat:
    """Tests for the extension based format detection."""

    @pytest.mark.parametrize(
        ("name", "source"),
        [
            ("points.gsi", SourceFormat.GSI),
            ("POINTS.GSI", SourceFormat.GSI),
            ("points.k", SourceFormat.CAPLAN),
            ("points.rec", SourceFormat.ZEISS),
            ("node.dat", SourceFormat.CADWORK),
            ("points.pts", SourceFormat.TOPORAIL),
        ],
    )
    def test_known_extensions(self, name, source):
        """Test known extensions."""
        assert detect_source_format(Path(name)) is source

    def test_unknown_extension(self):
        """Test an unknown extension."""
        with pytest.raises(ConversionError):
            detect_source_format(Path("drawing.dxf"))


class TestConvertCommand:
    """Tests for the convert command."""

    def test_stdout(self, tmp_path, gsi8_lines, capsys):
        """Test the converted lines are printed without output file."""
        path = write_sample(tmp_path, "points.gsi", gsi8_lines)
        assert convert(["-i", str(path), "-t", "csv", "--separator", ","]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "A12,123.450,654.320,5.550",
            "A13,123.460,654.330,-1.250",
        ]

    def test_output_file(self, tmp_path, gsi8_lines):
        """Test a GSI16 file is written."""
        path = write_sample(tmp_path, "points.gsi", gsi8_lines)
        output = tmp_path / "wide.gsi"
        assert convert(["-i", str(path), "-o", str(output), "-t", "gsi16"]) == 0
        lines = output.read_text(encoding="iso-8859-1").splitlines()
        assert len(lines) == 2
        assert all(line.startswith("*11") for line in lines)

    def test_tab_separator_and_header(self, tmp_path, gsi8_lines, capsys):
        """Test the `tab` separator and the comment line option."""
        path = write_sample(tmp_path, "points.gsi", gsi8_lines)
        args = ["-i", str(path), "-t", "csv", "--separator", "tab", "--comment-line"]
        assert convert(args) == 0
        header = capsys.readouterr().out.splitlines()[0]
        assert header == "Point number\tEasting\tNorthing\tHeight"

    def test_explicit_source(self, tmp_path, capsys):
        """Test the source option overrides the extension."""
        path = write_sample(
            tmp_path,
            "basel.txt",
            ["Punktnummer;Art;Y;X;Z", "1001;LFP3;2611111.11;1266666.66;300.12"],
        )
        assert convert(["-i", str(path), "-s", "basel_stadt", "-t", "csv"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "1001;2611111.11;1266666.66;300.12"
        ]

    def test_unknown_extension(self, tmp_path, caplog):
        """Test a file with unknown extension and no source fails."""
        path = write_sample(tmp_path, "points.xyz", ["1 2 3"])
        with caplog.at_level(logging.ERROR):
            assert convert(["-i", str(path), "-t", "csv"]) == 1
        assert "Invalid conversion" in caplog.text

    def test_missing_input(self, tmp_path):
        """Test a missing input file fails."""
        assert convert(["-i", str(tmp_path / "missing.gsi"), "-t", "csv"]) == 1

    def test_invalid_target(self, tmp_path):
        """Test argparse rejects an unknown target."""
        with pytest.raises(SystemExit):
            convert(["-i", str(tmp_path / "points.gsi"), "-t", "dxf"])


class TestClearupCommand:
    """Tests for the clearup command."""

    def test_stdout(self, tmp_path, capsys):
        """Test the cleared up logfile is printed."""
        path = write_sample(tmp_path, "logfile.txt", setup_block())
        assert clearup(["-i", str(path)]) == 0
        assert capsys.readouterr().out.splitlines() == ["Station ID : ST1", "Results"]

    def test_framed_keep_all(self, tmp_path):
        """Test framed reports are kept with --keep-all."""
        lines = [
            "System 1200 Logfile - Begin",
            *setup_block(),
            "System 1200 Logfile - End",
        ]
        path = write_sample(tmp_path, "logfile.txt", lines)
        output = tmp_path / "clean.txt"
        args = ["-i", str(path), "-o", str(output), "--framed", "--keep-all"]
        assert clearup(args) == 0
        assert output.read_text(encoding="iso-8859-1").splitlines() == lines

    def test_missing_input(self, tmp_path):
        """Test a missing logfile fails."""
        assert clearup(["-i", str(tmp_path / "missing.txt")]) == 1
