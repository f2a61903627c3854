# -*- coding: utf-8 -*-
"""Tests for the Leica System 1200 logfile analyzer and clear-up."""

import pytest
from conftest import COGO_MARKER
from conftest import SETUP_MARKER
from conftest import STAKEOUT_MARKER
from conftest import setup_block

from geoformat_lib.enums import BlockKind
from geoformat_lib.enums import Severity
from geoformat_lib.errors import PreconditionViolation
from geoformat_lib.errors import UnsupportedBlockError
from geoformat_lib.logfile.analyzer import LogfileAnalyzer
from geoformat_lib.logfile.clearup import clear_up_framed_logfile
from geoformat_lib.logfile.clearup import clear_up_logfile
from geoformat_lib.logfile.models import LogfileBlock
from geoformat_lib.logfile.processors import TRIM_RULES
from geoformat_lib.logfile.processors import process_block

PLANE_MARKER = "Leica System 1200 Reference Plane, v7.02"
VOLUME_MARKER = "Leica System 1200, Volume Calculations v7.02"

FRAME_BEGIN = "System 1200 Logfile - Begin"
FRAME_END = "System 1200 Logfile - End"


def _block(kind: BlockKind, lines: list[str]) -> LogfileBlock:
    return LogfileBlock(kind=kind, lines=lines)


def _cogo_block(body: str) -> list[str]:
    return [COGO_MARKER, "head 2", body, "tail 1", "tail 2", "tail 3", "tail 4"]


def _stakeout_block(body: str) -> list[str]:
    return [STAKEOUT_MARKER, "head 2", body, "t1", "t2", "t3", "t4", "t5"]


class TestProcessBlock:
    """Tests for the per-kind trimming rules."""

    def test_rules(self):
        """Test head and tail counts of each supported kind."""
        cogo = TRIM_RULES[BlockKind.COGO]
        assert (cogo.head, cogo.tail) == (2, 4)
        for kind in (BlockKind.REFERENCE_LINE, BlockKind.SETUP, BlockKind.STAKEOUT):
            assert (TRIM_RULES[kind].head, TRIM_RULES[kind].tail) == (2, 5)

    def test_setup_with_results(self, setup_lines):
        """Test a SETUP block keeps its body."""
        result = process_block(_block(BlockKind.SETUP, setup_lines))
        assert result == ["Station ID : ST1", "Results"]

    def test_setup_without_results(self):
        """Test a SETUP block without a set station is dropped."""
        block = _block(BlockKind.SETUP, setup_block(with_results=False))
        assert process_block(block) == []

    @pytest.mark.parametrize(
        "keyword",
        [
            "Computed",
            "Base Point",
            "Inverse",
            "Offset Point",
            "Traverse",
            "Stakeout Diff",
        ],
    )
    def test_cogo_keywords(self, keyword):
        """Test a COGO body with any keyword is kept, 2 head and 4 tail lines cut."""
        body = f"{keyword} : 1001"
        assert process_block(_block(BlockKind.COGO, _cogo_block(body))) == [body]

    def test_cogo_without_keyword(self):
        """Test a COGO block without results is dropped."""
        block = _block(BlockKind.COGO, _cogo_block("Nothing calculated"))
        assert process_block(block) == []

    def test_stakeout(self):
        """Test a STAKEOUT block needs a staked point."""
        kept = _block(BlockKind.STAKEOUT, _stakeout_block("Point ID : 1001"))
        dropped = _block(BlockKind.STAKEOUT, _stakeout_block("Aborted"))
        assert process_block(kept) == ["Point ID : 1001"]
        assert process_block(dropped) == []

    @pytest.mark.parametrize("body", ["Measured Point : 1", "Stakeout Point : 2"])
    def test_reference_line(self, body):
        """Test a REFERENCE_LINE block with a measured or staked point."""
        lines = [
            "Leica System 1200 Reference Line, v7.02",
            "h2",
            body,
            "t1",
            "t2",
            "t3",
            "t4",
            "t5",
        ]
        assert process_block(_block(BlockKind.REFERENCE_LINE, lines)) == [body]

    def test_short_block(self):
        """Test a block shorter than head plus tail has an empty body."""
        block = _block(BlockKind.SETUP, [SETUP_MARKER, "Results"])
        assert process_block(block) == []

    def test_none(self):
        """Test a missing block is a precondition violation."""
        with pytest.raises(PreconditionViolation):
            process_block(None)

    @pytest.mark.parametrize("kind", [BlockKind.REFERENCE_PLANE, BlockKind.VOLUME])
    def test_unsupported(self, kind):
        """Test kinds without trimming rule are rejected."""
        with pytest.raises(UnsupportedBlockError) as exc_info:
            process_block(_block(kind, ["line"]))
        assert exc_info.value.kind == kind.value


class TestLogfileBlock:
    """Tests for the header helpers of a block."""

    def test_header_values(self):
        """Test header elements are read from `label : value` lines."""
        block = _block(
            BlockKind.SETUP,
            [
                SETUP_MARKER,
                "Instrument Type        : TPS1201",
                "Instrument Serial No.  : 123456",
                "Store To Job           : JOB1",
                "Start Point            : 1001",
                "Start                  : 19.10.2026, 12:30:15",
            ],
        )
        assert block.instrument_type == "TPS1201"
        assert block.serial_number == "123456"
        assert block.store_to_job == "JOB1"
        assert block.application_start == "19.10.2026, 12:30:15"
        assert block.application_start_date == "19.10.2026"
        assert block.application_start_time == "12:30:15"

    def test_missing_header(self):
        """Test missing header elements are None."""
        block = _block(BlockKind.SETUP, [SETUP_MARKER])
        assert block.instrument_type is None
        assert block.application_start_date is None
        assert block.application_start_time is None


class TestLogfileAnalyzer:
    """Tests for block segmentation."""

    def test_each_block_dispatched_once(self):
        """Test two consecutive SETUP blocks reach the processor separately."""
        seen: list[LogfileBlock] = []

        def record(block: LogfileBlock) -> list[str]:
            seen.append(block)
            return [f"block {len(seen)}"]

        first = setup_block()
        second = setup_block(with_results=False)
        analysis = LogfileAnalyzer(record).analyze([*first, *second])

        assert [block.lines for block in seen] == [first, second]
        assert [block.start_line for block in seen] == [0, len(first)]
        assert analysis.lines == ["block 1", "block 2"]
        assert analysis.blocks == seen

    def test_blank_lines_dropped(self):
        """Test blank lines never reach the blocks or the output."""
        lines = ["", "Preamble", "   ", *setup_block()]
        lines.insert(5, "")
        analysis = LogfileAnalyzer(lambda block: list(block.lines)).analyze(lines)
        assert "" not in analysis.lines
        assert "   " not in analysis.lines
        assert analysis.blocks[0].lines == setup_block()

    def test_preamble_and_unknown_blocks(self):
        """Test lines outside known blocks are kept verbatim."""
        lines = [
            "Logfile of job JOB1",
            *setup_block(),
            "Leica System 1200 Roads, v7.02",
            "Road line",
        ]
        analysis = LogfileAnalyzer().analyze(lines)
        assert analysis.preamble == ["Logfile of job JOB1"]
        assert analysis.lines == [
            "Logfile of job JOB1",
            "Station ID : ST1",
            "Results",
            "Leica System 1200 Roads, v7.02",
            "Road line",
        ]

    def test_unsupported_block_kept(self):
        """Test a reference plane block is kept and reported as warning."""
        plane = [PLANE_MARKER, "Plane : P1"]
        analysis = LogfileAnalyzer().analyze([*plane, *setup_block()], "logfile.txt")
        assert analysis.lines == [*plane, "Station ID : ST1", "Results"]
        (error,) = analysis.errors
        assert error.severity == Severity.WARNING
        assert error.location.source == "logfile.txt"
        assert error.location.line == 0


class TestClearUp:
    """Tests for the clear-up entry points."""

    def test_clear_up_logfile(self):
        """Test informative blocks are trimmed and empty ones removed."""
        lines = [
            "Logfile",
            *setup_block(with_results=False),
            *setup_block(),
            *_stakeout_block("Point ID : 1001"),
            *_cogo_block("Nothing calculated"),
        ]
        analysis = clear_up_logfile(lines)
        assert analysis.lines == [
            "Logfile",
            "Station ID : ST1",
            "Results",
            "Point ID : 1001",
        ]
        assert len(analysis.blocks) == 4
        assert not analysis.errors

    def test_volume_block(self):
        """Test a volume block is kept unchanged."""
        volume = [VOLUME_MARKER, "Volume : 12.5"]
        analysis = clear_up_logfile(volume)
        assert analysis.lines == volume
        assert len(analysis.errors) == 1


class TestClearUpFramed:
    """Tests for logfiles framed by begin and end lines."""

    @pytest.fixture
    def framed_lines(self):
        return [
            "Header",
            FRAME_BEGIN,
            SETUP_MARKER,
            "Station ID : ST1",
            "Results",
            "Store To Job : JOB1",
            "t2",
            "t3",
            "t4",
            FRAME_END,
            FRAME_BEGIN,
            "Leica System 1200 Roads, v7.02",
            "Road line",
            FRAME_END,
            FRAME_BEGIN,
            SETUP_MARKER,
            "Station ID : ST2",
            "t1",
            "t2",
            "t3",
            "t4",
            FRAME_END,
            "Footer",
        ]

    def test_clean_by_content(self, framed_lines):
        """Test frames are trimmed, unknown and empty frames dropped."""
        analysis = clear_up_framed_logfile(framed_lines)
        assert analysis.lines == [
            "Header",
            "Station ID : ST1",
            "Results",
            "Footer",
        ]
        assert [block.kind for block in analysis.blocks] == [
            BlockKind.SETUP,
            BlockKind.SETUP,
        ]

    def test_keep_all(self, framed_lines):
        """Test every frame is kept without content cleaning."""
        analysis = clear_up_framed_logfile(framed_lines, clean_by_content=False)
        assert analysis.lines == framed_lines

    def test_unterminated_frame(self):
        """Test a frame without end line is kept."""
        lines = ["Header", FRAME_BEGIN, SETUP_MARKER, "Results"]
        assert clear_up_framed_logfile(lines).lines == lines

    def test_unsupported_frame(self):
        """Test a reference plane frame is kept with a warning."""
        frame = [FRAME_BEGIN, PLANE_MARKER, "Plane : P1", FRAME_END]
        analysis = clear_up_framed_logfile(frame, source="logfile.txt")
        assert analysis.lines == frame
        assert [e.severity for e in analysis.errors] == [Severity.WARNING]
