# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

This module provides small inline samples of every supported format. Tests
that need a file write the sample to ``tmp_path``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# =============================================================================
# Helpers
# =============================================================================


def place(fields: dict[int, str], length: int = 0) -> str:
    """Build a fixed column line; keys are 0-based start columns."""
    end = max([length] + [start + len(text) for start, text in fields.items()])
    chars = [" "] * end
    for start, text in fields.items():
        chars[start : start + len(text)] = text
    return "".join(chars)


def write_sample(directory: Path, name: str, lines: list[str]) -> Path:
    path = directory / name
    path.write_text("\n".join(lines) + "\n", encoding="iso-8859-1")
    return path


# =============================================================================
# GSI Samples
# =============================================================================

GSI8_LINES = [
    "110001+00000A12 81..00+00123450 82..00+00654320 83..00+00005550 ",
    "110002+00000A13 81..00+00123460 82..00+00654330 83..00-00001250 ",
]

GSI16_LINES = [
    "*110001+00000000000000A1 81..00+0000000000123450 82..00+0000000000654320 ",
]


@pytest.fixture
def gsi8_lines() -> list[str]:
    """Return two GSI8 coordinate lines."""
    return list(GSI8_LINES)


@pytest.fixture
def gsi16_lines() -> list[str]:
    """Return one GSI16 coordinate line."""
    return list(GSI16_LINES)


# =============================================================================
# Caplan K Samples
# =============================================================================


def caplan_line(
    number: str,
    valency: str,
    easting: str = "",
    northing: str = "",
    height: str = "",
    tail: str = "",
) -> str:
    """Build a Caplan K point line from its columns."""
    return (
        f"{number:>16} {valency}{easting:>14}{northing:>14}{height:>13}{tail}"
    ).rstrip()


@pytest.fixture
def caplan_lines() -> list[str]:
    """Return a Caplan K file with a comment and three points."""
    return [
        "!---+----1----+----2",
        caplan_line(
            "1001", "7", "2600000.1234", "1200000.5678", "456.12345", " |MP|A1|A2"
        ),
        caplan_line("1002", "3", "2600010.0000", "1200010.0000"),
        "",
        caplan_line("1003", "4", height="450.00000"),
    ]


# =============================================================================
# Toporail Samples
# =============================================================================


@pytest.fixture
def mep_lines() -> list[str]:
    """Return a MEP file with one record of each type and an unknown record."""
    return [
        "@MEPB",
        "K\t5\tP1\t6\tP2\t25.000\t0.125\tcheck",
        "M\t5\tP3\t12.345\t100.0000\t99.5000\t1.600",
        "P\t5\tP1\tAB\t100.000\t200.000\t300.000\tnote",
        "S\t5\tST1\tfree\t1.550\t18\t960\tcloudy",
        "X\tunknown",
    ]


# =============================================================================
# Logfile Samples
# =============================================================================

SETUP_MARKER = "Leica System 1200 Setup, v7.02"
STAKEOUT_MARKER = "Leica System 1200 Stakeout, v7.02"
COGO_MARKER = "Leica System 1200 COGO, v7.02"


def setup_block(with_results: bool = True) -> list[str]:
    """Return a SETUP block: 2 head lines, body, 5 tail lines."""
    body = ["Station ID : ST1"]
    if with_results:
        body.append("Results")
    return [
        SETUP_MARKER,
        "Instrument Type : TPS1201",
        *body,
        "Store To Job : JOB1",
        "tail 2",
        "tail 3",
        "tail 4",
        "tail 5",
    ]


@pytest.fixture
def setup_lines() -> list[str]:
    """Return a SETUP block with results."""
    return setup_block()
