# -*- coding: utf-8 -*-
"""Leica GSI8/GSI16 word index model, parsing and formatting."""

from geoformat_lib.gsi.format import convert_gsi_width
from geoformat_lib.gsi.format import format_gsi_line
from geoformat_lib.gsi.format import format_gsi_lines
from geoformat_lib.gsi.models import GsiBlock
from geoformat_lib.gsi.models import GsiFile
from geoformat_lib.gsi.models import GsiLine
from geoformat_lib.gsi.models import collect_word_indices
from geoformat_lib.gsi.models import sort_by_word_index
from geoformat_lib.gsi.parser import GsiParser
from geoformat_lib.gsi.word_index import WORD_INDEX_RULES
from geoformat_lib.gsi.word_index import WordIndexRule

__all__ = [
    "WORD_INDEX_RULES",
    "GsiBlock",
    "GsiFile",
    "GsiLine",
    "GsiParser",
    "WordIndexRule",
    "collect_word_indices",
    "convert_gsi_width",
    "format_gsi_line",
    "format_gsi_lines",
    "sort_by_word_index",
]
