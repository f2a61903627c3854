# -*- coding: utf-8 -*-
"""Leica System 1200 logfile analysis and clear-up."""

from geoformat_lib.logfile.analyzer import LogfileAnalyzer
from geoformat_lib.logfile.clearup import clear_up_framed_logfile
from geoformat_lib.logfile.clearup import clear_up_logfile
from geoformat_lib.logfile.models import LogfileAnalysis
from geoformat_lib.logfile.models import LogfileBlock
from geoformat_lib.logfile.processors import TRIM_RULES
from geoformat_lib.logfile.processors import process_block

__all__ = [
    "TRIM_RULES",
    "LogfileAnalysis",
    "LogfileAnalyzer",
    "LogfileBlock",
    "clear_up_framed_logfile",
    "clear_up_logfile",
    "process_block",
]
