# -*- coding: utf-8 -*-
"""Zeiss REC (R4, R5, M5, REC500) parsing and REC M5 formatting."""

from geoformat_lib.zeiss.format import format_m5_line
from geoformat_lib.zeiss.format import gsi_to_zeiss_m5
from geoformat_lib.zeiss.models import LAYOUTS
from geoformat_lib.zeiss.models import ZeissBlock
from geoformat_lib.zeiss.models import ZeissFile
from geoformat_lib.zeiss.models import ZeissLine
from geoformat_lib.zeiss.parser import ZeissParser

__all__ = [
    "LAYOUTS",
    "ZeissBlock",
    "ZeissFile",
    "ZeissLine",
    "ZeissParser",
    "format_m5_line",
    "gsi_to_zeiss_m5",
]
