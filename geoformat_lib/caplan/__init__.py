# -*- coding: utf-8 -*-
"""Caplan K parsing and formatting."""

from geoformat_lib.caplan.format import format_caplan_line
from geoformat_lib.caplan.format import gsi_to_caplan
from geoformat_lib.caplan.models import CaplanFile
from geoformat_lib.caplan.models import CaplanPoint
from geoformat_lib.caplan.parser import CaplanParser

__all__ = [
    "CaplanFile",
    "CaplanParser",
    "CaplanPoint",
    "format_caplan_line",
    "gsi_to_caplan",
]
