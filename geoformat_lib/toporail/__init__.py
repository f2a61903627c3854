# -*- coding: utf-8 -*-
"""Toporail MEP/PTS parsing and formatting."""

from geoformat_lib.toporail.format import format_toporail
from geoformat_lib.toporail.format import gsi_to_toporail
from geoformat_lib.toporail.format import gsi_to_toporail_rows
from geoformat_lib.toporail.models import MepRecord
from geoformat_lib.toporail.models import ToporailFile
from geoformat_lib.toporail.models import ToporailRow
from geoformat_lib.toporail.parser import ToporailParser

__all__ = [
    "MepRecord",
    "ToporailFile",
    "ToporailParser",
    "ToporailRow",
    "format_toporail",
    "gsi_to_toporail",
    "gsi_to_toporail_rows",
]
