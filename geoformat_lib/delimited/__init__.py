# -*- coding: utf-8 -*-
"""Delimiter based point files (CSV, cadwork, Basel Stadt/Landschaft)."""

from geoformat_lib.delimited.format import caplan_to_csv
from geoformat_lib.delimited.format import gsi_to_csv
from geoformat_lib.delimited.format import points_to_csv
from geoformat_lib.delimited.format import zeiss_to_csv
from geoformat_lib.delimited.models import PointFile
from geoformat_lib.delimited.models import PointRecord
from geoformat_lib.delimited.parser import BaselLandschaftParser
from geoformat_lib.delimited.parser import BaselStadtParser
from geoformat_lib.delimited.parser import CadworkParser
from geoformat_lib.delimited.parser import read_csv_rows

__all__ = [
    "BaselLandschaftParser",
    "BaselStadtParser",
    "CadworkParser",
    "PointFile",
    "PointRecord",
    "caplan_to_csv",
    "gsi_to_csv",
    "points_to_csv",
    "read_csv_rows",
    "zeiss_to_csv",
]
