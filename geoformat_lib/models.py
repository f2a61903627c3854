# -*- coding: utf-8 -*-
"""Configuration models shared by the converters, the interface and the CLI."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from geoformat_lib.constants import DEFAULT_ENCODING
from geoformat_lib.enums import Separator
from geoformat_lib.enums import WidthMode


class ConversionOptions(BaseModel):
    """Options of a single conversion.

    Attributes:
        separator: Column separator of CSV input and output (see `Separator`)
        width_mode: Width of written GSI lines
        write_comment_line: Write a header/comment line (CSV, Caplan K)
        use_code_column: Read and write a code column
        use_zero_heights: Keep cadwork heights written as ``0.000000``
        simple_format: Caplan K without code and attributes
        toporail_header: Start Toporail output with the ``@MEPB``/``@PTSB`` tag
        encoding: Encoding of the surveying text files
    """

    model_config = ConfigDict(frozen=True)

    separator: Annotated[str, Field(default=";", min_length=1)]
    width_mode: WidthMode = WidthMode.GSI8
    write_comment_line: bool = False
    use_code_column: bool = False
    use_zero_heights: bool = False
    simple_format: bool = False
    toporail_header: bool = False
    encoding: str = DEFAULT_ENCODING

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Validate that the separator is one of the supported characters."""
        if v not in {separator.value for separator in Separator}:
            raise ValueError(f"Unsupported separator: `{v}`")
        return v
