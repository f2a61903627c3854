# -*- coding: utf-8 -*-
"""Word index vocabulary of the Leica GSI format.

Every GSI token carries a two digit word index naming the semantic role of
its value. This module maps each known word index to its display rule and,
where the value has a column in Toporail output, to its Toporail slot.
"""

from __future__ import annotations

from dataclasses import dataclass

from geoformat_lib.enums import DisplayRule
from geoformat_lib.enums import ToporailSlot


@dataclass(frozen=True)
class WordIndexRule:
    """Lookup entry for one word index.

    Attributes:
        word_index: Numeric word index
        name: Human readable column name
        display: Rule used to render the block data
        toporail_slot: Toporail column filled by this word index (optional)
    """

    word_index: int
    name: str
    display: DisplayRule
    toporail_slot: ToporailSlot | None = None


#: Point number
WI_POINT_NUMBER = 11
#: Date part holding the year
WI_DATE_YEAR = 18
#: Date part holding month and day
WI_DATE_MONTH_DAY = 19
#: Numeric code
WI_CODE = 41
#: Coordinates
WI_EASTING = 81
WI_NORTHING = 82
WI_HEIGHT = 83

_RULES: tuple[WordIndexRule, ...] = (
    WordIndexRule(11, "Point number", DisplayRule.TEXT, ToporailSlot.POINT_NUMBER),
    WordIndexRule(18, "Date (year)", DisplayRule.TEXT, ToporailSlot.DATE),
    WordIndexRule(19, "Date (month, day)", DisplayRule.TEXT, ToporailSlot.DATE),
    WordIndexRule(21, "Horizontal angle", DisplayRule.ANGLE, ToporailSlot.AZIMUTH),
    WordIndexRule(22, "Vertical angle", DisplayRule.ANGLE),
    WordIndexRule(24, "Horizontal angle Hz0", DisplayRule.ANGLE),
    WordIndexRule(25, "Horizontal difference Hz0-Hz", DisplayRule.ANGLE),
    WordIndexRule(26, "Offset", DisplayRule.RAW),
    WordIndexRule(27, "Vertical angle V0", DisplayRule.RAW),
    WordIndexRule(28, "Vertical difference V0-V", DisplayRule.RAW),
    WordIndexRule(31, "Slope distance", DisplayRule.DISTANCE),
    WordIndexRule(32, "Horizontal distance", DisplayRule.DISTANCE),
    WordIndexRule(33, "Height difference", DisplayRule.DISTANCE),
    WordIndexRule(41, "Code", DisplayRule.TEXT, ToporailSlot.CODE),
    WordIndexRule(42, "Information 1", DisplayRule.TEXT),
    WordIndexRule(58, "Addition constant", DisplayRule.CONSTANT),
    WordIndexRule(71, "Comment 1", DisplayRule.TEXT, ToporailSlot.AUTHOR),
    WordIndexRule(72, "Attribute 1", DisplayRule.TEXT, ToporailSlot.COMMENT),
    WordIndexRule(73, "Attribute 2", DisplayRule.TEXT, ToporailSlot.OVERHAULING),
    WordIndexRule(74, "Attribute 3", DisplayRule.TEXT),
    WordIndexRule(75, "Attribute 4", DisplayRule.TEXT),
    WordIndexRule(76, "Attribute 5", DisplayRule.TEXT),
    WordIndexRule(77, "Attribute 6", DisplayRule.TEXT),
    WordIndexRule(78, "Attribute 7", DisplayRule.TEXT),
    WordIndexRule(79, "Attribute 8", DisplayRule.TEXT),
    WordIndexRule(81, "Easting", DisplayRule.COORDINATE, ToporailSlot.EASTING),
    WordIndexRule(82, "Northing", DisplayRule.COORDINATE, ToporailSlot.NORTHING),
    WordIndexRule(83, "Height", DisplayRule.COORDINATE, ToporailSlot.HEIGHT),
    WordIndexRule(84, "Station easting", DisplayRule.COORDINATE),
    WordIndexRule(85, "Station northing", DisplayRule.COORDINATE),
    WordIndexRule(86, "Station height", DisplayRule.COORDINATE),
    WordIndexRule(87, "Target height", DisplayRule.COORDINATE),
    WordIndexRule(88, "Instrument height", DisplayRule.COORDINATE),
)

WORD_INDEX_RULES: dict[int, WordIndexRule] = {rule.word_index: rule for rule in _RULES}


def get_rule(word_index: int) -> WordIndexRule:
    """Get the rule of a word index.

    Unknown word indices get a rule with ``DisplayRule.UNKNOWN`` and no
    Toporail slot.
    """
    rule = WORD_INDEX_RULES.get(word_index)
    if rule is None:
        return WordIndexRule(word_index, f"WI {word_index}", DisplayRule.UNKNOWN)
    return rule


def word_index_name(word_index: int) -> str:
    """Human readable name of a word index (used for CSV comment lines)."""
    return get_rule(word_index).name


def toporail_slot(word_index: int) -> ToporailSlot | None:
    """Toporail column filled by a word index, None if it has none."""
    return get_rule(word_index).toporail_slot
