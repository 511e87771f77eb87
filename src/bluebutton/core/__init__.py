"""
bluebutton.core - Parsing engine, line classifiers and configuration model
"""

from bluebutton.core.models import (
    EMPTY_SECTION,
    ItemCollection,
    ParsedDocument,
    ParserConfig,
    SectionConfig,
    TableCollection,
)
from bluebutton.core.parser import BlueButtonParser, ParserState, parse_text
from bluebutton.core.table import TableLayout

__all__ = [
    "EMPTY_SECTION",
    "BlueButtonParser",
    "ItemCollection",
    "ParsedDocument",
    "ParserConfig",
    "ParserState",
    "SectionConfig",
    "TableCollection",
    "TableLayout",
    "parse_text",
]
