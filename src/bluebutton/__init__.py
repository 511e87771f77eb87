"""
bluebutton - Parse My HealtheVet "Blue Button" text reports

Converts the fixed-width, banner-delimited plain-text export into nested
dictionaries: one entry per report section, with repeated records collected
into lists of items.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("bluebutton")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from bluebutton.core.models import (
    ItemCollection,
    ParserConfig,
    SectionConfig,
    TableCollection,
)
from bluebutton.core.parser import BlueButtonParser, parse_text

__all__ = [
    "__version__",
    "BlueButtonParser",
    "ItemCollection",
    "ParserConfig",
    "SectionConfig",
    "TableCollection",
    "parse_text",
]
