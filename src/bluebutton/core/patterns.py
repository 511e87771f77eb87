"""
bluebutton.core.patterns - Line classifiers for Blue Button reports.

Stateless predicates and extractors applied to one line at a time. The
parser engine decides what to do with their answers.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Dict, Iterable, Optional, Sequence, Tuple

from bluebutton.core.models import CollectionConfig, FieldValue, ItemCollection

# Lines that never carry data: banner rules, column underlines, the footer.
ALWAYS_SKIP_LINES = (
    r"^[-]+$",
    r"^[-]+[ ]+$",
    r"^[ ]+[-]+",
    r"^[=]+$",
    r"^(- ){5,}",
    r"END OF MY HEALTHEVET",
)
ALWAYS_SKIP_PATTERNS = tuple(re.compile(p) for p in ALWAYS_SKIP_LINES)

# "------- SECTION NAME -------"
SECTION_PATTERN = re.compile(r"^[-]+ (.*?) [-]+")

# "Key: value" (key ends at the first ": ") and bare "Key:"
KEY_VALUE_PATTERN = re.compile(r"^(.*?): (.*)$")
KEY_ONLY_PATTERN = re.compile(r"^(.*):$")

# A line that opens a new key, ending any multi-line value
KEY_START_PATTERN = re.compile(r"^\S.*: \S*")


def is_skipped(line: str, extra_patterns: Iterable["re.Pattern[str]"] = ()) -> bool:
    """Check the line against the global and section skip patterns."""
    for pattern in ALWAYS_SKIP_PATTERNS:
        if pattern.search(line):
            return True
    for pattern in extra_patterns:
        if pattern.search(line):
            return True
    return False


def section_name(line: str) -> Optional[str]:
    """Return the section name if the line is a banner header."""
    match = SECTION_PATTERN.match(line)
    if match:
        return match.group(1)
    return None


@lru_cache(maxsize=256)
def table_header_pattern(columns: Tuple[str, ...]) -> "re.Pattern[str]":
    """Pattern matching a line holding every column label, in order."""
    return re.compile(".*".join(re.escape(c) for c in columns))


@lru_cache(maxsize=256)
def same_line_pattern(keys: Tuple[str, ...]) -> "re.Pattern[str]":
    """Pattern capturing one value per key, each running up to the next key."""
    return re.compile("".join(f"{re.escape(k)}: (.*)" for k in keys))


def starts_table(
    line: str, previous_line: Optional[str], columns: Tuple[str, ...], starts_with: Optional[str]
) -> bool:
    """
    Check whether a table header line begins here.

    Args:
        line: Candidate header line
        previous_line: The raw line before it, or None on the first line
        columns: Declared column labels
        starts_with: Prefix required on the previous line, if any

    Returns:
        True if the line is a header for this table
    """
    if starts_with is not None:
        if previous_line is None or not previous_line.startswith(starts_with):
            return False
    return table_header_pattern(columns).search(line) is not None


def match_collection(
    line: str,
    previous_line: Optional[str],
    collections: Sequence[CollectionConfig],
) -> Optional[CollectionConfig]:
    """
    Find the collection (if any) that starts on this line.

    Definitions are tried in declared order; the first match wins.
    """
    for collection in collections:
        if isinstance(collection, ItemCollection):
            if line.startswith(f"{collection.item_starts_with}:"):
                return collection
        elif starts_table(
            line, previous_line, collection.table_columns, collection.table_starts_with
        ):
            return collection
    return None


def same_line_values(
    line: str, key_groups: Sequence[Tuple[str, ...]]
) -> Optional[Dict[str, FieldValue]]:
    """Extract the first configured key group found on the line."""
    for keys in key_groups:
        match = same_line_pattern(keys).search(line)
        if match:
            return dict(zip(keys, match.groups()))
    return None


def single_key_value(line: str) -> Optional[Dict[str, FieldValue]]:
    """Extract a free-form "Key: value" or "Key:" pair."""
    match = KEY_VALUE_PATTERN.match(line)
    if match:
        return {match.group(1): match.group(2)}
    match = KEY_ONLY_PATTERN.match(line)
    if match:
        return {match.group(1): None}
    return None


def key_values(
    line: str, key_groups: Sequence[Tuple[str, ...]] = ()
) -> Optional[Dict[str, FieldValue]]:
    """Same-line key groups first, then a single free-form key."""
    values = same_line_values(line, key_groups)
    if values is None:
        values = single_key_value(line)
    return values


def key_ended(line: str) -> bool:
    """
    Check whether the line ends a multi-line value.

    An empty line or a line that starts a new "Key: value" pair does.
    Indented lines never do, even when they contain a colon.
    """
    return not line or KEY_START_PATTERN.match(line) is not None


def clean_value(value: FieldValue) -> FieldValue:
    """Trim a value; blank values become None."""
    if value is None:
        return None
    value = value.strip()
    return value or None
