"""
bluebutton.core.parser - Blue Button report parsing.

Walks the report once, line by line, tracking which section, collection,
table and multi-line key are open, and builds the nested output as it goes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from bluebutton.core.models import (
    Item,
    ParsedDocument,
    ParserConfig,
    SectionConfig,
    SectionContent,
    TableCollection,
)
from bluebutton.core.patterns import (
    clean_value,
    is_skipped,
    key_ended,
    key_values,
    match_collection,
    section_name,
)
from bluebutton.core.table import TableLayout

logger = logging.getLogger(__name__)


@dataclass
class ParserState:
    """
    Cursor over the document for a single parse.

    Attributes:
        section: Current section name (None before the first header)
        collection: Current collection name (None outside a collection)
        key: Key whose value may still continue on the next line
        table: Layout of the table being read (None outside a table)
        previous_line: Raw line before the one being processed
    """

    section: Optional[str] = None
    collection: Optional[str] = None
    key: Optional[str] = None
    table: Optional[TableLayout] = None
    previous_line: Optional[str] = None


class BlueButtonParser:
    """
    Parses Blue Button text reports into nested dictionaries.

    The parser is tolerant: every line is either used by a rule or ignored,
    so any input yields some result. A parser instance holds only its
    configuration and may be reused for many documents.
    """

    def __init__(self, config: Optional[ParserConfig] = None, newline: str = "\n"):
        """
        Initialize parser with section configuration.

        Args:
            config: Section rules (defaults to the built-in report sections)
            newline: Line separator used to split the text

        Raises:
            ValueError: If newline is empty
        """
        if not newline:
            raise ValueError("newline separator must not be empty")
        if config is None:
            from bluebutton.config.defaults import DEFAULT_CONFIG

            config = DEFAULT_CONFIG
        self.config = config
        self.newline = newline

    def parse(self, text: str) -> ParsedDocument:
        """Parse a whole report."""
        return self.parse_lines(self.split_lines(text))

    def split_lines(self, text: str) -> List[str]:
        lines = text.split(self.newline)
        # A final separator leaves empty strings behind; drop them
        while lines and lines[-1] == "":
            lines.pop()
        return lines

    def parse_lines(self, lines: Iterable[str]) -> ParsedDocument:
        """
        Parse a report that has already been split into lines.

        Args:
            lines: Report lines without separators

        Returns:
            Mapping of section name to section content, in header order
        """
        document: ParsedDocument = {}
        state = ParserState()
        for line in lines:
            self.process_line(state, line, document)
            state.previous_line = line
        return document

    def process_line(self, state: ParserState, line: str, document: ParsedDocument) -> None:
        """Apply one line to the parser state and the output."""
        rules = self.config.section(state.section)

        if is_skipped(line, rules.skip_patterns):
            return

        collection = match_collection(line, state.previous_line, rules.collections)
        if collection is not None and state.section is not None:
            state.collection = collection.name
            state.key = None
            items = _collection_items(document[state.section], collection.name)
            if isinstance(collection, TableCollection):
                state.table = TableLayout.from_header(line, collection.table_columns)
                logger.debug(
                    "Table %r in %r, column offsets %s",
                    collection.name,
                    state.section,
                    state.table.offsets,
                )
                # The header carries no field data
                return
            items.append({})

        if key_ended(line):
            state.key = None

        if state.section is not None and state.key is not None:
            _append_continuation(_target(document, state), state.key, line.rstrip())

        name = section_name(line)
        if name is not None:
            self._start_section(state, name, document)
        elif state.table is not None:
            if not line:
                logger.debug("Table %r in %r closed", state.collection, state.section)
                state.collection = None
                state.table = None
            else:
                items = _collection_items(document[state.section], state.collection)
                items.append(state.table.decode(line))
        elif state.key is None and state.section is not None:
            self._store_key_values(state, line, rules, document)

    def _start_section(self, state: ParserState, name: str, document: ParsedDocument) -> None:
        if name in document:
            logger.debug("Section %r seen again; appending to existing content", name)
        else:
            logger.debug("Section %r", name)
        state.section = name
        state.collection = None
        state.table = None
        document.setdefault(name, {})

    def _store_key_values(
        self,
        state: ParserState,
        line: str,
        rules: SectionConfig,
        document: ParsedDocument,
    ) -> None:
        values = key_values(line, rules.same_line_keys)
        if not values:
            return
        target = _target(document, state)
        for key, value in values.items():
            target[key] = clean_value(value)
            state.key = key


def _collection_items(content: SectionContent, name: Optional[str]) -> List[Item]:
    """Return the item list for a collection, creating it if needed."""
    items = content.get(name)
    if not isinstance(items, list):
        items = []
        content[name] = items
    return items


def _target(document: ParsedDocument, state: ParserState) -> dict:
    """The mapping fields are written to: the open item, else the section."""
    content = document[state.section]
    if state.collection is not None:
        items = content.get(state.collection)
        if isinstance(items, list) and items:
            return items[-1]
    return content


def _append_continuation(target: dict, key: str, text: str) -> None:
    existing = target.get(key)
    if isinstance(existing, str):
        text = f"{existing} \n{text}"
    target[key] = text or None


def parse_text(
    text: str, config: Optional[ParserConfig] = None, newline: str = "\n"
) -> ParsedDocument:
    """
    Parse a Blue Button report.

    Args:
        text: Report text
        config: Section rules (defaults to the built-in report sections)
        newline: Line separator

    Returns:
        Parsed document
    """
    return BlueButtonParser(config, newline).parse(text)
