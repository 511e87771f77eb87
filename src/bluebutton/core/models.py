"""
bluebutton.core.models - Configuration records and output types.

The per-section configuration is plain data: which lines to skip, which
keys share a physical line, and which repeated records (collections) the
section contains. The parser engine reads it but never changes it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

# Output shapes. A section maps keys to a scalar (or None) or to a list of
# items; items only ever hold scalars.
FieldValue = Optional[str]
Item = Dict[str, FieldValue]
SectionValue = Union[FieldValue, List[Item]]
SectionContent = Dict[str, SectionValue]
ParsedDocument = Dict[str, SectionContent]


@dataclass(frozen=True)
class ItemCollection:
    """
    A collection whose items each start with a sentinel field.

    Attributes:
        name: Key the item list is stored under in the section
        item_starts_with: Field label that opens a new item ("<label>:")
    """

    name: str
    item_starts_with: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "item_starts_with": self.item_starts_with}


@dataclass(frozen=True)
class TableCollection:
    """
    A collection rendered as a fixed-width table.

    Attributes:
        name: Key the row list is stored under in the section
        table_columns: Column labels as they appear in the header line,
            left to right (surrounding whitespace is significant)
        table_starts_with: Optional prefix the line above the header must have
    """

    name: str
    table_columns: Tuple[str, ...]
    table_starts_with: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "table_columns": list(self.table_columns)}
        if self.table_starts_with is not None:
            data["table_starts_with"] = self.table_starts_with
        return data


CollectionConfig = Union[ItemCollection, TableCollection]


def collection_from_dict(name: str, data: Mapping[str, Any]) -> CollectionConfig:
    """
    Build a collection definition from a configuration dictionary.

    Args:
        name: Collection name
        data: Dictionary with either ``item_starts_with`` or ``table_columns``
            (plus optional ``table_starts_with``)

    Returns:
        ItemCollection or TableCollection

    Raises:
        ValueError: If the definition is not a table, or is neither (or both) kinds
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Collection '{name}' must be a table, got {type(data).__name__}")
    item_starts_with = data.get("item_starts_with")
    table_columns = data.get("table_columns")

    if item_starts_with and table_columns:
        raise ValueError(
            f"Collection '{name}' defines both item_starts_with and table_columns"
        )
    if item_starts_with:
        return ItemCollection(name=name, item_starts_with=str(item_starts_with))
    if table_columns:
        if isinstance(table_columns, str):
            raise ValueError(f"Collection '{name}': table_columns must be a list of labels")
        starts_with = data.get("table_starts_with")
        return TableCollection(
            name=name,
            table_columns=tuple(str(c) for c in table_columns),
            table_starts_with=str(starts_with) if starts_with else None,
        )
    raise ValueError(f"Collection '{name}' needs item_starts_with or table_columns")


def _normalize_key_groups(section: str, value: Any) -> Tuple[Tuple[str, ...], ...]:
    """Accept a single label, one flat group of labels, or a list of groups."""
    if not value:
        return ()
    if isinstance(value, str):
        return ((value,),)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"Section '{section}': same_line_keys must be a list of labels")
    if all(isinstance(v, str) for v in value):
        return (tuple(value),)

    groups = []
    for group in value:
        if not isinstance(group, (list, tuple)) or not all(isinstance(k, str) for k in group):
            raise ValueError(
                f"Section '{section}': same_line_keys must be one list of labels "
                f"or a list of label lists, not a mix ({group!r})"
            )
        if group:
            groups.append(tuple(group))
    return tuple(groups)


def _normalize_collections(section: str, value: Any) -> Tuple[CollectionConfig, ...]:
    """Accept a name -> definition mapping or a list of named definitions."""
    if not value:
        return ()
    if isinstance(value, Mapping):
        return tuple(collection_from_dict(name, data) for name, data in value.items())
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ValueError(f"Section '{section}': collections must be a table or a list of tables")

    collections = []
    for data in value:
        if not isinstance(data, Mapping):
            raise ValueError(
                f"Section '{section}': collection entries must be tables, got {data!r}"
            )
        name = data.get("name")
        if not name:
            raise ValueError(f"Section '{section}': collection definitions in a list need a 'name'")
        collections.append(collection_from_dict(name, data))
    return tuple(collections)


@dataclass(frozen=True)
class SectionConfig:
    """
    Rules for one report section.

    Attributes:
        name: Section name, matched exactly against the banner text
        skip_lines: Regular expressions; matching lines are dropped
        same_line_keys: Groups of keys that share one physical line, tried in order
        collections: Collection definitions, tried in order (first match wins)
    """

    name: str = ""
    skip_lines: Tuple[str, ...] = ()
    same_line_keys: Tuple[Tuple[str, ...], ...] = ()
    collections: Tuple[CollectionConfig, ...] = ()
    skip_patterns: Tuple["re.Pattern[str]", ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        patterns = []
        for pattern in self.skip_lines:
            try:
                patterns.append(re.compile(pattern))
            except re.error as e:
                raise ValueError(
                    f"Section '{self.name}': invalid skip_lines pattern {pattern!r}: {e}"
                ) from e
        object.__setattr__(self, "skip_patterns", tuple(patterns))

    @classmethod
    def from_dict(cls, name: str, data: Mapping[str, Any]) -> "SectionConfig":
        """
        Create SectionConfig from a configuration dictionary.

        Args:
            name: Section name
            data: Dictionary with optional keys skip_lines, same_line_keys,
                collection (mapping) or collections (list of tables)

        Returns:
            SectionConfig instance

        Raises:
            ValueError: If the rules are not a table or a rule has the wrong shape
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Section '{name}': rules must be a table, got {data!r}")
        collections = data.get("collections", data.get("collection"))
        skip_lines = data.get("skip_lines") or ()
        if isinstance(skip_lines, str):
            skip_lines = (skip_lines,)
        return cls(
            name=name,
            skip_lines=tuple(skip_lines),
            same_line_keys=_normalize_key_groups(name, data.get("same_line_keys")),
            collections=_normalize_collections(name, collections),
        )

    def get_collection(self, name: Optional[str]) -> Optional[CollectionConfig]:
        """Look up a collection definition by name."""
        for collection in self.collections:
            if collection.name == name:
                return collection
        return None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.skip_lines:
            data["skip_lines"] = list(self.skip_lines)
        if self.same_line_keys:
            data["same_line_keys"] = [list(group) for group in self.same_line_keys]
        if self.collections:
            data["collections"] = [c.to_dict() for c in self.collections]
        return data


# Rules used for sections with no configuration (and before the first header)
EMPTY_SECTION = SectionConfig()


class ParserConfig(Mapping[str, SectionConfig]):
    """
    Ordered, read-only mapping of section name to SectionConfig.

    Unknown sections resolve to an empty rule set through ``section()``,
    so lookups never fail during a parse.
    """

    def __init__(self, sections: Iterable[SectionConfig] = ()) -> None:
        self._sections: Dict[str, SectionConfig] = {}
        for section in sections:
            self._sections[section.name] = section

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, Any]]) -> "ParserConfig":
        """Create ParserConfig from a section name -> rules dictionary."""
        return cls(
            SectionConfig.from_dict(name, {} if rules is None else rules)
            for name, rules in data.items()
        )

    def __getitem__(self, name: str) -> SectionConfig:
        return self._sections[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __repr__(self) -> str:
        return f"ParserConfig(sections={list(self._sections)!r})"

    def section(self, name: Optional[str]) -> SectionConfig:
        """Return the rules for a section, or empty rules if none are configured."""
        if name is None:
            return EMPTY_SECTION
        return self._sections.get(name, EMPTY_SECTION)

    def merged(self, other: "ParserConfig") -> "ParserConfig":
        """
        Overlay another config on this one.

        Sections in ``other`` replace same-named sections in place; new
        sections are appended in ``other``'s order.
        """
        sections = dict(self._sections)
        sections.update(other._sections)
        return ParserConfig(sections.values())

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {name: section.to_dict() for name, section in self._sections.items()}
