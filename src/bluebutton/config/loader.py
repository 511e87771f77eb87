"""
bluebutton.config.loader - Configuration file loading.

Reads ``.bluebutton.toml`` files with tomlkit and turns their ``[sections]``
tables into a ParserConfig, optionally layered over the built-in sections.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import tomlkit
from tomlkit.exceptions import TOMLKitError

from bluebutton.config.defaults import DEFAULT_CONFIG
from bluebutton.core.models import ParserConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".bluebutton.toml"

DEFAULT_OPTIONS: Dict[str, Any] = {
    "newline": "\n",
    "use_defaults": True,
}


def find_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Find a config file in a directory or any of its parents.

    Args:
        start_dir: Directory to start from (defaults to the working directory)

    Returns:
        Path to the config file, or None if not found
    """
    current = Path(start_dir or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(config_path: Path) -> Dict[str, Any]:
    """
    Load a configuration file.

    Args:
        config_path: Path to the TOML file

    Returns:
        Dictionary with "options" (defaults filled in) and "sections"

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid TOML or has the wrong shape
    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    content = config_path.read_text(encoding="utf-8")
    try:
        data = tomlkit.parse(content).unwrap()
    except TOMLKitError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    options = data.get("options", {})
    sections = data.get("sections", {})
    if not isinstance(options, dict):
        raise ValueError(f"{config_path}: [options] must be a table")
    if not isinstance(sections, dict):
        raise ValueError(f"{config_path}: [sections] must be a table")

    options = {**DEFAULT_OPTIONS, **options}
    newline = options["newline"]
    if not isinstance(newline, str) or not newline:
        raise ValueError(f"{config_path}: options.newline must be a non-empty string")

    logger.debug("Loaded config from %s (%d sections)", config_path, len(sections))
    return {
        "options": options,
        "sections": sections,
    }


def merge_configs(base: ParserConfig, override: ParserConfig) -> ParserConfig:
    """
    Overlay one configuration on another.

    Sections in ``override`` replace same-named sections of ``base``;
    sections new to ``base`` are appended.
    """
    return base.merged(override)


def build_parser_config(
    data: Mapping[str, Any], use_defaults: Optional[bool] = None
) -> ParserConfig:
    """
    Build the ParserConfig described by a loaded configuration.

    Args:
        data: Result of load_config (or an equivalent dictionary)
        use_defaults: Override the file's options.use_defaults

    Returns:
        ParserConfig ready for parsing

    Raises:
        ValueError: If a section has an invalid rule
    """
    options = {**DEFAULT_OPTIONS, **data.get("options", {})}
    if use_defaults is None:
        use_defaults = bool(options["use_defaults"])

    config = ParserConfig.from_dict(data.get("sections", {}))
    if use_defaults:
        return merge_configs(DEFAULT_CONFIG, config)
    return config


def get_config(
    config_path: Optional[Path] = None, start_dir: Optional[Path] = None
) -> Dict[str, Any]:
    """
    Load the explicit config file, or the nearest one, or an empty config.

    Args:
        config_path: Explicit config file path
        start_dir: Directory to search from when no path is given

    Returns:
        Configuration dictionary as returned by load_config
    """
    if config_path is None:
        config_path = find_config_file(start_dir)
    if config_path is None:
        return {"options": dict(DEFAULT_OPTIONS), "sections": {}}
    return load_config(config_path)


def config_to_toml(config: ParserConfig, options: Optional[Mapping[str, Any]] = None) -> str:
    """Render a configuration in the .bluebutton.toml format."""
    doc = tomlkit.document()
    doc.add("options", dict(options or DEFAULT_OPTIONS))
    doc.add("sections", config.to_dict())
    return tomlkit.dumps(doc)
