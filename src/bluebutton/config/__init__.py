"""
bluebutton.config - Configuration loading and defaults
"""

from bluebutton.config.defaults import DEFAULT_CONFIG, DEFAULT_SECTIONS
from bluebutton.config.loader import (
    build_parser_config,
    config_to_toml,
    find_config_file,
    get_config,
    load_config,
    merge_configs,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_SECTIONS",
    "build_parser_config",
    "config_to_toml",
    "find_config_file",
    "get_config",
    "load_config",
    "merge_configs",
]
