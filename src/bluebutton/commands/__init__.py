"""
bluebutton.commands - CLI command implementations
"""

__all__ = [
    "config_cmd",
    "parse_cmd",
    "sections_cmd",
]
