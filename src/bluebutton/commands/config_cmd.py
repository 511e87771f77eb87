"""
bluebutton.commands.config_cmd - Inspect configuration.

- `bluebutton config path` - Show which .bluebutton.toml is in effect
- `bluebutton config show` - Print the effective section rules as TOML
"""

import argparse
import sys


def run(args: argparse.Namespace) -> int:
    """Run the config command."""
    from bluebutton.config import build_parser_config, config_to_toml, find_config_file, get_config

    config_path = getattr(args, "config", None)
    action = args.config_action

    if action == "path":
        path = config_path or find_config_file()
        if path is None:
            print("No .bluebutton.toml found (using built-in sections)", file=sys.stderr)
            return 1
        print(path)
        return 0

    if action == "show":
        data = get_config(config_path)
        use_defaults = False if getattr(args, "no_defaults", False) else None
        config = build_parser_config(data, use_defaults=use_defaults)
        print(config_to_toml(config, data["options"]), end="")
        return 0

    print("Usage: bluebutton config <path|show>", file=sys.stderr)
    return 1
