"""
bluebutton.commands.sections_cmd - List configured sections.
"""

import argparse

from bluebutton.core.models import ItemCollection


def run(args: argparse.Namespace) -> int:
    """Run the sections command."""
    from bluebutton.config import build_parser_config, get_config

    data = get_config(getattr(args, "config", None))
    use_defaults = False if getattr(args, "no_defaults", False) else None
    config = build_parser_config(data, use_defaults=use_defaults)

    for name, section in config.items():
        print(name)
        for collection in section.collections:
            if isinstance(collection, ItemCollection):
                kind = f"items starting with '{collection.item_starts_with}:'"
            else:
                kind = f"table of {len(collection.table_columns)} columns"
            print(f"  {collection.name}: {kind}")

    return 0
