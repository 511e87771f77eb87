"""
bluebutton.commands.parse_cmd - Parse a report and emit JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def _read_input(source: str, encoding: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f"Report not found: {path}")
    return path.read_text(encoding=encoding)


def _newline(args: argparse.Namespace, options: dict) -> str:
    """Separator from --newline (backslash escapes allowed) or the config."""
    if args.newline:
        return args.newline.encode("utf-8").decode("unicode_escape")
    return options["newline"]


def run(args: argparse.Namespace) -> int:
    """Run the parse command."""
    from bluebutton.config import build_parser_config, get_config
    from bluebutton.core.parser import BlueButtonParser

    data = get_config(getattr(args, "config", None))
    use_defaults = False if getattr(args, "no_defaults", False) else None
    config = build_parser_config(data, use_defaults=use_defaults)

    text = _read_input(args.input, args.encoding)
    parser = BlueButtonParser(config, newline=_newline(args, data["options"]))
    document = parser.parse(text)
    logger.info("Parsed %d sections from %s", len(document), args.input)

    if args.section:
        missing = [name for name in args.section if name not in document]
        for name in missing:
            logger.warning("Section not found in report: %s", name)
        document = {name: document[name] for name in args.section if name in document}

    output = json.dumps(document, indent=args.indent or None, ensure_ascii=False)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output + "\n", encoding="utf-8")
        if not args.quiet:
            print(f"Wrote {args.output}", file=sys.stderr)
    else:
        print(output)

    return 0
