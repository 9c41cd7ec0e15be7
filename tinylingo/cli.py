#!/usr/bin/env python
# TinyLingo - Command Line
# ========================
"""
TinyLingo command line.

Records terms whose meaning is specific to your projects and tests how
messages match against them.

Usage:
    tinylingo record "提交" "git commit only, never push"
    tinylingo remove "提交"
    tinylingo list
    tinylingo config
    tinylingo config smart.enabled true
    tinylingo match "帮我提交代码"
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from tinylingo import TinyLingoError, __version__
from tinylingo.glossary import GlossaryStore
from tinylingo.log_setup import configure_logging
from tinylingo.matching import match_all
from tinylingo.settings import (
    load_config,
    get_config_value,
    set_config_value,
)

logger = logging.getLogger(__name__)


def cmd_record(args: argparse.Namespace) -> int:
    term = args.term
    GlossaryStore().add(term, " ".join(args.explanation))
    print(f"Recorded: {term.strip()}")
    return 0


def cmd_remove(args: argparse.Namespace) -> int:
    if GlossaryStore().remove(args.term):
        print(f"Removed: {args.term}")
        return 0
    print(f"Not found: {args.term}", file=sys.stderr)
    return 1


def cmd_list(args: argparse.Namespace) -> int:
    entries = GlossaryStore().list()
    if not entries:
        print("No entries recorded.")
        return 0
    for term, explanation in entries.items():
        print(f"{term}: {explanation}")
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    if args.key is None:
        print(json.dumps(load_config().model_dump(), indent=2, ensure_ascii=False))
    elif args.value is None:
        value = get_config_value(args.key)
        if isinstance(value, dict):
            print(json.dumps(value, indent=2, ensure_ascii=False))
        else:
            print(value)
    else:
        set_config_value(args.key, args.value)
        print(f"Set {args.key} = {args.value}")
    return 0


def cmd_match(args: argparse.Namespace) -> int:
    message = " ".join(args.message)
    results = match_all(message, GlossaryStore().read(), load_config())

    if not results:
        print("No matches found.")
        return 0
    for result in results:
        print(f"[{result.source.value}] {result.term} -> {result.explanation}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per operation."""
    parser = argparse.ArgumentParser(
        prog="tinylingo",
        description="A terminology and behavior memory tool for AI assistants"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    record = subparsers.add_parser("record", help="Add or update a glossary entry")
    record.add_argument("term", help="Trigger term")
    record.add_argument("explanation", nargs="+", help="What the term means in your projects")
    record.set_defaults(func=cmd_record)

    remove = subparsers.add_parser("remove", help="Remove a glossary entry")
    remove.add_argument("term", help="Term to remove")
    remove.set_defaults(func=cmd_remove)

    list_parser = subparsers.add_parser("list", help="List all glossary entries")
    list_parser.set_defaults(func=cmd_list)

    config = subparsers.add_parser(
        "config",
        help="Show or set configuration",
        description="No args: show all config. One arg: show a value. Two args: set a value."
    )
    config.add_argument("key", nargs="?", help="Dot-separated key, e.g. smart.endpoint")
    config.add_argument("value", nargs="?", help="New value (true/false/numbers are typed)")
    config.set_defaults(func=cmd_config)

    match = subparsers.add_parser("match", help="Test matching against the glossary")
    match.add_argument("message", nargs="+", help="Message to match")
    match.set_defaults(func=cmd_match)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    try:
        return args.func(args)
    except TinyLingoError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
