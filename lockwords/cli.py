#!/usr/bin/env python3
"""
CLI for lockwords - find dictionary words a letter-wheel lock can spell

Usage:
  lockwords                                   # Solve using ./wheels.txt and ./dictionary.txt
  lockwords solve --strict                    # Abort on dictionary lines over 255 chars
  lockwords --wheels w.txt --dictionary d.txt solve
  lockwords check ABBA                        # Alignments for one word
  lockwords describe                          # Show the letters on each wheel
  lockwords list-tools                        # Show MCP tool definitions

Paths default to $LOCKWORDS_WHEELS / $LOCKWORDS_DICTIONARY.
"""

import argparse
import asyncio
import json
import logging
import sys

from .adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from .config import configure_logging, get_dictionary_path, get_strict, get_wheels_path
from .container import Container
from .core.errors import LockwordsError
from .formatters import format_check_word, format_describe_lock

logger = logging.getLogger(__name__)


def list_tools_command() -> int:
    """Show MCP tool definitions"""
    print("=" * 80)
    print("MCP TOOL DEFINITIONS")
    print("=" * 80)
    print()

    for tool_schema in TOOL_SCHEMAS.values():
        print(f"Tool: {tool_schema['name']}")
        print()
        print("Description:")
        print(tool_schema['description'])
        print()
        print("Input Schema:")
        print(json.dumps(tool_schema['inputSchema'], indent=2))
        print()
        print("-" * 80)
        print()

    return 0


def solve_command(container: Container) -> int:
    """Print each combination, then the total alignment count"""
    try:
        lock = container.load_lock.execute()
        report = container.scan_dictionary.execute(lock)
    except LockwordsError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    for result in report.matches:
        print(result.word)
    print(f"Found {report.total} words.")

    if report.skipped_too_long:
        logger.warning(f"{report.skipped_too_long} over-long dictionary lines were skipped")
    return 0


async def check_command(container: Container, word: str) -> int:
    """Check a single word against the lock"""
    handlers = MCPHandlers(container)
    result = await handlers.check_word(word=word)

    output = format_check_word(result)
    if not result["success"]:
        print(output, file=sys.stderr)
        return 1

    print(output)
    return 0


async def describe_command(container: Container) -> int:
    """Show the lock's wheels"""
    handlers = MCPHandlers(container)
    result = await handlers.describe_lock()

    output = format_describe_lock(result)
    if not result["success"]:
        print(output, file=sys.stderr)
        return 1

    print(output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lockwords",
        description="Find dictionary words that a letter-wheel combination lock can spell"
    )
    parser.add_argument(
        "--wheels",
        default=str(get_wheels_path()),
        help="Wheel specification file (default: $LOCKWORDS_WHEELS or wheels.txt)"
    )
    parser.add_argument(
        "--dictionary",
        default=str(get_dictionary_path()),
        help="Dictionary file, one word per line (default: $LOCKWORDS_DICTIONARY or dictionary.txt)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress and skipped words to stderr"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run (default: solve)")

    # solve command
    solve_parser = subparsers.add_parser("solve", help="List every combination in the dictionary")
    solve_parser.add_argument(
        "--strict",
        action="store_true",
        default=get_strict(),
        help="Abort on dictionary lines longer than 255 characters (default: skip them)"
    )

    # check command
    check_parser = subparsers.add_parser("check", help="Check one word against the lock")
    check_parser.add_argument("word", help="Word to check (letters a-z, any case)")

    # describe command
    subparsers.add_parser("describe", help="Show the letters on each wheel")

    # list-tools command
    subparsers.add_parser("list-tools", help="Show MCP tool definitions")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    command = args.command or "solve"
    strict = getattr(args, "strict", get_strict())

    if command == "list-tools":
        return list_tools_command()

    container = Container(
        wheels_path=args.wheels,
        dictionary_path=args.dictionary,
        strict=strict
    )

    try:
        if command == "solve":
            return solve_command(container)
        elif command == "check":
            return asyncio.run(check_command(container, args.word))
        elif command == "describe":
            return asyncio.run(describe_command(container))
        else:
            parser.print_help()
            return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
