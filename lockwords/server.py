"""
lockwords MCP Server (stdio)

MCP delivery layer - wraps the hexagonal core as FastMCP tools.
Separation of concerns: this file only handles MCP protocol.
"""
import argparse
import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .adapters.mcp import MCPHandlers
from .config import configure_logging, get_dictionary_path, get_strict, get_wheels_path
from .container import Container

logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP("lockwords")

container = Container(
    wheels_path=get_wheels_path(),
    dictionary_path=get_dictionary_path(),
    strict=get_strict()
)
handlers = MCPHandlers(container)


@mcp.tool()
async def find_combinations(
    wheels: Optional[str] = None,
    dictionary: Optional[str] = None,
    strict: Optional[bool] = None,
    max_results: int = 100
) -> dict:
    """
    Find every dictionary word the letter-wheel lock can spell.

    A word is a combination when, at some offset, each of its letters is on
    the wheel it lines up with. Every matching offset is counted.

    Args:
        wheels: Optional inline wheel spec ("3\\n2\\nab\\nab\\nab"). Defaults to the wheel file.
        dictionary: Optional newline-separated words. Defaults to the dictionary file.
        strict: Abort on dictionary lines over 255 characters instead of skipping them.
            Defaults to the server setting (--strict or LOCKWORDS_STRICT).
        max_results: Maximum combinations to list (0 for all).

    Returns:
        Dictionary with combinations, per-word counts and offsets, and the total.

    Example:
        find_combinations(wheels="3\\n2\\nab\\nab\\nab", dictionary="ab\\nabc\\nba")
        → {combinations: [{word: "ab", count: 2}, {word: "ba", count: 2}], total: 4}
    """
    return await handlers.find_combinations(
        wheels=wheels,
        dictionary=dictionary,
        strict=strict,
        max_results=max_results
    )


@mcp.tool()
async def check_word(word: str, wheels: Optional[str] = None) -> dict:
    """
    Check one word against the lock.

    Args:
        word: Word to check (a-z, case-insensitive)
        wheels: Optional inline wheel spec. Defaults to the wheel file.

    Returns:
        Dictionary with matched flag, alignment count and offsets.
    """
    return await handlers.check_word(word=word, wheels=wheels)


@mcp.tool()
async def describe_lock(wheels: Optional[str] = None) -> dict:
    """
    Show the lock's wheel count, letters per wheel and the letters on each wheel.

    Args:
        wheels: Optional inline wheel spec. Defaults to the wheel file.
    """
    return await handlers.describe_lock(wheels=wheels)


def main():
    """Main entry point for the MCP server."""
    global container, handlers

    parser = argparse.ArgumentParser(
        description="lockwords: letter-wheel lock combinations over MCP."
    )
    parser.add_argument(
        "--wheels",
        default=None,
        help=f"Wheel specification file (default: {get_wheels_path()}, or set LOCKWORDS_WHEELS env var)"
    )
    parser.add_argument(
        "--dictionary",
        default=None,
        help=f"Dictionary file (default: {get_dictionary_path()}, or set LOCKWORDS_DICTIONARY env var)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=get_strict(),
        help="Abort on dictionary lines over 255 characters"
    )
    args = parser.parse_args()

    # stdout carries the protocol; logs go to stderr
    configure_logging(logging.INFO)

    if args.wheels or args.dictionary or args.strict != container.strict:
        container = Container(
            wheels_path=args.wheels or get_wheels_path(),
            dictionary_path=args.dictionary or get_dictionary_path(),
            strict=args.strict
        )
        handlers = MCPHandlers(container)

    logger.info(f"Wheels: {container.wheels.describe()} | Dictionary: {container.dictionary.describe()}")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
