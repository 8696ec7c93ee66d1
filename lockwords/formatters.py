"""
Text formatters for handler results

Format handler results as compact plain-text output.
Used by both CLI and MCP adapters for consistent presentation.
"""

from typing import Any


def format_error(result: dict[str, Any]) -> str:
    kind = result.get("error_kind")
    suffix = f" [{kind}]" if kind else ""
    return f"ERROR: {result.get('error', 'Unknown error')}{suffix}"


def format_find_combinations(result: dict[str, Any]) -> str:
    """Format find_combinations result.

    Example output:
        LOCK 3x2 | 2 COMBINATIONS | 4 ALIGNMENTS

        ab      2  @ 0,1
        ba      2  @ 0,1

        READ: 3 words | SKIPPED: 0 invalid, 0 too long, 0 longer than lock
        Found 4 words.
    """
    if not result.get("success"):
        return format_error(result)

    lock = result["lock"]
    lines = [
        f"LOCK {lock['wheel_count']}x{lock['letters_per_wheel']} | "
        f"{result['combination_count']:,} COMBINATIONS | {result['total']:,} ALIGNMENTS",
        "",
    ]

    combinations = result["combinations"]
    if combinations:
        width = max(len(c["word"]) for c in combinations)
        for c in combinations:
            offsets = ",".join(str(o) for o in c["offsets"])
            lines.append(f"{c['word']:<{width}}  {c['count']:>3}  @ {offsets}")
        if result.get("truncated"):
            hidden = result["combination_count"] - len(combinations)
            lines.append(f"... {hidden:,} more")
        lines.append("")

    skipped = result["skipped"]
    lines.append(
        f"READ: {result['words_read']:,} words | SKIPPED: {skipped['invalid']:,} invalid, "
        f"{skipped['too_long']:,} too long, {skipped['longer_than_lock']:,} longer than lock"
    )
    lines.append(f"Found {result['total']} words.")
    return "\n".join(lines)


def format_check_word(result: dict[str, Any]) -> str:
    """Format check_word result.

    Example output:
        ab | MATCH | 2 alignments @ 0,1
    """
    if not result.get("success"):
        return format_error(result)

    if not result["matched"]:
        return f"{result['word']} | NO MATCH"

    offsets = ",".join(str(o) for o in result["offsets"])
    noun = "alignment" if result["count"] == 1 else "alignments"
    return f"{result['word']} | MATCH | {result['count']} {noun} @ {offsets}"


def format_describe_lock(result: dict[str, Any]) -> str:
    """Format describe_lock result.

    Example output:
        LOCK 3 wheels x 2 letters (wheels.txt)

        0  ab
        1  ab
        2  ab
    """
    if not result.get("success"):
        return format_error(result)

    lines = [
        f"LOCK {result['wheel_count']} wheels x {result['letters_per_wheel']} letters ({result['source']})",
        "",
    ]
    width = len(str(result["wheel_count"] - 1))
    for i, letters in enumerate(result["wheels"]):
        lines.append(f"{i:>{width}}  {letters}")
    return "\n".join(lines)


FORMATTERS = {
    "find_combinations": format_find_combinations,
    "check_word": format_check_word,
    "describe_lock": format_describe_lock,
}
