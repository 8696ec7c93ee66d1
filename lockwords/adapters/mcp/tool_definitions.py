"""
MCP Tool Definitions

Single source of truth for tool schemas and descriptions.
Used by both stdio and HTTP/SSE servers.
"""

_WHEELS_PROPERTY = {
    "type": "string",
    "description": "Inline wheel spec in wheel file format: wheel count, letters per wheel, "
                   "then one line of letters per wheel. Uses the configured wheel file if omitted."
}

# Tool schemas for MCP
TOOL_SCHEMAS = {
    "find_combinations": {
        "name": "find_combinations",
        "description": """Find every dictionary word the letter-wheel lock can spell, with alignment counts.

find_combinations() → {combinations: [{word: "ab", count: 2, offsets: [0, 1]}], total: 4}
find_combinations(wheels="3\\n2\\nab\\nab\\nab", dictionary="ab\\nba") → inline lock and words
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "wheels": _WHEELS_PROPERTY,
                "dictionary": {
                    "type": "string",
                    "description": "Newline-separated candidate words. Uses the configured dictionary file if omitted."
                },
                "strict": {
                    "type": "boolean",
                    "description": "Abort on dictionary lines longer than 255 characters instead of skipping them (default: server setting)"
                },
                "max_results": {
                    "type": "integer",
                    "description": "Maximum combinations to list (0 for all; totals always cover everything)",
                    "default": 100
                }
            },
            "required": []
        }
    },
    "check_word": {
        "name": "check_word",
        "description": """Check whether one word can be dialled on the lock and at which offsets.

check_word("ab") → {matched: true, count: 2, offsets: [0, 1]}
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "word": {
                    "type": "string",
                    "description": "Word to check (letters a-z, case-insensitive)"
                },
                "wheels": _WHEELS_PROPERTY
            },
            "required": ["word"]
        }
    },
    "describe_lock": {
        "name": "describe_lock",
        "description": """Show the lock: wheel count, letters per wheel and the letters on each wheel.

describe_lock() → {wheel_count: 3, letters_per_wheel: 2, wheels: ["ab", "ab", "ab"]}
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "wheels": _WHEELS_PROPERTY
            },
            "required": []
        }
    },
}
