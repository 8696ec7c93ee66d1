#!/usr/bin/env python3
"""
MCP HTTP/SSE Server - Hexagonal Architecture

HTTP/SSE server using dependency injection and hexagonal architecture.

Run with: uvicorn lockwords.server_http:app --host 127.0.0.1 --port 5003

Configuration:
- PORT: Server port (default: 5003)
- LOCKWORDS_WHEELS: Wheel specification file (default: wheels.txt)
- LOCKWORDS_DICTIONARY: Dictionary file (default: dictionary.txt)
- LOCKWORDS_STRICT: Abort on over-long dictionary lines (default: off)
"""

import json
import logging
import signal
import sys
from typing import Any

from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.types import TextContent, Tool
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route

from .adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from .config import configure_logging, get_dictionary_path, get_port, get_strict, get_wheels_path
from .container import Container
from .formatters import FORMATTERS

configure_logging(logging.INFO)
logger = logging.getLogger(__name__)

# Initialize dependency injection container
container = Container(
    wheels_path=get_wheels_path(),
    dictionary_path=get_dictionary_path(),
    strict=get_strict()
)

# Initialize MCP handlers
handlers = MCPHandlers(container)

# MCP Server instance
mcp_server = Server("lockwords")

# SSE transport for multi-client support
sse_transport = SseServerTransport("/messages")


@mcp_server.list_tools()  # type: ignore[misc,no-untyped-call]
async def list_tools() -> list[Tool]:
    """List available MCP tools"""
    return [Tool(**schema) for schema in TOOL_SCHEMAS.values()]


@mcp_server.call_tool()  # type: ignore[misc,no-untyped-call]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls"""
    logger.info(f"call_tool: {name} args={arguments}")

    try:
        result = await _dispatch_tool(name, arguments)
    except Exception as e:
        logger.error(f"call_tool: {name} FAILED: {e}")
        raise

    formatter = FORMATTERS.get(name)
    if formatter:
        formatted_text = formatter(result)
    else:
        formatted_text = json.dumps(result, indent=2)

    logger.info(f"call_tool: {name} returning {len(formatted_text)} chars")
    return [TextContent(type="text", text=formatted_text)]


async def _dispatch_tool(name: str, arguments: dict[str, Any]) -> Any:
    """Dispatch tool call to appropriate handler"""
    if name == "find_combinations":
        return await handlers.find_combinations(
            wheels=arguments.get("wheels"),
            dictionary=arguments.get("dictionary"),
            strict=arguments.get("strict"),
            max_results=arguments.get("max_results", 100)
        )

    elif name == "check_word":
        return await handlers.check_word(
            word=arguments["word"],
            wheels=arguments.get("wheels")
        )

    elif name == "describe_lock":
        return await handlers.describe_lock(wheels=arguments.get("wheels"))

    else:
        raise ValueError(f"Unknown tool: {name}")


# HTTP routes
async def handle_ping(request: Request) -> Response:
    """Health check endpoint"""
    return JSONResponse({"status": "ok"})


async def handle_sse(request: Request) -> Response:
    """SSE endpoint for MCP communication"""
    client_addr = request.client.host if request.client else "unknown"
    logger.info(f"SSE connect from {client_addr}")
    async with sse_transport.connect_sse(
        request.scope, request.receive, request._send
    ) as streams:
        logger.info(f"SSE session started for {client_addr}")
        await mcp_server.run(
            streams[0], streams[1], mcp_server.create_initialization_options()
        )
        logger.info(f"SSE disconnect from {client_addr}")
    return Response()


routes = [
    Route("/ping", handle_ping),
    Route("/sse", handle_sse),
    Mount("/messages", app=sse_transport.handle_post_message),
]

app = Starlette(routes=routes)


def handle_sigterm(signum, frame):
    logger.info("Received SIGTERM, shutting down gracefully...")
    sys.exit(0)


def main():
    import uvicorn
    signal.signal(signal.SIGTERM, handle_sigterm)
    port = get_port()
    logger.info(f"Starting MCP HTTP server on port {port}")
    uvicorn.run(app, host="127.0.0.1", port=port)


if __name__ == "__main__":
    main()
