"""MCP server — the entry point a tool host connects to.

Exposes every tool in ``avni_mcp.tools.registry.TOOLS`` over the Model
Context Protocol using stdio transport. Logs go to stderr: stdout carries
the protocol messages.

Run locally with:
    avni-mcp-server
or:
    python -m avni_mcp.server
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from avni_mcp.avni_client import close_client
from avni_mcp.config import AVNI_BASE_URL, LOG_LEVEL
from avni_mcp.tools.registry import TOOLS, ToolSpec, get_tool

logger = logging.getLogger(__name__)

app = Server("avni-mcp-server")


def _to_mcp_tool(spec: ToolSpec) -> Tool:
    return Tool(
        name=spec.name,
        description=spec.description,
        inputSchema=spec.input_schema(),
    )


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List all Avni tools with their parameter schemas."""
    logger.info("Listing %d available tools", len(TOOLS))
    return [_to_mcp_tool(spec) for spec in TOOLS]


# ToolSpec.invoke checks arguments and reports problems in the result text.
@app.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    """Run a tool and wrap its result string as text content.

    Raises:
        ValueError: If the tool name is unknown.
    """
    logger.info("Tool called: %s", name)

    try:
        spec = get_tool(name)
    except KeyError:
        logger.error("Unknown tool: %s", name)
        raise ValueError(f"Unknown tool: {name}") from None

    try:
        result = await spec.invoke(arguments)
    except Exception as e:
        # Tools report Avni failures in their result string; anything that
        # escapes is a bug, but the host still gets a readable answer.
        logger.error("Error executing tool %s: %s", name, e, exc_info=True)
        result = f"Error executing tool {name}: {e}"

    return [TextContent(type="text", text=result)]


async def serve() -> None:
    """Serve the tools over stdio until the host disconnects."""
    logger.info("Starting Avni MCP server against %s", AVNI_BASE_URL)
    logger.info("Available tools: %d", len(TOOLS))
    try:
        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream,
                write_stream,
                app.create_initialization_options(),
            )
    finally:
        await close_client()


def main() -> None:
    """Console entry point."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        logger.info("Server stopped by user")


if __name__ == "__main__":
    main()
